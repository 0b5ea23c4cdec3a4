import os
from pathlib import Path
from typing import Optional

from aws_lambda_powertools.logging import Logger
from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field

logger = Logger()


class AppConfig(BaseModel):
    """Application configuration.

    Built once at start-up and never changed afterwards; every client is
    created from it.
    """

    model_config = ConfigDict(frozen=True)

    app_env: str = Field(
        description="Application environment (local, dev or prod)"
    )
    version: str = Field(description="Application version")
    commit_hash: str = Field(description="Commit hash")
    aws_region: str = Field(default="us-east-1", description="AWS region")
    dynamodb_endpoint_url: Optional[str] = Field(
        default=None,
        description="Custom DynamoDB endpoint, e.g. http://localhost:8000 for DynamoDB Local",
    )
    page_size: int = Field(
        default=25, ge=1, le=1000, description="Number of items per browsed page"
    )
    max_page_calls: int = Field(
        default=10,
        ge=1,
        description="Maximum scan/query calls issued to fill one page",
    )
    max_retries: int = Field(
        default=3, ge=0, description="Retries botocore performs per store call"
    )
    cors_allow_origin: str = Field(
        default="*", description="Origin allowed to call the API"
    )

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Load configuration from environment variables.

        In 'local' mode (default), it first loads variables from a .env file.
        In 'dev' and 'prod' modes, it reads directly from environment variables.
        """

        app_env = os.getenv("APP_ENV", "local").lower()
        logger.debug("App environment", extra={"app_env": app_env})
        if app_env == "local":
            dotenv_path = Path(".env")
            load_dotenv(dotenv_path=dotenv_path, override=True)
            logger.debug("Loaded .env file", extra={"dotenv_path": str(dotenv_path)})
        elif app_env not in ["dev", "prod"]:
            raise ValueError(f"Invalid app environment: {app_env}")

        return cls(
            app_env=app_env,
            version=os.getenv("VERSION", "unknown"),
            commit_hash=os.getenv("COMMIT_HASH", "unknown"),
            aws_region=os.getenv("AWS_REGION", "us-east-1"),
            dynamodb_endpoint_url=os.getenv("DYNAMODB_ENDPOINT_URL") or None,
            page_size=int(os.getenv("PAGE_SIZE", "25")),
            max_page_calls=int(os.getenv("MAX_PAGE_CALLS", "10")),
            max_retries=int(os.getenv("MAX_RETRIES", "3")),
            cors_allow_origin=os.getenv("CORS_ALLOW_ORIGIN", "*"),
        )
