import os
import threading

import psutil
from aws_lambda_powertools.logging import Logger
from aws_lambda_powertools.middleware_factory import lambda_handler_decorator

# Initialize logger outside the handler for performance
logger = Logger(service="table-admin-api")


def _memory_snapshot() -> dict:
    vm = psutil.virtual_memory()
    return {
        "memory_available_mb": vm.available // (1024 * 1024),
        "memory_percent_used": vm.percent,
    }


def _request_summary(event: dict) -> dict:
    """Method, path and query of an HTTP API event, without headers or body."""
    http = event.get("requestContext", {}).get("http", {})
    return {
        "method": http.get("method"),
        "path": event.get("rawPath"),
        "query": event.get("queryStringParameters") or {},
    }


@lambda_handler_decorator
def logging_middleware(handler, event, context):
    """Middleware to automatically handle structured logging."""
    logger.inject_lambda_context(handler.__name__)

    logger.info(
        "System details at start",
        extra={
            "system_info": {
                "cpu_cores": os.cpu_count(),
                "memory_limit_mb": context.memory_limit_in_mb,
                "active_threads": threading.active_count(),
                **_memory_snapshot(),
            }
        },
    )
    logger.info("Received request", extra={"request": _request_summary(event)})

    try:
        response = handler(event, context)
        logger.info(
            "Handler executed successfully",
            extra={
                "status_code": response.get("statusCode")
                if isinstance(response, dict)
                else None
            },
        )
        logger.info("System details at end", extra={"system_info": _memory_snapshot()})
        return response
    except Exception:
        logger.exception("Error processing request")
        # Re-raise the exception to be handled by the error handler middleware
        raise
