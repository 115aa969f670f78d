import logging
from datetime import UTC, datetime
from typing import Any

from fastapi import Request


def get_client_ip(request: Request) -> str:
    """Client address, preferring the first X-Forwarded-For hop."""
    forwarded_for = request.headers.get("X-Forwarded-For")
    if forwarded_for:
        client_ip = forwarded_for.split(",")[0].strip()
        if client_ip:
            return client_ip
    if request.client and request.client.host:
        return str(request.client.host)
    return "unknown"


def log_api_request(
    request: Request,
    response_status: int,
    process_time_ms: float | None = None,
    logger_name: str = "api",
) -> None:
    """Log API requests with consistent format.

    Args:
        request: FastAPI request object
        response_status: HTTP response status code
        process_time_ms: Request processing time in milliseconds
        logger_name: Name of the logger to use
    """
    logger = logging.getLogger(logger_name)

    log_data = {
        "method": request.method,
        "path": request.url.path,
        "status_code": response_status,
        "client_ip": get_client_ip(request),
        "user_agent": request.headers.get("user-agent", "Unknown")[:100],
    }

    if process_time_ms is not None:
        log_data["process_time_ms"] = str(round(process_time_ms, 2))

    # Different log levels based on status code
    if response_status >= 500:
        log_level = logging.ERROR
    elif response_status >= 400:
        log_level = logging.WARNING
    else:
        log_level = logging.INFO

    message = f"{request.method} {request.url.path} - {response_status}"
    if process_time_ms is not None:
        message += f" ({process_time_ms:.1f}ms)"

    logger.log(log_level, message, extra=log_data)


def log_plan_generated(
    category: str,
    intensity: str,
    health: str,
    has_notes: bool,
    logger_name: str = "plans",
) -> None:
    """Log a generated plan without echoing free-text user input.

    Args:
        category: Subject category the plan was built for
        intensity: Resolved intensity level
        health: Normalized health status
        has_notes: Whether the request carried a note
        logger_name: Name of the logger to use
    """
    logger = logging.getLogger(logger_name)

    logger.info(
        f"Plan generated: {category}/{intensity}",
        extra={
            "category": category,
            "intensity": intensity,
            "health": health,
            "has_notes": has_notes,
        },
    )


def log_system_info(hostname: str, ip_address: str, debug_mode: bool) -> None:
    """Log system startup information.

    Args:
        hostname: Server hostname
        ip_address: Server IP address
        debug_mode: Whether debug mode is enabled
    """
    logger = logging.getLogger("system")

    logger.info(
        "Application startup",
        extra={
            "hostname": hostname,
            "ip_address": ip_address,
            "debug_mode": debug_mode,
            "timestamp": datetime.now(UTC).isoformat(),
        },
    )


def log_validation_error(
    field: str, value: Any, error_message: str, logger_name: str = "validation"
) -> None:
    """Log validation errors with context.

    Args:
        field: Field name that failed validation
        value: The invalid value (will be sanitized)
        error_message: Validation error message
        logger_name: Name of the logger to use
    """
    logger = logging.getLogger(logger_name)

    # Sanitize sensitive values
    safe_value = str(value)[:100] if not _is_sensitive_field(field) else "[REDACTED]"

    logger.warning(
        f"Validation failed for field '{field}': {error_message}",
        extra={"field": field, "value": safe_value, "error": error_message},
    )


def _is_sensitive_field(field_name: str) -> bool:
    """Check if a field contains data that should not be logged verbatim.

    Args:
        field_name: Name of the field to check

    Returns:
        True if field is sensitive, False otherwise
    """
    sensitive_fields = {
        "password",
        "secret",
        "key",
        "token",
        "credential",
        "auth",
        "notes",
    }

    field_lower = field_name.lower()
    return any(sensitive in field_lower for sensitive in sensitive_fields)
