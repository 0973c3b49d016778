"""Observability configuration using Logfire.

Usage:
    import logfire

    # Structured logging
    logfire.info("Like toggled", post_id=post.id, likes=post.likes)

    # Manual spans for domain operations
    with logfire.span("post_service.toggle_like", post_id=post_id):
        ...
"""

import logfire
from fastapi import FastAPI

from forum.config import Settings


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for observability.

    Token Configuration:
    - Set OBSERVABILITY__LOGFIRE_TOKEN to enable cloud sending
    - If a token is present, telemetry is sent by default
    - OBSERVABILITY__SEND_TO_LOGFIRE overrides either way

    Args:
        settings: Application settings
    """
    # Priority: explicit setting > token presence > default (False)
    if settings.observability.send_to_logfire is not None:
        send_to_logfire = settings.observability.send_to_logfire
    else:
        send_to_logfire = bool(settings.observability.logfire_token)

    config_kwargs = {
        "service_name": "forum-backend",
        "service_version": settings.git_sha,
        "environment": settings.environment,
        "send_to_logfire": send_to_logfire,
        "console": logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    }

    if settings.observability.logfire_token:
        config_kwargs["token"] = settings.observability.logfire_token

    logfire.configure(**config_kwargs)

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        storage_backend=settings.storage.backend,
        send_to_logfire=send_to_logfire,
        has_token=bool(settings.observability.logfire_token),
    )


def _request_attributes(request, attributes: dict) -> dict:
    """Tag request spans with the post and comment they target."""
    params = getattr(request, "path_params", None) or {}
    tagged = {**attributes}
    for name in ("post_id", "comment_id", "admin_id", "user_id"):
        if name in params:
            tagged[name] = params[name]
    return tagged


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every request of the app with Logfire.

    Headers are never captured because they carry the admin session
    cookie.

    Args:
        app: FastAPI application instance
    """
    logfire.instrument_fastapi(app, request_attributes_mapper=_request_attributes)
    logfire.info("FastAPI instrumented")
