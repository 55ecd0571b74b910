"""Logfire setup for the API process.

Services log and trace through ``logfire`` directly::

    logfire.info("Story created", story_id=story.id, tags=story.tag_names)

    with logfire.span("story_service.delete_story", story_id=story_id):
        ...

This module only configures the SDK and instruments FastAPI and httpx.
"""

from typing import Any

import logfire
from fastapi import FastAPI

from sodfa.config import Settings

SERVICE_NAME = "sodfa-api"


def _should_send(settings: Settings) -> bool:
    # Explicit flag first, then presence of a write token
    explicit = settings.observability.send_to_logfire
    if explicit is not None:
        return explicit
    return bool(settings.observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure the Logfire SDK.

    Spans are printed to the console in every environment. They are also
    shipped to Logfire cloud when ``OBSERVABILITY__SEND_TO_LOGFIRE`` is set,
    or when it is unset and ``OBSERVABILITY__LOGFIRE_TOKEN`` is present.

    Args:
        settings: Application settings
    """
    send_to_logfire = _should_send(settings)

    options: dict[str, Any] = {
        "service_name": SERVICE_NAME,
        "service_version": "0.1.0",
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
        options["token"] = settings.observability.logfire_token

    logfire.configure(**options)
    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
    )


def _request_attributes(request, attributes: dict[str, Any]) -> dict[str, Any]:
    result = {**attributes, "path": request.url.path}
    # The pseudo identity header is not a secret but keep only whether it was sent
    result["has_client_id"] = "x-client-id" in request.headers
    if request.client:
        result["client_host"] = request.client.host
    if hasattr(request, "method"):
        result["method"] = request.method
    return result


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every request handled by the app.

    Args:
        app: FastAPI application instance
    """
    logfire.instrument_fastapi(app, request_attributes_mapper=_request_attributes)
    logfire.info("FastAPI instrumented")


def instrument_httpx() -> None:
    """Trace outbound httpx calls (Identity Toolkit requests)."""
    logfire.instrument_httpx()
    logfire.info("httpx instrumented")
