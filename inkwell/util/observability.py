"""Observability configuration using Logfire.

Every request is traced by the FastAPI instrumentation and every query by the
SQLAlchemy one. Domain services open their own spans named
``<service>.<operation>``:

    with logfire.span("user_service.add_avatar", user_id=str(user_id)):
        ...
        logfire.info("Avatar added", user_id=str(user_id), avatar_count=n)

Credentials never reach telemetry: attributes whose names look like
passwords, digests or tokens are scrubbed before export.
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from inkwell.config import APP_VERSION, Settings

# Attribute names redacted on top of logfire's defaults
SCRUB_PATTERNS = ["password_hash", "digest", "bearer", "jwt"]


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for the API process.

    Console output is always on. Spans are exported to Logfire cloud when
    ``OBSERVABILITY__SEND_TO_LOGFIRE`` says so, or otherwise whenever
    ``OBSERVABILITY__LOGFIRE_TOKEN`` is set.

    Args:
        settings: Application settings
    """
    observability = settings.observability
    send_to_logfire = (
        observability.send_to_logfire
        if observability.send_to_logfire is not None
        else bool(observability.logfire_token)
    )

    logfire.configure(
        service_name="inkwell-api",
        service_version=APP_VERSION,
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        token=observability.logfire_token,
        scrubbing=logfire.ScrubbingOptions(extra_patterns=SCRUB_PATTERNS),
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every request with its method, path and client.

    Headers are not captured because ``Authorization`` carries the session
    token.

    Args:
        app: FastAPI application instance
    """

    def _request_attributes(request, attributes):
        result = {**attributes, "path": request.url.path}
        method = getattr(request, "method", None)
        if method:
            result["method"] = method
        if request.client:
            result["client_host"] = request.client.host
        return result

    logfire.instrument_fastapi(
        app,
        capture_headers=False,
        request_attributes_mapper=_request_attributes,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace queries issued through ``engine``.

    Args:
        engine: SQLAlchemy async engine
    """
    logfire.instrument_sqlalchemy(
        engine=engine.sync_engine,
        enable_commenter=True,  # Add SQL comments with span context
    )
