"""OpenTelemetry setup for the photofeed API.

Spans come from FastAPI requests, SQLAlchemy statements and the listing
pipeline (``traced``). Exporter is chosen by ``TELEMETRY_EXPORTER``:
``console``, ``otlp`` or ``none``.
"""

import logging

from fastapi import FastAPI
from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.instrumentation.sqlalchemy import SQLAlchemyInstrumentor
from opentelemetry.sdk.resources import SERVICE_NAME, SERVICE_VERSION, Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import (
    BatchSpanProcessor,
    ConsoleSpanExporter,
    SpanExporter,
)
from opentelemetry.sdk.trace.sampling import TraceIdRatioBased
from sqlalchemy.ext.asyncio import AsyncEngine

from photofeed.core.config import Settings

logger = logging.getLogger(__name__)

# Hit by load balancers every few seconds; not worth a span each.
UNTRACED_URLS = "/api/v1/health"

_provider: TracerProvider | None = None


def _build_exporter(settings: Settings) -> SpanExporter | None:
    kind = settings.telemetry_exporter.lower()
    if kind == "none":
        return None
    if kind == "otlp":
        endpoint = settings.telemetry_otlp_endpoint
        if not endpoint:
            raise ValueError("TELEMETRY_OTLP_ENDPOINT is required for the otlp exporter")
        return OTLPSpanExporter(endpoint=endpoint, insecure=endpoint.startswith("http://"))
    if kind != "console":
        logger.warning("Unknown telemetry exporter %r, falling back to console", kind)
    return ConsoleSpanExporter()


def configure_tracing(settings: Settings) -> TracerProvider:
    """Install the global tracer provider described by ``settings``."""
    global _provider
    resource = Resource(
        attributes={
            SERVICE_NAME: settings.app_name,
            SERVICE_VERSION: settings.app_version,
            "deployment.environment": settings.telemetry_environment,
        }
    )
    provider = TracerProvider(
        resource=resource,
        sampler=TraceIdRatioBased(settings.telemetry_sample_rate),
    )
    exporter = _build_exporter(settings)
    if exporter is not None:
        provider.add_span_processor(BatchSpanProcessor(exporter))
    trace.set_tracer_provider(provider)
    _provider = provider
    logger.info(
        "Tracing configured: service=%s exporter=%s sample_rate=%s",
        settings.app_name,
        settings.telemetry_exporter,
        settings.telemetry_sample_rate,
    )
    return provider


def instrument(app: FastAPI, engine: AsyncEngine | None) -> None:
    """Attach FastAPI and (when an engine exists) SQLAlchemy instrumentation."""
    if _provider is None:
        return
    FastAPIInstrumentor.instrument_app(
        app, tracer_provider=_provider, excluded_urls=UNTRACED_URLS
    )
    if engine is not None:
        SQLAlchemyInstrumentor().instrument(
            engine=engine.sync_engine, tracer_provider=_provider
        )


def shutdown_tracing() -> None:
    """Flush pending spans and forget the provider. Safe to call twice."""
    global _provider
    if _provider is None:
        return
    try:
        _provider.shutdown()
    except Exception:
        logger.exception("Tracer provider shutdown failed")
    finally:
        _provider = None
