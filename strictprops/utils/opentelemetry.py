"""\
OpenTelemetry
=============

Author: Akshay Mestry <xa@mes3.dev>
Created on: Thursday, August 07 2025
Last updated on: Saturday, August 09 2025

This module provides `OpenTelemetry` integration for the package. The
tracer it configures is where `TracingObserver` events end up, attached
to whichever span is current when a violation happens.
"""

from __future__ import annotations

from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import (
    OTLPSpanExporter,
)
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor
from opentelemetry.sdk.trace.export import ConsoleSpanExporter
from opentelemetry.sdk.trace.export import SimpleSpanProcessor

from strictprops.core.config import Config

__all__: list[str] = ["get_tracer"]


def get_tracer(
    config: Config | None = None,
    name: str | None = None,
) -> trace.Tracer:
    """Configure and return a tracer.

    This function sets up an `OpenTelemetry TracerProvider` from the
    telemetry configuration. With telemetry disabled the provider has no
    processor. In debug mode spans are printed to the console, otherwise
    they are exported over OTLP.

    :param config: An optional configuration object. If not provided, a
        default `Config` instance is created.
    :param name: Override for the service name, defaults to `None`. If
        not provided, uses the name from the configuration.
    :return: A configured `OpenTelemetry Tracer` instance.
    """
    if config is None:
        config = Config()
    service = name or config.telemetry.name or config.name
    resource = Resource.create(
        {
            "service.name": service,
            "service.version": config.version,
            "deployment.environment": (
                "development" if config.telemetry.debug else "production"
            ),
            "telemetry.sdk.name": "strictprops",
        }
    )
    provider = TracerProvider(resource=resource)
    if config.telemetry.enabled:
        if config.telemetry.debug:
            processor = SimpleSpanProcessor(ConsoleSpanExporter())
        else:
            processor = BatchSpanProcessor(OTLPSpanExporter())
        provider.add_span_processor(processor)
    trace.set_tracer_provider(provider)
    return trace.get_tracer(service)
