"""
OpenTelemetry (opcional):
- Si TELEMETRY_ENABLED=true y OTEL_EXPORTER_OTLP_ENDPOINT está definido,
  se inicializa la traza básica.
- No se envían autores ni contenido de mensajes; usa atributos genéricos.
"""
import logging
import os

logger = logging.getLogger("portfolio_api.telemetry")

def setup_otel() -> bool:
    enabled = os.getenv("TELEMETRY_ENABLED", "false").lower() == "true"
    endpoint = os.getenv("OTEL_EXPORTER_OTLP_ENDPOINT", "")
    if not enabled or not endpoint:
        return False

    try:
        from opentelemetry import trace
        from opentelemetry.exporter.otlp.proto.http.trace_exporter import OTLPSpanExporter
        from opentelemetry.sdk.resources import Resource
        from opentelemetry.sdk.trace import TracerProvider
        from opentelemetry.sdk.trace.export import BatchSpanProcessor
    except ImportError:
        logger.warning("TELEMETRY_ENABLED=true pero falta el extra 'telemetry'")
        return False

    # No romper la app si falla OTEL
    try:
        resource = Resource.create({"service.name": "portfolio-messages-api"})
        provider = TracerProvider(resource=resource)
        provider.add_span_processor(BatchSpanProcessor(OTLPSpanExporter(endpoint=endpoint)))
        trace.set_tracer_provider(provider)
    except Exception as e:
        logger.warning("No se pudo inicializar OpenTelemetry: %s", e)
        return False
    return True
