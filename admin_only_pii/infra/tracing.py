# © 2025 Tejas Gajjar. All rights reserved.
# Owner: Tejas Gajjar — Admin-Only PII for Enterprise Integration
# Contact: tejas.gajjar@macys.com | tejgajjar2001@gmail.com
# Note: This module is tailored for serializer-level PII redaction.

from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.http.trace_exporter import OTLPSpanExporter
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor
import os

_tracer_inited = False

def init_tracing(service_name: str = "admin-only-pii") -> bool:
    global _tracer_inited
    if _tracer_inited:
        return True
    if os.environ.get("OTEL_SDK_DISABLED", "").strip().lower() == "true":
        return False
    endpoint = os.environ.get("OTEL_EXPORTER_OTLP_ENDPOINT", "http://localhost:4318")
    resource = Resource.create({"service.name": service_name})
    provider = TracerProvider(resource=resource)
    processor = BatchSpanProcessor(OTLPSpanExporter(endpoint=endpoint + "/v1/traces"))
    provider.add_span_processor(processor)
    trace.set_tracer_provider(provider)
    _tracer_inited = True
    return True

def get_tracer(name: str = "admin_only_pii"):
    return trace.get_tracer(name)

def annotate_serialization(span, kind: str, privileged: bool, protected: bool):
    span.set_attribute("pii.structure_kind", kind)
    span.set_attribute("pii.caller_privileged", privileged)
    span.set_attribute("pii.redacted", protected and not privileged)
