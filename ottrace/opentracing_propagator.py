from collections.abc import Mapping, MutableMapping

from basictracer.context import SpanContext
from basictracer.propagator import Propagator
from opentelemetry import baggage, trace
from opentelemetry.context import Context
from opentelemetry.trace import NonRecordingSpan, TraceFlags
from opentelemetry.trace import SpanContext as OTelSpanContext
from opentracing import InvalidCarrierException
from opentracing import SpanContextCorruptedException

from ottrace.propagator import OTTracePropagator


class OTTraceOpenTracingPropagator(Propagator):
    """A BasicTracer Propagator for the ot-trace header format.

    Carriers are dicts of header names to values. Span contexts go through
    OTTracePropagator so both tracer APIs put the same headers on the wire.
    """

    def __init__(self):
        self._propagator = OTTracePropagator()

    def inject(self, span_context, carrier):
        if not isinstance(carrier, MutableMapping):
            raise InvalidCarrierException()

        if span_context.sampled:
            trace_flags = TraceFlags(TraceFlags.SAMPLED)
        else:
            trace_flags = TraceFlags(TraceFlags.DEFAULT)

        context = trace.set_span_in_context(
            NonRecordingSpan(
                OTelSpanContext(
                    trace_id=span_context.trace_id or 0,
                    span_id=span_context.span_id or 0,
                    is_remote=False,
                    trace_flags=trace_flags,
                )
            ),
            Context()
        )
        for key, value in span_context.baggage.items():
            context = baggage.set_baggage(key, value, context)

        self._propagator.inject(carrier, context=context)

    def extract(self, carrier):
        if not isinstance(carrier, Mapping):
            raise InvalidCarrierException()

        context = self._propagator.extract(carrier, context=Context())
        otel_span_context = trace.get_current_span(context).get_span_context()

        if not otel_span_context.is_valid:
            raise SpanContextCorruptedException(
                "No valid ot-tracer-traceid and ot-tracer-spanid found"
            )

        extracted_baggage = dict(baggage.get_all(context))

        return SpanContext(
            trace_id=otel_span_context.trace_id,
            span_id=otel_span_context.span_id,
            baggage=extracted_baggage or None,
            sampled=otel_span_context.trace_flags.sampled
        )
