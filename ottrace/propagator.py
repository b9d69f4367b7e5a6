from logging import getLogger

from opentelemetry import baggage, trace
from opentelemetry.context import Context
from opentelemetry.propagators.textmap import (
    TextMapPropagator,
    default_getter,
    default_setter,
)
from opentelemetry.trace import (
    NonRecordingSpan,
    SpanContext,
    TraceFlags,
    format_span_id,
    format_trace_id,
)

from . import constants
from .util import (
    is_valid_header_name,
    is_valid_header_value,
    is_valid_span_id,
    is_valid_trace_id,
    pad_trace_id,
    read_header,
)

_LOG = getLogger(__name__)


class OTTracePropagator(TextMapPropagator):
    """
    Propagator for the ot-trace HTTP header format used by OpenTracing
    tracers.

    Trace state travels in three headers, ot-tracer-traceid,
    ot-tracer-spanid and ot-tracer-sampled. Every baggage entry travels in its
    own ot-baggage-<key> header.

    Neither direction raises on bad input. An invalid span context injects
    nothing, a baggage entry that is not header-safe is left out and a
    carrier without valid ids extracts to the context it was given.
    """

    def inject(self, carrier, context=None, setter=default_setter):

        span_context = trace.get_current_span(context).get_span_context()

        if not span_context.is_valid:
            _LOG.debug("No valid span context to inject")
            return

        setter.set(
            carrier,
            constants.TRACE_ID_HEADER,
            format_trace_id(span_context.trace_id)
        )
        setter.set(
            carrier,
            constants.SPAN_ID_HEADER,
            format_span_id(span_context.span_id)
        )
        if span_context.trace_flags.sampled:
            sampled = constants.SAMPLED_TRUE
        else:
            sampled = constants.SAMPLED_FALSE
        setter.set(carrier, constants.SAMPLED_HEADER, sampled)

        baggage_entries = baggage.get_all(context)

        if not baggage_entries:
            return

        for key, value in baggage_entries.items():
            if not (
                is_valid_header_name(key)
                and isinstance(value, str)
                and is_valid_header_value(value)
            ):
                # Values may carry user data, only the key is logged
                _LOG.debug("Omitting baggage item {!r}".format(key))
                continue

            setter.set(
                carrier, "".join([constants.BAGGAGE_PREFIX, key]), value
            )

    def extract(self, carrier, context=None, getter=default_getter):

        if context is None:
            context = Context()

        trace_id = pad_trace_id(
            read_header(carrier, getter, constants.TRACE_ID_HEADER)
        )
        span_id = read_header(carrier, getter, constants.SPAN_ID_HEADER)
        sampled = read_header(carrier, getter, constants.SAMPLED_HEADER)

        if sampled == constants.SAMPLED_TRUE:
            trace_flags = TraceFlags(TraceFlags.SAMPLED)
        else:
            trace_flags = TraceFlags(TraceFlags.DEFAULT)

        if not is_valid_trace_id(trace_id):
            _LOG.debug("Invalid trace id {!r}".format(trace_id))
            return context

        if not is_valid_span_id(span_id):
            _LOG.debug("Invalid span id {!r}".format(span_id))
            return context

        context = trace.set_span_in_context(
            NonRecordingSpan(
                SpanContext(
                    trace_id=int(trace_id, 16),
                    span_id=int(span_id, 16),
                    is_remote=True,
                    trace_flags=trace_flags,
                )
            ),
            context
        )

        baggage_entries = dict(baggage.get_all(context))

        for key in getter.keys(carrier):

            if not key.startswith(constants.BAGGAGE_PREFIX):
                continue

            baggage_entries[key[len(constants.BAGGAGE_PREFIX):]] = (
                read_header(carrier, getter, key)
            )

        # Stays unset when neither the context nor the carrier has baggage
        for key, value in baggage_entries.items():
            context = baggage.set_baggage(key, value, context)

        return context

    @property
    def fields(self):
        """
        The non-baggage headers this propagator writes, as a new list.

        Baggage headers depend on the carrier and are left out. Reusing a
        carrier by clearing only these fields would leave its ot-baggage-*
        headers behind.
        """
        return list(constants.FIELDS)
