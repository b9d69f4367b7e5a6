"""
ot-trace specific carrier formats.
"""


class OTTraceFormat(object):
    """A namespace for the carrier formats of this package.

    These static constants are intended for use in the Tracer.inject() and
    Tracer.extract() methods. E.g.,

        tracer.inject(span.context, OTTraceFormat.OT_TRACE, headers)

    """

    # The OT_TRACE format represents SpanContexts as ot-tracer-* and
    # ot-baggage-* headers in a dict carrier.
    OT_TRACE = 'ot_trace'
