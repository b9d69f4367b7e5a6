from .opentracing_propagator import OTTraceOpenTracingPropagator  # noqa
from .propagation import OTTraceFormat  # noqa
from .propagator import OTTracePropagator  # noqa

__version__ = '1.0.0'
