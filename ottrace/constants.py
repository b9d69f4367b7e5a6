"""Constants"""

# Header keys, lower case as the ot-trace format sends them
TRACE_ID_HEADER = 'ot-tracer-traceid'
SPAN_ID_HEADER = 'ot-tracer-spanid'
SAMPLED_HEADER = 'ot-tracer-sampled'
BAGGAGE_PREFIX = 'ot-baggage-'

# Non-baggage headers, in the order fields() reports them
FIELDS = (TRACE_ID_HEADER, SPAN_ID_HEADER, SAMPLED_HEADER)

# Sampled header values
SAMPLED_TRUE = 'true'
SAMPLED_FALSE = 'false'

# Identifier lengths in hex characters
TRACE_ID_HEX_LEN = 32
SPAN_ID_HEX_LEN = 16
# 8-byte trace ids sent by older tracers are padded up to 16 bytes
TRACE_ID_PADDING = '0' * 16
