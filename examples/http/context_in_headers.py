"""Demonstrates a Trace distributed across an HTTP hop.

A SpanContext's ot-trace representation is stored in the headers of an HTTP
request.

Runs two threads, starts a Trace in the client and passes the SpanContext to the server.
"""

import errno
import socket
import sys
import threading
from http.server import BaseHTTPRequestHandler, HTTPServer
from urllib.request import Request, urlopen

import opentracing
import opentracing.ext.tags
from basictracer import BasicTracer
from basictracer.recorder import SpanRecorder

from ottrace import OTTraceOpenTracingPropagator

_exit_code = 0


class PrintingRecorder(SpanRecorder):
    """Prints every finished span.
    """
    def record_span(self, span):
        print('Finished span {0}: trace {1:032x} span {2:016x} parent {3}'.format(
            span.operation_name,
            span.context.trace_id,
            span.context.span_id,
            span.parent_id))


class RemoteHandler(BaseHTTPRequestHandler):
    """This handler receives the request from the client.
    """
    def do_GET(self):
        with before_answering_request(self, opentracing.tracer) as server_span:

            server_span.log_kv({'event': 'request received', 'path': self.path})

            self.send_response(200)
            self.send_header('Content-type', 'text/html')
            self.end_headers()
            self.wfile.write("Hello World!".encode("utf-8"))

            server_span.log_kv({'event': 'prepared response', 'path': self.path})


def before_sending_request(request):
    """Context manager creates Span and encodes the span's SpanContext into request.
    """
    span = opentracing.tracer.start_span('Sending request')
    span.set_tag('server.http.url', request.get_full_url())
    span.set_baggage_item('user', 'example')

    if request.host:
        span.set_tag(opentracing.ext.tags.PEER_HOST_IPV4, request.host)

    carrier_dict = {}
    span.tracer.inject(span.context, opentracing.Format.HTTP_HEADERS, carrier_dict)
    for k, v in carrier_dict.items():
        request.add_header(k, v)
    return span


def before_answering_request(handler, tracer):
    """Context manager creates a Span, using SpanContext encoded in handler if possible.
    """
    global _exit_code
    operation = 'handle_request:' + handler.path
    # http.server title-cases header names, ot-trace keys are lower case
    carrier_dict = {}
    for k, v in handler.headers.items():
        carrier_dict[k.lower()] = v

    try:
        extracted_context = tracer.extract(opentracing.Format.HTTP_HEADERS, carrier_dict)
    except opentracing.SpanContextCorruptedException:
        extracted_context = None

    if extracted_context is not None:
        span = tracer.start_span(
                operation_name=operation,
                child_of=extracted_context)
    else:
        print('ERROR: Context missing, starting new trace')
        _exit_code = errno.ENOMSG
        span = tracer.start_span(operation_name=operation)
        headers = ', '.join({k + '=' + v for k, v in handler.headers.items()})
        span.log_kv({'event': 'extract_failed', 'headers': headers})
        print('Could not extract context from http headers: ' + headers)

    host, port = handler.client_address
    if host:
        span.set_tag(opentracing.ext.tags.PEER_HOST_IPV4, host)
    if port:
        span.set_tag(opentracing.ext.tags.PEER_PORT, str(port))

    return span


def pick_unused_port():
    """ Since we don't reserve the port, there's a chance it'll get grabed, but that's unlikely.
    """
    s = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    s.bind(('localhost', 0))
    port = s.getsockname()[1]
    s.close()
    return port


if __name__ == '__main__':
    tracer = BasicTracer(recorder=PrintingRecorder())
    tracer.register_propagator(
        opentracing.Format.HTTP_HEADERS, OTTraceOpenTracingPropagator())
    opentracing.tracer = tracer

    # Create a web server and define the handler to manage the incoming request
    port_number = pick_unused_port()
    server = HTTPServer(('', port_number), RemoteHandler)

    try:
        # Run the server in a separate thread.
        server_thread = threading.Thread(target=server.serve_forever)
        server_thread.start()
        print('Started httpserver on port ', port_number)

        # Prepare request in the client
        url = 'http://localhost:{}'.format(port_number)
        request = Request(url)
        with before_sending_request(request) as client_span:
            client_span.log_kv({'event': 'sending request', 'url': url})

            # Send request to server
            response = urlopen(request)

            response_body = response.read()
            client_span.log_kv({
                'event': 'server returned',
                'code': response.code,
                'body': response_body,
            })

        print('Server returned ' + str(response.code) + ': ' + str(response_body))

    finally:
        server.shutdown()

    sys.exit(_exit_code)
