import os
import re
import shutil
import socket
import time
from http import HTTPStatus

from minihttp.config import BUFFER_SIZE, LINGER_TIMEOUT, MAX_REQUEST_LINE
from minihttp.http import Request, Response
from minihttp.server.lifecycle import ConnectionLifecycle
from minihttp.server.resolver import resolve
from minihttp.utils.logger import logger

# `Name: value` lines clients send after the request line
_HEADER_FIELD = re.compile(rb"^[!#$%&'*+\-.^_`|~0-9A-Za-z]+:")


class HTTPRequestHandler:
    """
    Serve every request of one connection, in order, until the lifecycle
    says to close, the peer disconnects or the keep-alive timeout fires.
    """

    def __init__(self, request, client_address, server):
        self.request = request
        self.client_address = client_address
        self.server = server

        self.directory = server.directory
        self.lifecycle = ConnectionLifecycle(request, server.keep_alive_timeout)

        # header fields of the previous request are still unread
        self.expect_header_fields = False

        self.rfile = self.request.makefile("rb", -1)
        self.wfile = self.request.makefile("wb")
        self.setup()

        try:
            self.handle()
        except socket.timeout:
            logger.info("Connection %s timeout", self.peer)
        except OSError as e:
            logger.warning("Connection %s aborted: %s", self.peer, e)
        except Exception:
            logger.exception("Unexpected error on connection %s", self.peer)
        finally:
            self.finish()

    @property
    def peer(self):
        return "%s:%s" % tuple(self.client_address[:2])

    def setup(self):
        """Reset the per-request state"""
        self._response = Response(self.wfile)

        self.close_connection = True

    def handle(self):
        """Handle the http requests of the connection"""

        self.handle_one_request()
        while not self.close_connection:
            self.setup()
            self.handle_one_request()

    def handle_one_request(self):
        """Handle a single HTTP request"""
        raw_line = self.read_request_line()
        if not raw_line:
            logger.debug("Connection %s closed by peer", self.peer)
            return

        if len(raw_line) > MAX_REQUEST_LINE:
            logger.warning("Request line from %s too long", self.peer)
            self.lifecycle.negotiate(None)
            self._response.version = self.lifecycle.version
            self.send_error(HTTPStatus.BAD_REQUEST, keep_alive=False)
            self.wfile.flush()
            return

        # targets name files, decode them the way the file system does
        start_line = os.fsdecode(raw_line).rstrip("\r\n")
        logger.info("Received request: %s", start_line)

        request = Request.from_request_line(start_line)
        self.lifecycle.negotiate(request.version if request else None)
        self._response.version = self.lifecycle.version

        if request is None:
            self.send_error(HTTPStatus.BAD_REQUEST)
        else:
            self.expect_header_fields = True
            self.do_GET(request)

        # actually send the response
        self.wfile.flush()

        self.close_connection = self.lifecycle.close_after_response

    def read_request_line(self):
        """
        Read the next request line.
        Header fields and the blank line ending them are skipped when they
        follow a previous request line; they are never interpreted.
        """
        while True:
            line = self.rfile.readline(MAX_REQUEST_LINE + 1)
            if not self.expect_header_fields:
                return line

            if line in (b"\r\n", b"\n"):
                self.expect_header_fields = False
            elif not _HEADER_FIELD.match(line):
                self.expect_header_fields = False
                return line

    def do_GET(self, request):
        """Serve a GET request"""
        resource = resolve(request.target, self.directory)
        if resource.outcome != HTTPStatus.OK:
            self.send_error(resource.outcome)
            return

        try:
            f = open(resource.path, "rb")
        except OSError:
            self.send_error(HTTPStatus.FORBIDDEN)
            return

        with f:
            self.send_file(resource, f)

    def send_file(self, resource, f):
        """Write the 200 response for `resource`, body streamed from `f`"""
        self._response.set_status_line(HTTPStatus.OK)
        self._response.write_head(resource.content_type, resource.length, self.lifecycle.keep_alive)
        shutil.copyfileobj(f, self.wfile, BUFFER_SIZE)

    def send_error(self, status, keep_alive=None):
        if keep_alive is None:
            keep_alive = self.lifecycle.keep_alive
        logger.info("%s %d for %s", self._response.version, status, self.peer)
        self._response.error(status, keep_alive=keep_alive)

    def finish(self):
        """Close the connection, whatever state the response is in"""
        self.lingering_close()

        for f in (self.wfile, self.rfile):
            try:
                f.close()
            except OSError:
                # unflushed bytes of an aborted response
                pass
        self.request.close()
        logger.debug("Connection %s closed", self.peer)

    def lingering_close(self):
        """
        Send FIN, then discard what the client still sends (header fields the
        handler never read) until it closes or LINGER_TIMEOUT passes.
        """
        deadline = time.monotonic() + LINGER_TIMEOUT
        try:
            self.request.shutdown(socket.SHUT_WR)
            while True:
                remaining = deadline - time.monotonic()
                if remaining <= 0:
                    break
                self.request.settimeout(remaining)
                if not self.request.recv(BUFFER_SIZE):
                    break
        except OSError:
            # the peer is already gone or kept quiet until the deadline
            pass
