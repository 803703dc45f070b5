import socket

from minihttp.config import KEEP_ALIVE_TIMEOUT
from minihttp.http import HTTP_1_0, HTTP_1_1
from minihttp.utils.logger import logger

__all__ = ["ConnectionLifecycle"]


class ConnectionLifecycle:
    """
    Close-or-keep-alive decision for one connection.

    Every request line is negotiated again:
        NEGOTIATING -> CLOSING_AFTER_RESPONSE   (version ends with "1.0")
        NEGOTIATING -> KEEP_ALIVE_OPEN          (anything else)
    """

    NEGOTIATING = "negotiating"
    CLOSING_AFTER_RESPONSE = "closing-after-response"
    KEEP_ALIVE_OPEN = "keep-alive-open"

    def __init__(self, sock, keep_alive_timeout=KEEP_ALIVE_TIMEOUT):
        self.sock = sock
        self.keep_alive_timeout = keep_alive_timeout
        self.state = ConnectionLifecycle.NEGOTIATING
        self.version = HTTP_1_1
        self.timeout = None

    def negotiate(self, version):
        """
        Pick the lifecycle for `version` and apply it to the socket.
        `version` is None when the request line could not be parsed.
        """
        if version is not None and version.endswith("1.0"):
            self.version = HTTP_1_0
            self.state = ConnectionLifecycle.CLOSING_AFTER_RESPONSE
            self.sock.setsockopt(socket.SOL_SOCKET, socket.SO_KEEPALIVE, 0)
            logger.debug("HTTP/1.0: connection closes after the response")
        else:
            self.version = HTTP_1_1
            self.state = ConnectionLifecycle.KEEP_ALIVE_OPEN
            self.sock.setsockopt(socket.SOL_SOCKET, socket.SO_KEEPALIVE, 1)
            self.sock.settimeout(self.keep_alive_timeout)
            self.timeout = self.keep_alive_timeout
            logger.debug("HTTP/1.1: keep-alive active for %s secs", self.keep_alive_timeout)
        return self.state

    @property
    def keep_alive(self):
        return self.state == ConnectionLifecycle.KEEP_ALIVE_OPEN

    @property
    def close_after_response(self):
        return self.state == ConnectionLifecycle.CLOSING_AFTER_RESPONSE
