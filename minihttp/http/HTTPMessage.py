from http import HTTPStatus

from minihttp import utils

HTTP_1_0 = "HTTP/1.0"
HTTP_1_1 = "HTTP/1.1"

# Reason phrases that differ from `HTTPStatus.phrase`
REASONS = {
    HTTPStatus.NOT_FOUND: "File Not Found",
}

ERROR_TEMPLATE = "<html><head><title>Error</title></head><body><h1>%d %s</h1></body></html>"


class Request:
    """ Request line from client, read-only once parsed """

    __slots__ = ("_method", "_target", "_version")

    def __init__(self, method, target, version):
        self._method = method
        self._target = target
        self._version = version

    @property
    def method(self):
        return self._method

    @property
    def target(self):
        return self._target

    @property
    def version(self):
        return self._version

    def __eq__(self, other):
        if not isinstance(other, Request):
            return NotImplemented
        return (self.method, self.target, self.version) == (other.method, other.target, other.version)

    def __hash__(self):
        return hash((self.method, self.target, self.version))

    def __repr__(self):
        return "Request(%r, %r, %r)" % (self.method, self.target, self.version)

    @classmethod
    def from_request_line(cls, line):
        """
        Parse `GET <target> <version>`.
        Return None when the line is missing or malformed, the caller answers 400.
        """
        if not line or not line.startswith("GET"):
            return None

        parts = line.split(" ")
        if len(parts) != 3:
            return None

        method, target, version = parts
        if method != "GET":
            return None
        return cls(method, target, version)


class Response:
    """ Response to client """

    def __init__(self, stream, version=HTTP_1_1):
        self.stream = stream
        self.version = version

        self.status = None
        self.msg = None

        self.headers = {}

    def set_status_line(self, status, msg=None):
        self.status = status
        self.msg = msg if msg else REASONS.get(status, HTTPStatus(status).phrase)

    def add_header(self, k, v):
        self.headers[k] = v

    def header_encode(self, header):
        return header.encode("latin-1", "strict")

    def write_head(self, content_type, content_length, keep_alive=False):
        """ Write the status line and the entity headers """
        self.add_header("Content-Type", content_type)
        self.add_header("Content-Length", content_length)
        # never cached, every response carries its own timestamp
        self.add_header("Date", utils.formatdate(usegmt=True))
        if keep_alive:
            self.add_header("Connection", "keep-alive")
        self.write_headers()

    def error(self, status, msg=None, keep_alive=False):
        """ Write a complete error response with a small html body """
        self.set_status_line(status, msg)
        body = ERROR_TEMPLATE % (self.status, self.msg)
        self.write_head("text/html", len(body), keep_alive)
        self.stream.write(body.encode("latin-1"))

    def write_headers(self):
        """ Write header to buffer """
        buffer = [("%s %d %s\r\n" % (self.version, self.status, self.msg))] + \
            [("%s: %s\r\n" % (k, v)) for k, v in self.headers.items()] + \
            ["\r\n"]
        self.stream.write(b"".join(map(self.header_encode, buffer)))

        self.headers.clear()
