__all__ = [
    "DEFAULT_PORT",
    "DEFAULT_DOCUMENT_ROOT",
    "INDEX_DOCUMENT",
    "KEEP_ALIVE_TIMEOUT",
    "BUFFER_SIZE",
    "MAX_REQUEST_LINE",
    "REQUEST_QUEUE_SIZE",
    "LOG_LEVEL",
    "LINGER_TIMEOUT",
]

DEFAULT_PORT = 8080
DEFAULT_DOCUMENT_ROOT = "."

# Served when the request target is "/" or empty.
INDEX_DOCUMENT = "/index.html"

# If a keep-alive connection receives no request line during `KEEP_ALIVE_TIMEOUT`
# seconds, the server closes it.
KEEP_ALIVE_TIMEOUT = 60

# Chunk size used when streaming a file to the client.
BUFFER_SIZE = 1024

MAX_REQUEST_LINE = 65536

REQUEST_QUEUE_SIZE = 5

LOG_LEVEL = "INFO"

# Seconds spent discarding unread client input before a connection is closed,
# closing with unread input makes the kernel reset the connection.
LINGER_TIMEOUT = 1
