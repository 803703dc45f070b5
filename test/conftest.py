import os
import socket
import threading

import pytest

from minihttp.server import HTTPRequestHandler, TCPServer

INDEX_BODY = (b"<html><body>" + b"a" * 474 + b"</body></html>")
assert len(INDEX_BODY) == 500


@pytest.fixture
def docroot(tmp_path):
    """
    tmp_path/
        secret.txt          outside the document root
        www/
            index.html      500 bytes
            hello.txt
            photo.jpg, photo.jpeg, image.png, anim.gif
            big.png         binary, spans many chunks
            style.css       unknown extension
            README          no extension
            docs/guide.html
    """
    (tmp_path / "secret.txt").write_bytes(b"top secret")

    root = tmp_path / "www"
    root.mkdir()
    (root / "index.html").write_bytes(INDEX_BODY)
    (root / "hello.txt").write_bytes("héllo wörld\n".encode("utf-8"))
    (root / "photo.jpg").write_bytes(b"\xff\xd8\xff\xe0jpg")
    (root / "photo.jpeg").write_bytes(b"\xff\xd8\xff\xe0jpeg")
    (root / "image.png").write_bytes(b"\x89PNG\r\n\x1a\n")
    (root / "anim.gif").write_bytes(b"GIF89a")
    (root / "big.png").write_bytes(os.urandom(100 * 1024 + 7))
    (root / "style.css").write_bytes(b"body { color: red; }")
    (root / "README").write_bytes(b"read me")
    (root / "docs").mkdir()
    (root / "docs" / "guide.html").write_bytes(b"<h1>guide</h1>")
    return root


@pytest.fixture
def start_server(docroot):
    """Start servers on ephemeral ports, all of them are stopped after the test"""
    servers = []

    def _start(keep_alive_timeout=5):
        server = TCPServer(("127.0.0.1", 0), HTTPRequestHandler, str(docroot), keep_alive_timeout)
        thread = threading.Thread(target=server.serve_forever, kwargs={"poll_interval": 0.05})
        thread.daemon = True
        thread.start()
        servers.append(server)
        return server

    yield _start

    for server in servers:
        server.shutdown()
        server.server_close()


@pytest.fixture
def http_server(start_server):
    return start_server()


@pytest.fixture
def base_url(http_server):
    return "http://%s:%d" % http_server.server_address


@pytest.fixture
def connect(http_server):
    """Open raw client sockets to `http_server`"""
    socks = []

    def _connect(server=http_server):
        sock = socket.create_connection(server.server_address, timeout=5)
        socks.append(sock)
        return sock

    yield _connect

    for sock in socks:
        sock.close()


def _read_response(rfile):
    """Read one response: (status line, headers in wire order, body)"""
    status_line = rfile.readline().decode("latin-1").rstrip("\r\n")
    headers = {}
    while True:
        line = rfile.readline()
        if line in (b"\r\n", b""):
            break
        k, v = line.decode("latin-1").rstrip("\r\n").split(": ", 1)
        headers[k] = v
    body = rfile.read(int(headers.get("Content-Length", 0)))
    return status_line, headers, body


@pytest.fixture
def read_response():
    return _read_response
