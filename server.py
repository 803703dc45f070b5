import argparse
import os
import sys
import threading
import time

from minihttp.config import DEFAULT_DOCUMENT_ROOT, DEFAULT_PORT, LOG_LEVEL
from minihttp.server import HTTPRequestHandler, TCPServer
from minihttp.utils.logger import logger, set_level


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Serve a directory over HTTP/1.0 and HTTP/1.1")
    parser.add_argument("-document_root", default=DEFAULT_DOCUMENT_ROOT,
                        help="directory the request targets are resolved against")
    parser.add_argument("-port", type=int, default=DEFAULT_PORT, help="port to listen on")
    parser.add_argument("--log-level", default=LOG_LEVEL,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = parser.parse_args(argv)

    if not os.path.isdir(args.document_root):
        parser.error("document root %s is not a directory" % args.document_root)
    if not 0 <= args.port <= 65535:
        parser.error("port %d out of range" % args.port)
    return args


def main(argv=None):
    args = parse_args(argv)
    set_level(args.log_level)

    try:
        http_server = TCPServer(("", args.port), HTTPRequestHandler, os.path.abspath(args.document_root))
    except OSError as e:
        logger.error("Failed to start the server: %s", e)
        return 1

    http_thread = threading.Thread(target=http_server.serve_forever, name="serve_forever")
    http_thread.daemon = True
    http_thread.start()

    try:
        while True:
            time.sleep(1)
    except KeyboardInterrupt:
        http_server.shutdown()
        http_server.server_close()
        logger.info("Server close.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
