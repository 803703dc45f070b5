import socket
import selectors
import threading

from minihttp.config import DEFAULT_DOCUMENT_ROOT, KEEP_ALIVE_TIMEOUT, REQUEST_QUEUE_SIZE
from minihttp.utils.logger import logger

if hasattr(selectors, 'PollSelector'):
    _ServerSelector = selectors.PollSelector
else:
    _ServerSelector = selectors.SelectSelector


class TCPServer:

    request_queue_size = REQUEST_QUEUE_SIZE

    def __init__(self, server_address, RequestHandlerClass,
                 directory=DEFAULT_DOCUMENT_ROOT, keep_alive_timeout=KEEP_ALIVE_TIMEOUT):
        self.server_address = server_address
        self.RequestHandlerClass = RequestHandlerClass
        # read-only for the handler threads
        self.directory = directory
        self.keep_alive_timeout = keep_alive_timeout

        self.__is_shut_down = threading.Event()
        self.__shutdown_request = False
        self.socket = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        try:
            # allow_reuse_address
            self.socket.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            self.socket.bind(self.server_address)
            self.server_address = self.socket.getsockname()
            self.socket.listen(self.request_queue_size)
        except OSError:
            self.socket.close()
            raise

    def serve_forever(self, poll_interval=0.5):
        self.__is_shut_down.clear()
        logger.info("Server listening on port: %s", self.server_address[1])
        try:
            with _ServerSelector() as selector:
                selector.register(self.socket, selectors.EVENT_READ)

                while not self.__shutdown_request:
                    ready = selector.select(poll_interval)
                    if self.__shutdown_request:
                        break
                    if ready:
                        self._handle_request()
        finally:
            self.__shutdown_request = False
            self.__is_shut_down.set()

    def _handle_request(self):
        try:
            request, client_address = self.socket.accept()
        except OSError as e:
            logger.warning("Accept failed: %s", e)
            return

        logger.info("Connection established with %s:%s", *client_address[:2])
        try:
            # one thread per connection, the handler owns the socket from here
            handler = threading.Thread(
                target=self.RequestHandlerClass,
                args=(request, client_address, self),
                name="Thread-%s-%s" % tuple(client_address[:2]),
            )
            handler.daemon = True
            handler.start()
        except RuntimeError as e:
            logger.warning("Cannot start handler for %s:%s: %s", client_address[0], client_address[1], e)
            request.close()

    def shutdown(self):
        """ Stop the serve_forever loop """
        self.__shutdown_request = True
        self.__is_shut_down.wait()

    def server_close(self):
        """ Release the listening socket """
        self.socket.close()
