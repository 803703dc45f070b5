from .TCPServer import TCPServer
from .HTTPRequestHandler import HTTPRequestHandler
from .lifecycle import ConnectionLifecycle
from .resolver import ResolvedResource, resolve

__all__ = ["TCPServer", "HTTPRequestHandler", "ConnectionLifecycle", "ResolvedResource", "resolve"]
