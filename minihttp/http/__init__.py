from .HTTPMessage import Request, Response, HTTP_1_0, HTTP_1_1
from . import contenttype

__all__ = ['Request', 'Response', 'HTTP_1_0', 'HTTP_1_1', 'contenttype']
