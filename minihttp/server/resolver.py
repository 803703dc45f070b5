import os
from http import HTTPStatus

from minihttp.config import INDEX_DOCUMENT
from minihttp.http import contenttype

__all__ = ["ResolvedResource", "resolve", "path2local"]


class ResolvedResource:
    """ A request target mapped onto the document root """

    def __init__(self, path, exists=False, readable=False, length=0, content_type=contenttype.UNSUPPORTED):
        self.path = path
        self.exists = exists
        self.readable = readable
        self.length = length
        self.content_type = content_type

    def __repr__(self):
        return "ResolvedResource(%r, exists=%r, readable=%r, length=%r)" % (
            self.path, self.exists, self.readable, self.length
        )

    @property
    def outcome(self):
        if not self.exists:
            return HTTPStatus.NOT_FOUND
        if not self.readable:
            return HTTPStatus.FORBIDDEN
        return HTTPStatus.OK


def path2local(target, directory):
    """
    Convert a request target to a local file system path.
    Example:
        document root is /srv/www
        GET /docs/a.txt -> /srv/www/docs/a.txt
        GET /           -> /srv/www/index.html
    Return None if the target leaves the document root.
    """
    if target in ("", "/"):
        target = INDEX_DOCUMENT

    if "\x00" in target:
        return None

    root = os.path.abspath(directory)
    final_path = os.path.normpath(os.path.join(root, target.lstrip("/")))
    if os.path.commonpath([root, final_path]) != root:
        return None
    # keep the trailing slash, "/file.txt/" must not find file.txt
    if target.endswith("/"):
        final_path += "/"
    return final_path


def resolve(target, directory):
    """ Check that the target names an existing, readable regular file """
    path = path2local(target, directory)

    if path is None or not os.path.exists(path) or os.path.isdir(path):
        return ResolvedResource(path)

    if not os.access(path, os.R_OK):
        return ResolvedResource(path, exists=True)

    return ResolvedResource(
        path,
        exists=True,
        readable=True,
        length=os.path.getsize(path),
        content_type=contenttype.content_type_header(path),
    )
