import os

__all__ = ["UNSUPPORTED", "CONTENT_TYPES", "guess_type", "content_type_header"]

# Not a real MIME type; sent verbatim for files the table does not know.
UNSUPPORTED = "Unsupported file type"

CONTENT_TYPES = {
    ".html": "text/html",
    ".txt": "text/plain",
    ".jpg": "image/jpg",
    ".jpeg": "image/jpeg",
    ".png": "image/png",
    ".gif": "image/gif",
}

CHARSET = "; charset=UTF-8"


def guess_type(path):
    """Map the extension of `path`, from the last dot of the file name, to a content type"""
    name = os.path.basename(path)
    dot = name.rfind(".")
    if dot == -1:
        return UNSUPPORTED
    return CONTENT_TYPES.get(name[dot:].lower(), UNSUPPORTED)


def content_type_header(path):
    """Value of the Content-Type header for `path`, text types get a charset"""
    ctype = guess_type(path)
    if ctype.startswith("text/"):
        return ctype + CHARSET
    return ctype
