import pytest

from minihttp.http.contenttype import UNSUPPORTED, content_type_header, guess_type


@pytest.mark.parametrize("path, expected", [
    ("/srv/www/index.html", "text/html"),
    ("notes.txt", "text/plain"),
    ("photo.jpg", "image/jpg"),
    ("photo.jpeg", "image/jpeg"),
    ("image.png", "image/png"),
    ("anim.gif", "image/gif"),
    ("SHOUT.HTML", "text/html"),
    ("Photo.JpG", "image/jpg"),
])
def test_known_extensions(path, expected):
    assert guess_type(path) == expected


@pytest.mark.parametrize("path", ["style.css", "README", "archive.tar.gz", "dir.d/file", "trailing."])
def test_unknown_extensions_get_the_sentinel(path):
    assert guess_type(path) == UNSUPPORTED


@pytest.mark.parametrize("path, expected", [("/srv/www/.html", "text/html"), (".txt", "text/plain")])
def test_dotfiles_use_their_only_dot(path, expected):
    assert guess_type(path) == expected


def test_text_types_carry_charset():
    assert content_type_header("index.html") == "text/html; charset=UTF-8"
    assert content_type_header("notes.txt") == "text/plain; charset=UTF-8"


def test_binary_and_unsupported_types_have_no_charset():
    assert content_type_header("image.png") == "image/png"
    assert content_type_header("style.css") == "Unsupported file type"
