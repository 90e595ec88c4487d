"""Turn whatever was dropped into an UploadPayload."""
import os
from urllib.parse import urlparse
from urllib.request import url2pathname

from drop0x0.config import TEXT_FILENAME, TEXT_MIME
from drop0x0.errors import EncodingError, UnsupportedPayloadError
from drop0x0.mime import resolve_mime
from drop0x0.models import UploadPayload

DROP_KINDS = ("file", "text")


def _extension(filename):
    return os.path.splitext(filename)[1].lstrip(".")


def from_bytes(data, filename):
    return UploadPayload(data=data, filename=filename, mime_type=resolve_mime(_extension(filename)))


def from_path(path, anonymize=False):
    """Read a dropped file. With ``anonymize`` the server only sees ``file.<ext>``."""
    try:
        with open(path, "rb") as f:
            data = f.read()
    except OSError as e:
        raise EncodingError(path, e) from e

    filename = os.path.basename(path)
    if anonymize:
        ext = _extension(filename)
        filename = f"file.{ext}" if ext else "file"
    return from_bytes(data, filename)


def from_text(text):
    return UploadPayload(data=text.encode("utf-8"), filename=TEXT_FILENAME, mime_type=TEXT_MIME)


def file_url_to_path(value):
    if value.startswith("file://"):
        return url2pathname(urlparse(value).path)
    return value


def from_drop(kind, value, anonymize=False):
    if kind == "file":
        return from_path(file_url_to_path(value), anonymize=anonymize)
    if kind == "text":
        return from_text(value)
    raise UnsupportedPayloadError(kind, DROP_KINDS)
