import mimetypes

from drop0x0.config import OCTET_STREAM

# mimetypes reports compressed extensions as encodings, not types
ENCODING_TYPES = {
    "gzip": "application/gzip",
    "bzip2": "application/x-bzip2",
    "xz": "application/x-xz",
    "br": "application/x-brotli",
    "compress": "application/x-compress",
}


def resolve_mime(extension):
    """Best-guess content type for a file extension, octet-stream when unknown"""
    ext = (extension or "").lstrip(".")
    if not ext:
        return OCTET_STREAM
    mime_type, encoding = mimetypes.guess_type(f"file.{ext}", strict=False)
    return mime_type or ENCODING_TYPES.get(encoding) or OCTET_STREAM
