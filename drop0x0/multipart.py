"""multipart/form-data body for a single ``file`` field."""
import uuid

CRLF = "\r\n"
FIELD_NAME = "file"

# Same escaping browsers apply to filenames in form submissions
_FILENAME_ESCAPES = {'"': "%22", "\r": "%0D", "\n": "%0A"}


def new_boundary():
    return str(uuid.uuid4())


def escape_filename(filename):
    return "".join(_FILENAME_ESCAPES.get(ch, ch) for ch in filename)


def encode(payload, boundary=None):
    """Build the request body and return (body_bytes, content_type)."""
    boundary = boundary or new_boundary()
    head = (
        f"--{boundary}{CRLF}"
        f'Content-Disposition: form-data; name="{FIELD_NAME}"; filename="{escape_filename(payload.filename)}"{CRLF}'
        f"Content-Type: {payload.mime_type}{CRLF}"
        f"{CRLF}"
    )
    tail = f"{CRLF}--{boundary}--{CRLF}"
    body = b"".join([head.encode("utf-8"), payload.data, tail.encode("utf-8")])
    return body, f"multipart/form-data; boundary={boundary}"
