"""Errors raised while turning a drop into an upload."""


class DropError(Exception):
    """Base class for everything the drop handler reports instead of crashing."""


class EncodingError(DropError):
    """Dropped payload could not be read, nothing was uploaded."""

    def __init__(self, path, cause=None):
        super().__init__(f"Cannot read {path}: {cause}" if cause else f"Cannot read {path}")
        self.path = path
        self.__cause__ = cause


class UnsupportedPayloadError(DropError):
    """Drop kind with no handler."""

    def __init__(self, kind, known=()):
        message = f"Unsupported drop type: {kind!r}"
        if known:
            message += f" (expected one of: {', '.join(known)})"
        super().__init__(message)
        self.kind = kind


class UnknownBackendError(DropError):
    def __init__(self, name, known):
        super().__init__(f"Unknown backend {name!r} (known: {', '.join(known)})")
        self.name = name
        self.known = tuple(known)


class UploadBusyError(DropError):
    def __init__(self):
        super().__init__("An upload is already in progress")


class ClipboardError(DropError):
    """System clipboard could not be written.

    ``url`` is set when the upload itself succeeded, so the link is not lost.
    """

    def __init__(self, message, url=None):
        super().__init__(message)
        self.url = url
