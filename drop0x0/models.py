from dataclasses import dataclass


@dataclass(frozen=True)
class UploadPayload:
    data: bytes
    filename: str
    mime_type: str


@dataclass(frozen=True)
class Backend:
    name: str
    endpoint: str


# ================= UPLOAD RESULTS =================

@dataclass(frozen=True)
class Success:
    url: str
    ok = True


@dataclass(frozen=True)
class Failure:
    """Server answered with anything but 200."""
    status_code: int
    body: str
    ok = False


@dataclass(frozen=True)
class TransportError:
    """No usable response (DNS, connect, TLS, timeout, dropped connection, undecodable body)."""
    cause: Exception
    ok = False

    def __str__(self):
        return f"{type(self.cause).__name__}: {self.cause}"
