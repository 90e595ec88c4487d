import httpx

from drop0x0 import multipart
from drop0x0.config import UNPRINTABLE
from drop0x0.errors import UploadBusyError
from drop0x0.models import Failure, Success, TransportError


def _client_kwargs(timeout):
    return {} if timeout is None else {"timeout": timeout}


def _read_text(content):
    try:
        return content.decode("utf-8")
    except UnicodeDecodeError:
        return UNPRINTABLE


async def upload(payload, backend, client=None, timeout=None):
    """POST ``payload`` to ``backend`` and classify the answer.

    Never raises for network trouble: a missing or unreadable response comes
    back as ``TransportError``, a non-200 status as ``Failure``. ``timeout``
    also applies per request when a shared ``client`` is passed in.
    """
    body, content_type = multipart.encode(payload)
    headers = {"Content-Type": content_type}

    try:
        if client is None:
            async with httpx.AsyncClient(**_client_kwargs(timeout)) as own_client:
                resp = await own_client.post(backend.endpoint, content=body, headers=headers)
        else:
            resp = await client.post(backend.endpoint, content=body, headers=headers, **_client_kwargs(timeout))
    except httpx.RequestError as e:
        return TransportError(cause=e)

    if resp.status_code == 200:
        return Success(url=_read_text(resp.content))
    return Failure(status_code=resp.status_code, body=resp.content.decode("utf-8", errors="replace"))


class Uploader:
    """Uploads one payload at a time; a drop arriving mid-upload is rejected."""

    def __init__(self, client=None, timeout=None):
        self.client = client
        self.timeout = timeout
        self._in_flight = False

    @property
    def busy(self):
        return self._in_flight

    async def upload(self, payload, backend):
        if self._in_flight:
            raise UploadBusyError()
        self._in_flight = True
        try:
            return await upload(payload, backend, client=self.client, timeout=self.timeout)
        finally:
            self._in_flight = False
