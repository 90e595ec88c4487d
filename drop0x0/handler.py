from drop0x0 import payloads
from drop0x0.errors import ClipboardError
from drop0x0.models import Failure


class DropHandler:
    """Runs one drop through upload and result handling.

    Collaborators are passed in; the clipboard is only touched from the
    coroutine awaiting the upload, i.e. on the loop that owns it.
    """

    def __init__(self, uploader, backends, clipboard, anonymize=False, echo=print):
        self.uploader = uploader
        self.backends = backends
        self.clipboard = clipboard
        self.anonymize = anonymize
        self.echo = echo

    async def handle(self, payload):
        backend = self.backends.current
        self.echo(f"[⬆️] Uploading {payload.filename} ({payload.mime_type}) to {backend.name}...")
        result = await self.uploader.upload(payload, backend)
        self._handle_result(result)
        return result

    async def handle_drop(self, kind, value):
        payload = payloads.from_drop(kind, value, anonymize=self.anonymize)
        return await self.handle(payload)

    async def handle_path(self, path):
        return await self.handle_drop("file", path)

    async def handle_text(self, text):
        return await self.handle_drop("text", text)

    def _handle_result(self, result):
        if result.ok:
            self.echo(result.url.strip())
            try:
                self.clipboard.copy(result.url)
            except ClipboardError as e:
                e.url = result.url
                raise
            self.echo("[✅] Copied to clipboard!")
        elif isinstance(result, Failure):
            self.echo(f"[❌] Upload rejected: {result.status_code}")
            if result.body:
                self.echo(result.body.strip())
        else:
            self.echo(f"[⚠️] Upload failed: {result}")
