"""Local drop target: drop a file or snippet over HTTP instead of onto a status bar icon."""
from fastapi import FastAPI, File, Request, UploadFile
from fastapi.responses import JSONResponse

from drop0x0 import payloads
from drop0x0.errors import ClipboardError, DropError, UploadBusyError
from drop0x0.models import Failure


def result_response(result):
    if result.ok:
        return JSONResponse({"status": "ok", "url": result.url})
    if isinstance(result, Failure):
        return JSONResponse(
            {"status": "failed", "status_code": result.status_code, "body": result.body},
            status_code=502,
        )
    return JSONResponse({"status": "error", "error": str(result)}, status_code=502)


_ERROR_STATUS = ((UploadBusyError, 409), (ClipboardError, 500))


def error_response(e, status_code=None):
    if status_code is None:
        status_code = next((code for kind, code in _ERROR_STATUS if isinstance(e, kind)), 400)
    content = {"status": "error", "error": str(e)}
    if getattr(e, "url", None):
        content["url"] = e.url
    return JSONResponse(content, status_code=status_code)


async def read_field(request, key):
    """String field ``key`` of a JSON object body; ValueError when it is anything else"""
    try:
        data = await request.json()
    except ValueError:
        raise ValueError("Request body is not valid JSON") from None
    value = data.get(key) if isinstance(data, dict) else None
    if not isinstance(value, str):
        raise ValueError(f"Expected a JSON object with a string {key!r} field")
    return value


def create_app(handler):
    app = FastAPI(title="drop0x0")

    async def run(payload_factory):
        try:
            result = await handler.handle(payload_factory())
        except DropError as e:
            handler.echo(f"[⚠️] {e}")
            return error_response(e)
        return result_response(result)

    @app.post("/drop")
    async def drop_file(file: UploadFile = File(...)):
        """Upload a dropped file"""
        data = await file.read()
        return await run(lambda: payloads.from_bytes(data, file.filename or "file"))

    @app.post("/text")
    async def drop_text(request: Request):
        """Upload a dropped text snippet"""
        try:
            text = await read_field(request, "text")
        except ValueError as e:
            return error_response(e, 400)
        return await run(lambda: payloads.from_text(text))

    @app.get("/backends")
    async def list_backends():
        return JSONResponse({
            "backends": handler.backends.names,
            "selected": handler.backends.current.name,
        })

    @app.post("/backend")
    async def select_backend(request: Request):
        try:
            backend = handler.backends.select(await read_field(request, "name"))
        except (ValueError, DropError) as e:
            return error_response(e, 400)
        except OSError as e:
            handler.echo(f"[⚠️] Could not save preference: {e}")
            return error_response(f"Could not save preference: {e}", 500)
        return JSONResponse({"status": "ok", "selected": backend.name})

    return app
