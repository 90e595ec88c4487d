import argparse
import asyncio
import sys

from drop0x0.backends import BackendSelection
from drop0x0.clipboard import Clipboard
from drop0x0.config import SERVER_HOST, SERVER_PORT, Config
from drop0x0.errors import DropError
from drop0x0.handler import DropHandler
from drop0x0.uploader import Uploader


def build_parser():
    parser = argparse.ArgumentParser(
        prog="drop0x0",
        description="Upload a file or snippet to 0x0.st and copy the link to the clipboard",
    )
    parser.add_argument("path", nargs="?", default=None, help="File to upload, or - to upload stdin as text")
    parser.add_argument("--text", default=None, help="Upload this text snippet instead of a file")
    parser.add_argument("--backend", default=None, help="Select (and remember) the upload backend")
    parser.add_argument("--list-backends", action="store_true", help="Show known backends and exit")
    parser.add_argument("--anonymize", action="store_true", help="Send the file as file.<ext> instead of its own name")
    parser.add_argument("--timeout", type=float, default=None, help="Request timeout in seconds (httpx default if unset)")
    parser.add_argument("--prefs", default=None, help="Preference file holding the selected backend")
    parser.add_argument("--serve", action="store_true", help="Run the local drop target instead of uploading once")
    parser.add_argument("--host", default=SERVER_HOST, help="Drop target bind address")
    parser.add_argument("--port", type=int, default=SERVER_PORT, help="Drop target port")
    return parser


def build_handler(cfg, clipboard=None, client=None):
    return DropHandler(
        uploader=Uploader(client=client, timeout=cfg.timeout),
        backends=BackendSelection(cfg.prefs_path),
        clipboard=clipboard or Clipboard(),
        anonymize=cfg.anonymize,
    )


def serve(handler, host, port):
    import uvicorn

    from drop0x0.server import create_app

    print(f"📥 Drop target listening on http://{host}:{port} (backend: {handler.backends.current.name})")
    uvicorn.run(create_app(handler), host=host, port=port, workers=1, reload=False, log_level="warning")


def main(argv=None, handler=None, stdin=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    cfg = Config.from_args(args)
    handler = handler or build_handler(cfg)

    if args.list_backends:
        for name in handler.backends.names:
            marker = "*" if name == handler.backends.current.name else " "
            print(f"{marker} {name}")
        return 0

    try:
        if args.backend:
            backend = handler.backends.select(args.backend)
            print(f"✅ Backend set to {backend.name}")
    except DropError as e:
        print(f"[⚠️] {e}")
        return 1
    except OSError as e:
        print(f"[⚠️] Could not save preference: {e}")
        return 1

    if args.serve:
        serve(handler, args.host, args.port)
        return 0

    if args.text is not None:
        job = handler.handle_text(args.text)
    elif args.path == "-":
        job = handler.handle_text((stdin or sys.stdin).read())
    elif args.path:
        job = handler.handle_path(args.path)
    elif args.backend:
        return 0
    else:
        parser.print_usage()
        return 1

    try:
        result = asyncio.run(job)
    except DropError as e:
        print(f"[⚠️] {e}")
        return 1
    return 0 if result.ok else 1


def run():
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\n🛑 Stopped.")
        sys.exit(130)
