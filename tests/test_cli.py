import io

import httpx

from drop0x0.cli import build_parser, main


def test_upload_file(make_handler, clipboard, tmp_path, capsys):
    path = tmp_path / "shot.png"
    path.write_bytes(b"\x89PNG")
    handler = make_handler(lambda request: httpx.Response(200, content=b"https://0x0.st/s.png\n"))

    assert main([str(path)], handler=handler) == 0
    assert clipboard.text == "https://0x0.st/s.png\n"


def test_upload_text_option(make_handler, clipboard):
    handler = make_handler(lambda request: httpx.Response(200, content=b"https://0x0.st/t.txt"))
    assert main(["--text", "hello"], handler=handler) == 0
    assert clipboard.writes == ["https://0x0.st/t.txt"]


def test_upload_stdin(make_handler, clipboard):
    bodies = []

    def responder(request):
        bodies.append(request.content)
        return httpx.Response(200, content=b"https://0x0.st/in.txt")

    handler = make_handler(responder)
    assert main(["-"], handler=handler, stdin=io.StringIO("from stdin")) == 0
    assert b"\r\n\r\nfrom stdin\r\n" in bodies[0]


def test_failure_exit_code(make_handler, clipboard):
    handler = make_handler(lambda request: httpx.Response(500, content=b"oops"))
    assert main(["--text", "x"], handler=handler) == 1
    assert clipboard.writes == []


def test_missing_file_reported(make_handler, tmp_path, capsys):
    handler = make_handler(lambda request: httpx.Response(200))
    assert main([str(tmp_path / "gone.txt")], handler=handler) == 1
    assert "Cannot read" in capsys.readouterr().out


def test_unknown_backend_rejected(make_handler, capsys):
    handler = make_handler(lambda request: httpx.Response(200))
    assert main(["--backend", "nope"], handler=handler) == 1
    assert "Unknown backend" in capsys.readouterr().out


def test_select_backend_only(make_handler, prefs_path):
    handler = make_handler(lambda request: httpx.Response(200))
    assert main(["--backend", "0x0"], handler=handler) == 0
    with open(prefs_path) as f:
        assert "0x0" in f.read()


def test_list_backends(make_handler, capsys):
    handler = make_handler(lambda request: httpx.Response(200))
    assert main(["--list-backends"], handler=handler) == 0
    assert capsys.readouterr().out == "* 0x0\n"


def test_nothing_to_do(make_handler):
    handler = make_handler(lambda request: httpx.Response(200))
    assert main([], handler=handler) == 1


def test_parser_defaults():
    args = build_parser().parse_args([])
    assert args.timeout is None
    assert args.port == 6097
    assert not args.anonymize


def test_corrupt_response_exits_cleanly(make_handler, clipboard):
    def responder(request):
        return httpx.Response(200, headers={"Content-Encoding": "gzip"}, stream=httpx.ByteStream(b"xx"))

    assert main(["--text", "hi"], handler=make_handler(responder)) == 1
    assert clipboard.writes == []
