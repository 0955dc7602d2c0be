import json
import socket
import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

import pytest

from engineerops.embed import EmbedClient, EmbedError


class _Recorder:
    def __init__(self):
        self.requests = []
        self.responses = {}

    def respond(self, path, status, body=b""):
        self.responses[path] = (status, body)


@pytest.fixture
def sidecar():
    recorder = _Recorder()

    class _Handler(BaseHTTPRequestHandler):
        def _answer(self):
            length = int(self.headers.get("Content-Length") or 0)
            body = self.rfile.read(length) if length else b""
            recorder.requests.append(
                {
                    "method": self.command,
                    "path": self.path,
                    "content_type": self.headers.get("Content-Type"),
                    "body": body,
                }
            )
            status, reply = recorder.responses.get(self.path, (404, b""))
            self.send_response(status)
            self.send_header("Content-Length", str(len(reply)))
            self.end_headers()
            self.wfile.write(reply)

        do_GET = _answer
        do_POST = _answer

        def log_message(self, format, *args):
            pass

    server = ThreadingHTTPServer(("127.0.0.1", 0), _Handler)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    recorder.url = f"http://127.0.0.1:{server.server_address[1]}"
    yield recorder
    server.shutdown()
    server.server_close()


def _closed_port_url():
    with socket.socket() as sock:
        sock.bind(("127.0.0.1", 0))
        port = sock.getsockname()[1]
    return f"http://127.0.0.1:{port}"


def test_embed_returns_vectors_and_sends_texts(sidecar):
    vectors = [[0.5, 1.0, -2.0], [3.0, 0.25, 0.0]]
    sidecar.respond("/embed", 200, json.dumps({"vectors": vectors}).encode())

    got = EmbedClient(sidecar.url).embed(["alpha", "beta"])

    assert got == vectors
    request = sidecar.requests[0]
    assert request["method"] == "POST"
    assert request["path"] == "/embed"
    assert request["content_type"] == "application/json"
    assert json.loads(request["body"]) == {"texts": ["alpha", "beta"]}


def test_embed_one_vector_per_text(sidecar):
    texts = ["a", "b", "c"]
    sidecar.respond("/embed", 200, json.dumps({"vectors": [[1.0]] * 3}).encode())
    assert len(EmbedClient(sidecar.url).embed(texts)) == len(texts)


def test_embed_missing_vectors_gives_empty_list(sidecar):
    sidecar.respond("/embed", 200, b"{}")
    assert EmbedClient(sidecar.url).embed(["x"]) == []


def test_embed_non_ok_status_raises(sidecar):
    sidecar.respond("/embed", 500, b"boom")
    with pytest.raises(EmbedError, match="embed returned status 500"):
        EmbedClient(sidecar.url).embed(["x"])


def test_embed_non_200_success_status_raises(sidecar):
    sidecar.respond("/embed", 202, json.dumps({"vectors": []}).encode())
    with pytest.raises(EmbedError, match="embed returned status 202"):
        EmbedClient(sidecar.url).embed(["x"])


def test_embed_bad_json_raises(sidecar):
    sidecar.respond("/embed", 200, b"not json")
    with pytest.raises(EmbedError, match="decode embed response"):
        EmbedClient(sidecar.url).embed(["x"])


def test_embed_wrong_vector_type_raises(sidecar):
    sidecar.respond("/embed", 200, json.dumps({"vectors": ["oops"]}).encode())
    with pytest.raises(EmbedError, match="decode embed response"):
        EmbedClient(sidecar.url).embed(["x"])


def test_embed_unreachable_raises():
    with pytest.raises(EmbedError, match="embed request failed"):
        EmbedClient(_closed_port_url(), timeout=2.0).embed(["x"])


def test_embed_bad_url_raises():
    with pytest.raises(EmbedError, match="create embed request"):
        EmbedClient("not-a-url").embed(["x"])


def test_health_ok(sidecar):
    sidecar.respond("/health", 200, b"ok")
    assert EmbedClient(sidecar.url).health() is None
    assert sidecar.requests[0]["method"] == "GET"
    assert sidecar.requests[0]["path"] == "/health"


def test_health_bad_status_raises(sidecar):
    sidecar.respond("/health", 503, b"")
    with pytest.raises(EmbedError, match="health returned status 503"):
        EmbedClient(sidecar.url).health()


def test_health_unreachable_raises():
    with pytest.raises(EmbedError, match="health check failed"):
        EmbedClient(_closed_port_url(), timeout=2.0).health()


def test_default_timeout():
    assert EmbedClient("http://localhost:8001").timeout == 10.0