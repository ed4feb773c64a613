import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

import pytest

from webmonitor.registry import Registry


class _StatusHandler(BaseHTTPRequestHandler):
    # /status/<code> answers with that code
    def do_GET(self):
        try:
            code = int(self.path.rsplit("/", 1)[-1])
        except ValueError:
            code = 404
        body = b"ok"
        self.send_response(code)
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def log_message(self, format, *args):
        pass


@pytest.fixture(autouse=True)
def no_proxy(monkeypatch):
    for var in ("HTTP_PROXY", "HTTPS_PROXY", "ALL_PROXY", "http_proxy", "https_proxy", "all_proxy"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def http_server():
    server = ThreadingHTTPServer(("127.0.0.1", 0), _StatusHandler)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    host, port = server.server_address[:2]
    yield f"http://{host}:{port}"
    server.shutdown()
    server.server_close()


@pytest.fixture
def services_path(tmp_path):
    return tmp_path / "services.json"


@pytest.fixture
def registry(services_path):
    reg = Registry(services_path)
    reg.add("Google", "https://www.google.com")
    reg.add("GitHub", "https://github.com")
    return reg
