"""
Tests for the static HTTP server.
"""

import socket
import threading
import httpx
import pytest

from services.errors import ServerError
from services.static_server import StaticServer


@pytest.fixture
def site_dir(tmp_path):
    """Create a small built site."""
    out = tmp_path / "public"
    (out / "posts").mkdir(parents=True)
    (out / "hello.html").write_text("<h1>Hi</h1>")
    (out / "posts" / "a.html").write_text("<p>a</p>")
    return out


def _get(url: str) -> httpx.Response:
    with httpx.Client(trust_env=False, timeout=5) as client:
        return client.get(url)


def _serve(server: StaticServer):
    server.start()
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    return thread


class TestStaticServer:
    """Test cases for StaticServer."""

    def test_serves_files(self, site_dir):
        """Test that built pages are served verbatim."""
        server = StaticServer(site_dir, host="127.0.0.1", port=0)
        thread = _serve(server)
        try:
            response = _get(f"{server.url}/hello.html")
            assert response.status_code == 200
            assert response.text == "<h1>Hi</h1>"
            assert response.headers["content-type"].startswith("text/html")

            nested = _get(f"{server.url}/posts/a.html")
            assert nested.text == "<p>a</p>"
        finally:
            server.shutdown()
            thread.join(timeout=5)

    def test_missing_file_is_404(self, site_dir):
        server = StaticServer(site_dir, host="127.0.0.1", port=0)
        thread = _serve(server)
        try:
            assert _get(f"{server.url}/nope.html").status_code == 404
        finally:
            server.shutdown()
            thread.join(timeout=5)

    def test_directory_listing_enabled(self, site_dir):
        """Test that directory listings are shown by default."""
        server = StaticServer(site_dir, host="127.0.0.1", port=0)
        thread = _serve(server)
        try:
            response = _get(f"{server.url}/posts/")
            assert response.status_code == 200
            assert "a.html" in response.text
        finally:
            server.shutdown()
            thread.join(timeout=5)

    def test_directory_listing_disabled(self, site_dir):
        """Test that listings can be turned off."""
        server = StaticServer(site_dir, host="127.0.0.1", port=0, listing=False)
        thread = _serve(server)
        try:
            assert _get(f"{server.url}/posts/").status_code == 404
            assert _get(f"{server.url}/hello.html").status_code == 200
        finally:
            server.shutdown()
            thread.join(timeout=5)

    def test_index_served_without_listing(self, site_dir):
        """Test that index.html is still served when listings are off."""
        (site_dir / "index.html").write_text("home")
        server = StaticServer(site_dir, host="127.0.0.1", port=0, listing=False)
        thread = _serve(server)
        try:
            assert _get(f"{server.url}/").text == "home"
        finally:
            server.shutdown()
            thread.join(timeout=5)

    def test_start_reports_bound_port(self, site_dir):
        """Test that port 0 is resolved to the real port."""
        server = StaticServer(site_dir, host="127.0.0.1", port=0)
        info = server.start()
        try:
            assert info.port != 0
            assert info.listing is True
            assert server.url == f"http://127.0.0.1:{info.port}"
        finally:
            server.httpd.server_close()

    def test_missing_directory(self, tmp_path):
        """Test that serving a missing directory fails."""
        with pytest.raises(ServerError, match="doesn't exist"):
            StaticServer(tmp_path / "missing", port=0).start()

    def test_bind_failure(self, site_dir):
        """Test that an address in use raises ServerError."""
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
            sock.bind(("127.0.0.1", 0))
            sock.listen(1)
            port = sock.getsockname()[1]

            with pytest.raises(ServerError, match="Failed to bind"):
                StaticServer(site_dir, host="127.0.0.1", port=port).start()
