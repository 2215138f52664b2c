"""
Simple HTTP server to serve the generated site.
"""

import logging
from functools import partial
from http.server import SimpleHTTPRequestHandler, ThreadingHTTPServer
from pathlib import Path
from typing import Optional

from models import DEFAULT_PORT, ServeInfo
from services.errors import ServerError

logger = logging.getLogger(__name__)


class SiteRequestHandler(SimpleHTTPRequestHandler):
    """Static file handler with optional directory listings and logged access."""

    listing = True

    def list_directory(self, path):
        if not self.listing:
            self.send_error(404, "File not found")
            return None
        return super().list_directory(path)

    def log_message(self, format, *args):
        logger.info("%s - %s", self.address_string(), format % args)


class StaticServer:
    """Serves a directory tree over plain HTTP."""

    def __init__(self, directory: Path, host: str = "", port: int = DEFAULT_PORT,
                 listing: bool = True):
        self.directory = Path(directory)
        self.host = host
        self.port = port
        self.listing = listing
        self.httpd: Optional[ThreadingHTTPServer] = None

    def _handler_class(self):
        handler = type("BoundSiteRequestHandler", (SiteRequestHandler,), {"listing": self.listing})
        return partial(handler, directory=str(self.directory))

    def start(self) -> ServeInfo:
        """Bind the listener. Raises ServerError if the address is unavailable."""
        if not self.directory.is_dir():
            raise ServerError(f"Site directory '{self.directory}' doesn't exist")

        try:
            self.httpd = ThreadingHTTPServer((self.host, self.port), self._handler_class())
        except OSError as e:
            raise ServerError(f"Failed to bind {self.host or '*'}:{self.port}: {e}") from e

        self.port = self.httpd.server_address[1]
        return self.info

    @property
    def info(self) -> ServeInfo:
        return ServeInfo(host=self.host, port=self.port, directory=self.directory, listing=self.listing)

    @property
    def url(self) -> str:
        return self.info.url

    def serve_forever(self):
        """Serve until shutdown() is called or the process is interrupted."""
        if self.httpd is None:
            self.start()
        try:
            self.httpd.serve_forever()
        except KeyboardInterrupt:
            logger.info("Server stopped.")
        finally:
            self.httpd.server_close()

    def shutdown(self):
        if self.httpd is not None:
            self.httpd.shutdown()
