"""HTTP server that serves the site's single page."""

from __future__ import annotations

import argparse
import logging
from http import HTTPStatus
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

from .components import render_page

logger = logging.getLogger(__name__)

PAGE_TITLE = "GoProject"
DEFAULT_PORT = 8080


def list_all_data() -> str:
    """Render the page served for every GET request."""
    return render_page(PAGE_TITLE)


class RequestHandler(BaseHTTPRequestHandler):
    """Serves the page for GET and HEAD on any path; rejects POST."""

    def _send_page(self, include_body: bool) -> None:
        body = list_all_data().encode("utf-8")
        self.send_response(HTTPStatus.OK)
        self.send_header("Content-Type", "text/html; charset=utf-8")
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        if include_body:
            self.wfile.write(body)

    def do_GET(self) -> None:
        self._send_page(include_body=True)

    def do_HEAD(self) -> None:
        self._send_page(include_body=False)

    def do_POST(self) -> None:
        body = b"Method Not Allowed\n"
        self.send_response(HTTPStatus.METHOD_NOT_ALLOWED)
        self.send_header("Allow", "GET, HEAD")
        self.send_header("Content-Type", "text/plain; charset=utf-8")
        self.send_header("X-Content-Type-Options", "nosniff")
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def log_message(self, format: str, *args) -> None:  # noqa: A002
        logger.debug("%s - %s", self.address_string(), format % args)


def make_server(host: str = "", port: int = DEFAULT_PORT) -> ThreadingHTTPServer:
    """Create a server bound to host and port, ready to serve."""
    return ThreadingHTTPServer((host, port), RequestHandler)


def main(argv: list[str] | None = None) -> int:
    """Run the server until interrupted; return the exit status."""
    parser = argparse.ArgumentParser(description="Serve the site over HTTP.")
    parser.add_argument("--host", default="", help="address to bind (default: all)")
    parser.add_argument(
        "--port", type=int, default=DEFAULT_PORT, help="port to listen on"
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(message)s")
    try:
        server = make_server(args.host, args.port)
    except OSError as exc:
        logger.error("%s", exc)
        return 1

    logger.info("Listening on port %d", args.port)
    with server:
        try:
            server.serve_forever()
        except KeyboardInterrupt:
            pass
    return 0


if __name__ == "__main__":
    raise SystemExit(main())