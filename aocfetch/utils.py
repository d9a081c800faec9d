from __future__ import annotations

import logging
import os
import platform
import re
import typing as t
from importlib.metadata import version
from zoneinfo import ZoneInfo

import html2text
import urllib3

from .exceptions import TransportError

log: logging.Logger = logging.getLogger(__name__)
AOC_TZ = ZoneInfo("America/New_York")
_v = version("advent-of-code-fetch")
USER_AGENT = f"advent-of-code-fetch v{_v}"


class HttpClient:
    # every request to adventofcode.com goes through this wrapper
    # so that the session cookie and user agent headers are always set.
    # no retries and no redirects: one call here is one request on the wire.

    pool_manager: urllib3.PoolManager
    req_count: dict[t.Literal["GET", "POST"], int]

    def __init__(self) -> None:
        proxy_url = os.environ.get("http_proxy") or os.environ.get("https_proxy")
        headers = {"User-Agent": USER_AGENT}
        if proxy_url:
            log.debug("using proxy %s", proxy_url)
            self.pool_manager = urllib3.ProxyManager(proxy_url, headers=headers)
        else:
            self.pool_manager = urllib3.PoolManager(headers=headers)
        self.req_count = {"GET": 0, "POST": 0}

    def _headers(self, token: str) -> dict[str, str]:
        return self.pool_manager.headers | {"Cookie": f"session={token}"}

    def get(self, url: str, token: str) -> urllib3.BaseHTTPResponse:
        # puzzle prose and user inputs
        try:
            resp = self.pool_manager.request(
                "GET", url, headers=self._headers(token), redirect=False, retries=False
            )
        except urllib3.exceptions.HTTPError as err:
            log.error("GET %s failed: %r", url, err)
            raise TransportError(f"GET {url} failed: {err}") from err
        self.req_count["GET"] += 1
        return resp

    def post(
        self, url: str, token: str, fields: t.Mapping[str, str]
    ) -> urllib3.BaseHTTPResponse:
        # submitting answers
        try:
            resp = self.pool_manager.request_encode_body(
                method="POST",
                url=url,
                fields=fields,
                headers=self._headers(token),
                encode_multipart=False,
                redirect=False,
                retries=False,
            )
        except urllib3.exceptions.HTTPError as err:
            log.error("POST %s failed: %r", url, err)
            raise TransportError(f"POST {url} failed: {err}") from err
        self.req_count["POST"] += 1
        return resp


http: HttpClient = HttpClient()


def get_html_section(html: str, tag: str) -> str | None:
    """
    Inner html of the first <tag>...</tag> in the document, or None.
    This is a plain regex match: same-name tags nested inside the section end it
    early, and attributes on the opening tag prevent a match at all.
    """
    pattern = f"<{re.escape(tag)}>(.*?)</{re.escape(tag)}>"
    match = re.search(pattern, html, flags=re.DOTALL)
    if match is None:
        log.debug("no <%s> section found", tag)
        return None
    return match.group(1)


def html_to_text(html: str) -> str:
    """Render an html fragment as Markdown-flavoured plain text."""
    converter = html2text.HTML2Text()
    converter.body_width = 0  # keep paragraphs on one line
    return converter.handle(html)


_ANSIColor = t.Literal[
    "black", "red", "green", "yellow", "blue", "magenta", "cyan", "white"
]
_ansi_colors = t.get_args(_ANSIColor)
if platform.system() == "Windows":
    os.system("color")  # hack - makes ANSI colors work in the windows cmd window


def colored(txt: str, color: _ANSIColor | None) -> str:
    if color is None:
        return txt
    code = _ansi_colors.index(color.casefold())
    reset = "\x1b[0m"
    return f"\x1b[{code + 30}m{txt}{reset}"
