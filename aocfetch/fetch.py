"""
Everything that talks to adventofcode.com lives here.

The functions are stateless: each one takes a `SessionContext` saying which
puzzle, which part and whose cookie, makes exactly one request, and hands back
plain text. The page structure of the site isn't a contract, so a missing title
or a missing <main> section gives empty strings rather than errors. Only a
missing year/day, a transport failure or a non-2xx response will raise.
"""
from __future__ import annotations

import logging
import re

from .exceptions import MissingParameter
from .exceptions import RemoteRequestFailed
from .models import SessionContext
from .utils import get_html_section
from .utils import html_to_text
from .utils import http


log = logging.getLogger(__name__)


BASE = "https://adventofcode.com"
RIGHT_ANSWER = "That's the right answer!"
_title_pattern = re.compile(r"<h2>--- Day .*?: (.*?) ---</h2>")


def get_url(ctx: SessionContext, suffix: str = "") -> str:
    """The puzzle page url for ctx, with suffix (e.g. "/input") appended."""
    if ctx.year is None or ctx.day is None:
        raise MissingParameter(f"day or year not set (year={ctx.year}, day={ctx.day})")
    return f"{BASE}/{ctx.year}/day/{ctx.day}{suffix}"


def _check_status(response, url):
    if not 200 <= response.status < 300:
        log.error("got %s status code", response.status)
        log.error(response.data.decode(errors="replace"))
        raise RemoteRequestFailed(response.status, url)


def get_content(ctx: SessionContext, suffix: str = "") -> str:
    """GET the puzzle page (or a sub-page of it) and return the response text."""
    url = get_url(ctx, suffix)
    log.info("getting %s token=%s", url, ctx.sanitized_cookie)
    response = http.get(url, token=ctx.cookie)
    _check_status(response, url)
    return response.data.decode(errors="replace")


def get_title(html: str) -> str:
    """Puzzle title from the "--- Day N: Title ---" heading, or "" if there isn't one."""
    match = _title_pattern.search(html)
    if match is None:
        log.debug("no puzzle title found")
        return ""
    return match.group(1)


def _trim_brief(text):
    # the first two and last two lines of the converted <main> are the heading
    # and the "get your puzzle input" footer, not the puzzle description
    # split on "\n" only, other line boundaries like \u2028 belong to the prose
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    lines = [line.removesuffix("\r") for line in lines]
    keep = max(len(lines) - 4, 0)
    body = "".join(line + "\n" for line in lines[2 : 2 + keep])
    return body.strip()


def get_brief(ctx: SessionContext) -> tuple[str, str]:
    """
    Returns a tuple (title, body) for the puzzle page. The body is the puzzle
    description rendered as plain text.
    """
    html = get_content(ctx)
    title = get_title(html)
    main = get_html_section(html, "main") or ""
    body = _trim_brief(html_to_text(main))
    return title, body


def get_input(ctx: SessionContext) -> str:
    """Your puzzle input, exactly as the server sent it."""
    return get_content(ctx, "/input")


def submit(ctx: SessionContext, answer: str) -> str:
    """
    POST answer for the level in ctx. Returns the server's verdict message as
    plain text; pass it to `verify` to know whether the answer was accepted.
    """
    url = get_url(ctx, "/answer")
    fields = {"level": ctx.level.form_value, "answer": answer}
    log.info(
        "posting %r to %s (level %s) token=%s",
        answer,
        url,
        ctx.level.value,
        ctx.sanitized_cookie,
    )
    response = http.post(url, token=ctx.cookie, fields=fields)
    _check_status(response, url)
    main = get_html_section(response.data.decode(errors="replace"), "main") or ""
    return html_to_text(main).strip()


def verify(text: str) -> bool:
    """Was this submission response a correct answer?"""
    return RIGHT_ANSWER in text
