from __future__ import annotations

import enum
import logging
import os
import sys
from dataclasses import dataclass
from dataclasses import field
from pathlib import Path
from textwrap import dedent

from .exceptions import AocfetchError
from .exceptions import MissingSessionError
from .utils import colored


log = logging.getLogger(__name__)


AOCFETCH_CONFIG_DIR = Path(
    os.environ.get("AOCFETCH_CONFIG_DIR", Path("~", ".config", "aocfetch"))
).expanduser()


class Level(enum.Enum):
    """Which half of a daily puzzle is being worked on."""

    FIRST = 1
    SECOND = 2

    @classmethod
    def coerce(cls, value):
        # accepts the spellings people actually use: 1/2, "1"/"2", "a"/"b"
        if isinstance(value, cls):
            return value
        aliases = {
            1: cls.FIRST,
            "1": cls.FIRST,
            "a": cls.FIRST,
            2: cls.SECOND,
            "2": cls.SECOND,
            "b": cls.SECOND,
        }
        if isinstance(value, str):
            value = value.strip().lower()
        try:
            return aliases[value]
        except (KeyError, TypeError):
            raise AocfetchError(f"level must be 1 or 2, got {value!r}") from None

    @property
    def form_value(self) -> str:
        """The value of the ``level`` field in the answer form."""
        return str(self.value)


@dataclass(frozen=True)
class SessionContext:
    """
    Everything needed to talk to adventofcode.com about one puzzle: which puzzle
    (year, day), which part of it (level), and who is asking (cookie).

    Instances are read-only. Use ``dataclasses.replace`` to move to another day
    or level.
    """

    cookie: str = field(repr=False)
    year: int | None = None
    day: int | None = None
    level: Level = Level.FIRST

    def __post_init__(self):
        object.__setattr__(self, "level", Level.coerce(self.level))

    @property
    def sanitized_cookie(self) -> str:
        return "..." + self.cookie[-4:]

    def __str__(self):
        return (
            f"<{type(self).__name__} {self.year}/{self.day} {self.level.name.lower()}"
            f" (cookie={self.sanitized_cookie})>"
        )

    @classmethod
    def from_env(cls, year=None, day=None, level=Level.FIRST):
        """Build a context using the cookie found by `default_cookie`."""
        return cls(cookie=default_cookie(), year=year, day=day, level=level)


def default_cookie() -> str:
    """
    Discover the session cookie from the environment or the config dir, and exit
    with a diagnostic message if none can be found.
    """
    # export your session id as AOC_SESSION env var
    cookie = os.getenv("AOC_SESSION")
    if cookie:
        log.debug("using session cookie from AOC_SESSION")
        return cookie

    # or chuck it in a plaintext file at ~/.config/aocfetch/token
    path = AOCFETCH_CONFIG_DIR / "token"
    try:
        words = path.read_text(encoding="utf-8").split()
    except FileNotFoundError:
        words = []
    if words:
        log.debug("using session cookie from %s", path)
        return words[0]

    msg = dedent(
        f"""\
        ERROR: AoC session ID is needed to talk to adventofcode.com!
        You can find it in your browser cookies after login.
            1) Save the cookie into a text file {path}, or
            2) Export the cookie in environment variable AOC_SESSION
        """
    )
    print(colored(msg, color="red"), file=sys.stderr)
    raise MissingSessionError("Missing session ID")
