import logging
import typing as t

from . import fetch
from .exceptions import AocfetchError
from .get import get_context
from .models import Level
from .utils import colored


log = logging.getLogger(__name__)


def _coerce_val(val):
    # adventofcode.com only accepts strings, but most answers are numbers.
    # integral floats like 1234.0 are sent as "1234".
    if isinstance(val, bool):
        raise AocfetchError(f"can not submit bool value {val!r}")
    if isinstance(val, float) and val.is_integer():
        log.warning("coerced float value %r", val)
        val = int(val)
    if isinstance(val, int):
        val = str(val)
    if not isinstance(val, str):
        raise AocfetchError(f"can not submit {type(val).__name__} value {val!r}")
    return val


def _color_for(message):
    if fetch.verify(message):
        return "green"
    if "Did you already complete it" in message:
        return "yellow"
    if "That's not the right answer" in message:
        return "red"
    if "You gave an answer too recently" in message:
        return "red"
    log.warning("Unrecognised submit message %r", message)
    return None


def submit(
    answer: t.Union[int, float, str],
    level: t.Union[Level, int, str, None] = None,
    day: t.Optional[int] = None,
    year: t.Optional[int] = None,
    session: t.Optional[str] = None,
    quiet: bool = False,
) -> str:
    """
    Submit your answer to adventofcode.com, and print the response to the terminal.
    The only required argument is `answer`. `level` defaults to the first part of
    the puzzle, `day` and `year` default to today's puzzle and `session` to the
    cookie found in the environment or config dir.
    `answer` can be a string or a number (numbers will be coerced into strings).

    Pass `quiet=True` to suppress the printout. The server's message is returned
    either way; `aocfetch.fetch.verify` tells you if it was the right answer.
    """
    if answer in {"", None, "None"}:
        raise AocfetchError(f"cowardly refusing to submit non-answer: {answer!r}")
    answer = _coerce_val(answer)
    if level is None:
        level = Level.FIRST
    ctx = get_context(session=session, day=day, year=year, level=Level.coerce(level))
    message = fetch.submit(ctx, answer)
    if not quiet:
        print(colored(message, color=_color_for(message)))
    return message
