import datetime
from logging import getLogger

from . import fetch
from .exceptions import AocfetchError
from .models import default_cookie
from .models import Level
from .models import SessionContext
from .utils import AOC_TZ


log = getLogger(__name__)


def get_context(session=None, day=None, year=None, level=Level.FIRST):
    """
    Build a SessionContext, filling in whatever was left unspecified: the cookie
    from `default_cookie`, the day and year from today's date.
    """
    if session is None:
        session = default_cookie()
    if day is None:
        day = current_day()
        log.info("current day=%s", day)
    if year is None:
        year = most_recent_year()
        log.info("most recent year=%s", year)
    return SessionContext(cookie=session, year=year, day=day, level=level)


def get_data(session=None, day=None, year=None):
    """
    Get input data for day (1-25) and year (2015+).
    User's session cookie (str) is needed - puzzle inputs differ by user.
    """
    ctx = get_context(session=session, day=day, year=year)
    return fetch.get_input(ctx)


def get_brief(session=None, day=None, year=None):
    """Get the (title, body) of the puzzle description for day and year."""
    ctx = get_context(session=session, day=day, year=year)
    return fetch.get_brief(ctx)


def most_recent_year():
    """
    This year, if it's December.
    The most recent year, otherwise.
    Note: Advent of Code started in 2015
    """
    aoc_now = datetime.datetime.now(tz=AOC_TZ)
    year = aoc_now.year
    if aoc_now.month < 12:
        year -= 1
    if year < 2015:
        raise AocfetchError("Time travel not supported yet")
    return year


def current_day():
    """
    Most recent day, if it's during the Advent of Code. Happy Holidays!
    Day 1 is assumed, otherwise.
    """
    aoc_now = datetime.datetime.now(tz=AOC_TZ)
    if aoc_now.month != 12:
        log.warning("current_day is only available in December (EST)")
        return 1
    return min(aoc_now.day, 25)
