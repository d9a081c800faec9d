import argparse
import datetime
import logging
import sys
from importlib.metadata import version

from . import fetch
from .get import get_context
from .get import most_recent_year
from .models import Level
from .post import submit
from .utils import AOC_TZ


def main():
    """Print your puzzle input (or the puzzle brief), or submit an answer."""
    aoc_now = datetime.datetime.now(tz=AOC_TZ)
    days = range(1, 26)
    years = range(2015, aoc_now.year + int(aoc_now.month == 12))
    parser = argparse.ArgumentParser(
        description=f"Advent of Code Fetch v{version('advent-of-code-fetch')}",
        usage=f"aocfetch [day 1-25] [year 2015-{years[-1]}]",
    )
    parser.add_argument(
        "day",
        nargs="?",
        type=int,
        default=min(aoc_now.day, 25) if aoc_now.month == 12 else 1,
        help="1-25 (default: %(default)s)",
    )
    parser.add_argument(
        "year",
        nargs="?",
        type=int,
        default=most_recent_year(),
        help=f"2015-{years[-1]} (default: %(default)s)",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s v{version('advent-of-code-fetch')}",
    )
    parser.add_argument(
        "-d",
        "--debug",
        action="store_true",
        help="enable debug logging",
    )
    action = parser.add_mutually_exclusive_group()
    action.add_argument(
        "-b",
        "--brief",
        action="store_true",
        help="print the puzzle description instead of the input",
    )
    action.add_argument(
        "-s",
        "--submit",
        metavar="ANSWER",
        help="submit ANSWER and print the server's verdict",
    )
    parser.add_argument(
        "-l",
        "--level",
        type=int,
        choices=[1, 2],
        default=1,
        help="puzzle part to submit for (default: %(default)s)",
    )
    args = parser.parse_args()
    if args.debug:
        logging.basicConfig(level=logging.DEBUG)
    if args.day in years and args.year in days:
        # be forgiving
        args.day, args.year = args.year, args.day
    if args.day not in days or args.year not in years:
        parser.print_usage()
        parser.exit(1)
    if args.submit is not None:
        message = submit(
            args.submit,
            level=Level.coerce(args.level),
            day=args.day,
            year=args.year,
        )
        sys.exit(0 if fetch.verify(message) else 1)
    ctx = get_context(day=args.day, year=args.year)
    if args.brief:
        title, body = fetch.get_brief(ctx)
        w = 80
        print(f"--- Day {ctx.day}: {title} ---".center(w, " "))
        print(fetch.get_url(ctx).center(w, " "))
        print()
        print(body)
    else:
        sys.stdout.write(fetch.get_input(ctx))
