import logging

import pytest

from aocfetch.exceptions import AocfetchError
from aocfetch.exceptions import RemoteRequestFailed
from aocfetch.models import Level
from aocfetch.post import submit
from aocfetch.utils import colored


def test_submit_correct_answer(pook, capsys):
    post = pook.post(
        url="https://adventofcode.com/2018/day/1/answer",
        headers={"Cookie": "session=whatever"},
        content="application/x-www-form-urlencoded",
        body="level=1&answer=1234",
        response_body="<main><article><p>That's the right answer! Yeah!!</p></article></main>",
    )
    message = submit(1234, level=1, day=1, year=2018, session="whatever")
    assert post.calls == 1
    assert message == "That's the right answer! Yeah!!"
    out, err = capsys.readouterr()
    assert colored("That's the right answer! Yeah!!", "green") in out


@pytest.mark.parametrize("level", [2, "2", "b", Level.SECOND])
def test_submit_part_two(pook, level):
    post = pook.post(
        url="https://adventofcode.com/2018/day/1/answer",
        body="level=2&answer=abc",
        response_body="<main><p>That's the right answer!</p></main>",
    )
    submit("abc", level=level, day=1, year=2018, quiet=True)
    assert post.calls == 1


def test_submit_defaults_to_first_level(pook):
    post = pook.post(
        url="https://adventofcode.com/2018/day/1/answer",
        body="level=1&answer=abc",
        response_body="<main><p>That's the right answer!</p></main>",
    )
    submit("abc", day=1, year=2018, quiet=True)
    assert post.calls == 1


def test_submit_float_coerced(pook, caplog):
    post = pook.post(
        url="https://adventofcode.com/2018/day/1/answer",
        body="level=1&answer=1234",
        response_body="<main><p>That's the right answer!</p></main>",
    )
    submit(1234.0, day=1, year=2018, quiet=True)
    assert post.calls == 1
    assert ("aocfetch.post", logging.WARNING, "coerced float value 1234.0") in caplog.record_tuples


@pytest.mark.parametrize("value", ["", None, "None"])
def test_submit_refuses_non_answer(value):
    with pytest.raises(AocfetchError(f"cowardly refusing to submit non-answer: {value!r}")):
        submit(value, day=1, year=2018)


def test_submit_refuses_unsupported_type():
    with pytest.raises(AocfetchError("can not submit float value 1.5")):
        submit(1.5, day=1, year=2018)


@pytest.mark.parametrize("value", [True, False])
def test_submit_refuses_bool(value):
    with pytest.raises(AocfetchError(f"can not submit bool value {value!r}")):
        submit(value, day=1, year=2018)


def test_submit_bogus_level():
    with pytest.raises(AocfetchError("level must be 1 or 2, got 'c'")):
        submit(1234, level="c")


def test_server_error(pook, freezer):
    url = "https://adventofcode.com/2018/day/1/answer"
    freezer.move_to("2018-12-01 12:00:00Z")
    pook.post(url, reply=500)
    with pytest.raises(RemoteRequestFailed(500, url)):
        submit(1234, level=1)


def test_submit_wrong_answer(pook, capsys):
    html = "<main><article><p>That's not the right answer. (You guessed WROOOONG.)</p></article></main>"
    pook.post(url="https://adventofcode.com/2015/day/1/answer", response_body=html)
    submit(1234, year=2015, day=1)
    out, err = capsys.readouterr()
    msg = colored("That's not the right answer. (You guessed WROOOONG.)", "red")
    assert msg in out


def test_submit_when_already_solved(pook, capsys):
    html = "<main><article><p>You don't seem to be solving the right level. Did you already complete it?</p></article></main>"
    pook.post(url="https://adventofcode.com/2018/day/1/answer", response_body=html)
    submit(1234, year=2018, day=1)
    out, err = capsys.readouterr()
    msg = "You don't seem to be solving the right level. Did you already complete it?"
    assert colored(msg, "yellow") in out


def test_submit_too_recently(pook, capsys):
    html = "<main><article><p>You gave an answer too recently.</p></article></main>"
    pook.post(url="https://adventofcode.com/2015/day/25/answer", response_body=html)
    submit(1234, year=2015, day=25)
    out, err = capsys.readouterr()
    assert colored("You gave an answer too recently.", "red") in out


def test_submit_unrecognised_message(pook, capsys, caplog):
    pook.post(
        url="https://adventofcode.com/2015/day/3/answer",
        response_body="<main><p>Huh?</p></main>",
    )
    submit(1234, year=2015, day=3)
    out, err = capsys.readouterr()
    assert out == "Huh?\n"
    assert ("aocfetch.post", logging.WARNING, "Unrecognised submit message 'Huh?'") in caplog.record_tuples


def test_submit_quiet(pook, capsys):
    pook.post(
        url="https://adventofcode.com/2018/day/1/answer",
        response_body="<main><p>That's the right answer!</p></main>",
    )
    message = submit(1234, year=2018, day=1, quiet=True)
    assert message == "That's the right answer!"
    out, err = capsys.readouterr()
    assert out == err == ""
