import pytest

from mathlayout import AttributeDomainError
from mathlayout.utils import em, escape, hyphenate, length2em, percent


def test_em():
    assert em(0) == "0em"
    assert em(.0004) == "0em"
    assert em(1) == "1em"
    assert em(-.25) == "-0.25em"
    assert em(1 / 3) == "0.333em"


def test_percent():
    assert percent(.5) == "50%"
    assert percent(2 ** -.5) == "70.7%"


def test_hyphenate_and_escape():
    assert hyphenate("verticalAlign") == "vertical-align"
    assert hyphenate("marginTop") == "margin-top"
    assert escape("<a & 'b'>") == "&lt;a &amp; &apos;b&apos;&gt;"


@pytest.mark.parametrize("length, expected", [
    ("1em", 1),
    (" 2.5em ", 2.5),
    (".5ex", .5 * .431),
    ("18mu", 1),
    ("16px", 1),
    ("12pt", 1),
    ("50%", .25),
    ("thickmathspace", 5 / 18),
    ("negativethinmathspace", -3 / 18),
    (.75, .75),
])
def test_length2em(length, expected):
    assert length2em(length, size=.5) == pytest.approx(expected)


def test_missing_length_gives_the_default():
    assert length2em(None, .15) == .15
    assert length2em("", .15) == .15


@pytest.mark.parametrize("length", ["wide", "1 em", "em1", True])
def test_bad_lengths(length):
    with pytest.raises(AttributeDomainError):
        length2em(length)
