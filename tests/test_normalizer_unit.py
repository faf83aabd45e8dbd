import pytest

from linegraph.normalizer import VULGAR_FRACTIONS, normalize


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("3x − 2y = 5", "3x-2y=5"),
        ("3x – 2y = 5", "3x-2y=5"),
        ("3x — 2y = 5", "3x-2y=5"),
        ("3x － 2y = 5", "3x-2y=5"),
        ("3·x + 2⋅y = 1", "3x+2y=1"),
        ("3×x = 1", "3x=1"),
        ("3*x = 1", "3x=1"),
        ("2(x) + (3)y = (4)", "2x+3y=4"),
        ("½x + ¾y = ⅓", "1/2x+3/4y=1/3"),
        ("⅒X = ⅞", "1/10x=7/8"),
        ("  Y =\t0.5X  + 3 ", "y=0.5x+3"),
    ],
)
def test_normalize_maps_symbols(raw: str, expected: str) -> None:
    assert normalize(raw) == expected


def test_normalize_empty_and_none() -> None:
    assert normalize("") == ""
    assert normalize(None) == ""
    assert normalize("   \n ") == ""


def test_every_vulgar_fraction_maps_to_ascii() -> None:
    for glyph, text in VULGAR_FRACTIONS.items():
        num, den = text.split("/")
        assert normalize(glyph) == text
        assert num.isdigit() and den.isdigit()


@pytest.mark.parametrize(
    "raw",
    ["3x − ¼y = −5", "y = 0.5·x + 3", "(2x) − (y) = ½", "anything @ goes"],
)
def test_normalize_is_idempotent(raw: str) -> None:
    once = normalize(raw)
    assert normalize(once) == once
