import pytest

from trip_planner.config import parse_timeout


@pytest.mark.parametrize("raw", [None, "", "0", "0.0"])
def test_unset_or_zero_timeout_means_no_bound(raw):
    assert parse_timeout(raw) is None


def test_timeout_seconds():
    assert parse_timeout("12.5") == 12.5


def test_invalid_timeout_names_the_variable():
    with pytest.raises(RuntimeError, match="GENERATION_TIMEOUT_S"):
        parse_timeout("abc")
