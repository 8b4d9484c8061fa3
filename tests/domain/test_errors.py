"""Tests for configuration error types."""

import pytest

from enginewire.domain.errors import ConfigurationError, MissingKeyError, ParseError


class TestMissingKeyError:
    def test_message_and_key(self) -> None:
        err = MissingKeyError("TireCount")
        assert err.key == "TireCount"
        assert err.code == "MISSING_KEY"
        assert str(err) == "Missing required configuration key: TireCount"

    def test_is_key_error(self) -> None:
        with pytest.raises(KeyError):
            raise MissingKeyError("PistonCount")


class TestParseError:
    def test_message_key_and_raw(self) -> None:
        err = ParseError("PistonCount", "abc")
        assert err.key == "PistonCount"
        assert err.raw == "abc"
        assert err.code == "PARSE_ERROR"
        assert "'abc'" in str(err)
        assert "PistonCount" in str(err)


def test_common_base() -> None:
    assert issubclass(MissingKeyError, ConfigurationError)
    assert issubclass(ParseError, ConfigurationError)
