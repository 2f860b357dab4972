"""Tests for exit code names."""

from pomodo_cli.utils.exit_codes import (
    ERROR_GENERAL,
    ERROR_INVALID_ARGS,
    ERROR_NOT_FOUND,
    SUCCESS,
    get_exit_code_name,
)


def test_known_codes():
    assert get_exit_code_name(SUCCESS) == "SUCCESS"
    assert get_exit_code_name(ERROR_GENERAL) == "ERROR_GENERAL"
    assert get_exit_code_name(ERROR_INVALID_ARGS) == "ERROR_INVALID_ARGS"
    assert get_exit_code_name(ERROR_NOT_FOUND) == "ERROR_NOT_FOUND"


def test_unknown_code():
    assert get_exit_code_name(42) == "UNKNOWN(42)"
