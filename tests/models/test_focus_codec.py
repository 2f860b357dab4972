"""Tests for the binary state encoding."""

from __future__ import annotations

import pytest

from pomodo_cli.models.focus.codec import StateDecodeError, decode_state, encode_state
from pomodo_cli.models.focus.phase_timer import CompletedPhase, PhaseKind
from pomodo_cli.models.focus.state import DEFAULT_TODO, State, Todo


class TestEncodeDecode:
    def test_encode_returns_bytes(self):
        data = encode_state(State.empty("2024-01-01"))
        assert isinstance(data, bytes)
        assert b"2024-01-01" in data

    def test_decode_restores_day_todos_and_history(self):
        done = CompletedPhase(
            kind=PhaseKind.WORK,
            start_time="09:00",
            end_time="09:25",
            duration_seconds=1501.5,
            todo="A",
        )
        state = State(
            day="2024-01-01",
            todos=[Todo("A"), Todo("B", done=True)],
            history=[done],
        )
        restored = decode_state(encode_state(state))

        assert restored.day == "2024-01-01"
        assert restored.todos == [Todo("A")]
        assert restored.history == [done]

    def test_empty_bytes_decode_to_default_state(self):
        state = decode_state(b"")
        assert state.day == ""
        assert [t.text for t in state.todos] == [DEFAULT_TODO]

    def test_truncated_data_raises(self):
        # field 1, length-delimited, claims 5 bytes but only 2 follow
        with pytest.raises(StateDecodeError):
            decode_state(b"\x0a\x05ab")

    def test_decode_error_is_value_error(self):
        assert issubclass(StateDecodeError, ValueError)

    def test_invalid_utf8_string_raises(self):
        # field 1 (todo), two bytes that are not UTF-8
        with pytest.raises(StateDecodeError):
            decode_state(b"\x0a\x02\xff\xfe")

    def test_unicode_error_from_parser_is_wrapped(self, mocker):
        fake_schema = mocker.patch("pomodo_cli.models.focus.codec.schema")
        fake_schema.StateProto.return_value.ParseFromString.side_effect = (
            UnicodeDecodeError("utf-8", b"\xff", 0, 1, "invalid start byte")
        )
        with pytest.raises(StateDecodeError):
            decode_state(b"\x0a\x02\xff\xfe")
