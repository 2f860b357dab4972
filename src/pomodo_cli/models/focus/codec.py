"""Binary encoding of ``State`` for the state file."""

from google.protobuf.message import DecodeError

from . import schema
from .state import State


class StateDecodeError(ValueError):
    """Raised when the persisted bytes are not a valid state message."""


def encode_state(state: State) -> bytes:
    return state.to_proto().SerializeToString()


def decode_state(data: bytes) -> State:
    """Parse bytes written by ``encode_state``.

    Empty input decodes to an empty state, as protobuf defines it. Invalid
    UTF-8 in a string field is reported like any other malformed input.
    """
    proto = schema.StateProto()
    try:
        proto.ParseFromString(data)
    except (DecodeError, UnicodeDecodeError) as e:
        raise StateDecodeError(f"Invalid state data: {e}") from e
    return State.from_proto(proto)
