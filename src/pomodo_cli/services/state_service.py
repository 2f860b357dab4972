"""Loading and saving the persisted session state."""

from __future__ import annotations

import os
import tempfile
from datetime import date
from pathlib import Path

from pomodo_cli.models.focus.codec import StateDecodeError, decode_state, encode_state
from pomodo_cli.models.focus.state import State
from pomodo_cli.utils.logger import get_logger


def today() -> str:
    """Local calendar day as YYYY-MM-DD."""
    return date.today().isoformat()


class StateStore:
    """Reads and writes ``State`` as a binary file."""

    def __init__(self, path: Path):
        self.path = Path(path)

    def load(self, day: str | None = None) -> State:
        """Load the state and roll it over to ``day`` (default: today).

        A missing or unreadable file gives an empty state; this is never
        fatal.
        """
        day = day or today()
        logger = get_logger()
        try:
            data = self.path.read_bytes()
        except FileNotFoundError:
            logger.info("No state file at %s, starting fresh", self.path)
            return State.empty(day)
        except OSError as e:
            logger.warning("Could not read state file %s: %s", self.path, e)
            return State.empty(day)

        try:
            state = decode_state(data)
        except StateDecodeError as e:
            logger.warning("Ignoring malformed state file %s: %s", self.path, e)
            return State.empty(day)

        if state.roll_over(day):
            logger.info("New day %s, history cleared", day)
        return state

    def save(self, state: State) -> None:
        """Write the state atomically. ``OSError`` propagates to the caller."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "wb") as f:
                f.write(encode_state(state))
            os.replace(tmp_name, self.path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
        get_logger().debug("Saved state to %s", self.path)
