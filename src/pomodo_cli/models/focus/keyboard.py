"""Non-blocking keyboard input for the interactive timer."""

import select
import sys
import termios
import tty
from typing import Optional

KEY_UP = "KEY_UP"
KEY_DOWN = "KEY_DOWN"

# Arrow keys in normal and application cursor mode
_ESCAPE_SEQUENCES = {
    "[A": KEY_UP,
    "[B": KEY_DOWN,
    "OA": KEY_UP,
    "OB": KEY_DOWN,
}


class KeyboardHandler:
    """Reads single keypresses from a cbreak-mode terminal."""

    def __init__(self):
        self.fd = sys.stdin.fileno()
        self.old_settings = None
        self._setup()

    def _setup(self):
        """Setup terminal for non-blocking input."""
        try:
            self.old_settings = termios.tcgetattr(self.fd)
            tty.setcbreak(self.fd)
        except termios.error:
            # Not a TTY (piped input, CI)
            pass

    def get_key(self, timeout: float = 0.0) -> Optional[str]:
        """
        Wait up to ``timeout`` seconds for a keypress.

        Returns the key character (case preserved), ``KEY_UP``/``KEY_DOWN`` for
        the arrow keys, or None if no key was pressed.
        """
        try:
            ready, _, _ = select.select([sys.stdin], [], [], timeout)
        except (OSError, ValueError):
            return None
        if not ready:
            return None
        key = sys.stdin.read(1)
        if key == "\x1b":
            # The terminal sends the whole sequence at once.
            return _ESCAPE_SEQUENCES.get(sys.stdin.read(2))
        return key or None

    def read_line(self, prompt: str = "") -> str:
        """Blocking line entry with echo, used for typing a new todo."""
        self.stop()
        try:
            return input(prompt).strip()
        except EOFError:
            return ""
        finally:
            self._setup()

    def stop(self):
        """Restore terminal settings."""
        if self.old_settings:
            try:
                termios.tcsetattr(self.fd, termios.TCSADRAIN, self.old_settings)
            except termios.error:
                pass
