"""Shared test fixtures and configuration.

Provides infrastructure to isolate tests from the real filesystem and
from the wall clock.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta
from unittest.mock import patch

import pytest


# ---------------------------------------------------------------------------
# Time
# ---------------------------------------------------------------------------


class FakeClock:
    """Manually advanced clock usable as both monotonic and wall-clock source."""

    def __init__(self, start: datetime = datetime(2024, 1, 1, 9, 0, 0)):
        self.start = start
        self.seconds = 0.0

    def monotonic(self) -> float:
        return self.seconds

    def wall(self) -> datetime:
        return self.start + timedelta(seconds=self.seconds)

    def advance(self, seconds: float) -> None:
        self.seconds += seconds


@pytest.fixture()
def fake_clock() -> FakeClock:
    return FakeClock()


# ---------------------------------------------------------------------------
# Filesystem isolation
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def isolated_dirs(tmp_path):
    """Point config, data and log directories at *tmp_path*.

    Also resets the config manager and logger singletons so each test starts
    from a clean slate.
    """
    import pomodo_cli.config as config_mod
    import pomodo_cli.utils.logger as logger_mod

    config_dir = tmp_path / "config"
    data_dir = tmp_path / "data"
    log_dir = tmp_path / "logs"

    config_mod._config_manager = None
    logger_mod._logger = None
    logging.getLogger("pomodo_cli").handlers.clear()

    with patch("pomodo_cli.config.user_config_dir", return_value=str(config_dir)):
        with patch("pomodo_cli.config.user_data_dir", return_value=str(data_dir)):
            with patch(
                "pomodo_cli.utils.logger.user_log_dir", return_value=str(log_dir)
            ):
                yield tmp_path

    config_mod._config_manager = None
    logger_mod._logger = None
    for handler in logging.getLogger("pomodo_cli").handlers:
        handler.close()
    logging.getLogger("pomodo_cli").handlers.clear()
