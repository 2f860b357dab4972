"""Shared construction of services from configuration."""

from pomodo_cli.config import ConfigManager
from pomodo_cli.services.log_service import LogService
from pomodo_cli.services.state_service import StateStore


def get_state_store(config_manager: ConfigManager) -> StateStore:
    return StateStore(config_manager.state_file)


def get_log_service(config_manager: ConfigManager) -> LogService:
    return LogService(config_manager.todo_log, config_manager.history_log)
