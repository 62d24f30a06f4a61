import logging

from pydantic_settings import BaseSettings
from pydantic import field_validator
from typing import Literal


class RelaySettings(BaseSettings):
    """Relay service configuration.

    Supports two deployment modes:
      chat  – session-gated chat (/join, /message, /messages?since=)
      board – open message board plus the presence beacon counter
    """

    relay_mode: Literal["chat", "board"] = "chat"
    host: str = "0.0.0.0"
    port: int = 3000
    session_ttl_seconds: int = 3600
    sweep_interval_seconds: float = 60.0
    message_max_length: int = 200
    message_log_cap: int = 500
    log_level: str = "INFO"

    model_config = {"env_prefix": "", "case_sensitive": False}

    @field_validator(
        "session_ttl_seconds",
        "sweep_interval_seconds",
        "message_max_length",
        "message_log_cap",
    )
    @classmethod
    def validate_positive(cls, v):
        if v <= 0:
            raise ValueError(f"Must be positive, got {v!r}")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v!r}")
        return level

    @property
    def is_chat(self) -> bool:
        return self.relay_mode == "chat"

    @property
    def is_board(self) -> bool:
        return self.relay_mode == "board"
