"""Format log lines as ``[LEVEL]: message``."""

from __future__ import annotations

from enum import Enum


class LogLevel(Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"

    def __str__(self) -> str:
        return self.value


def log(level: LogLevel, message: str) -> str:
    return f"[{level}]: {message}"


def debug(message: str) -> str:
    return log(LogLevel.DEBUG, message)


def info(message: str) -> str:
    return log(LogLevel.INFO, message)


def warn(message: str) -> str:
    return log(LogLevel.WARNING, message)


def error(message: str) -> str:
    return log(LogLevel.ERROR, message)