"""Level names accepted by ``COLLECTIONOPS_LOG_LEVEL`` and ``setup_logging``."""

from enum import Enum


class LogLevel(str, Enum):
    """Threshold for collectionops log output.

    Operations only emit ``debug`` events (``sort_completed``,
    ``grouping_built``, ...), so anything above DEBUG silences them. TRACE
    sits below DEBUG for host applications that use it; OFF suppresses
    everything, including records from other libraries sharing the root
    logger.

    Lookup ignores case and accepts the stdlib spellings ``WARNING`` and
    ``CRITICAL``, so ``LogLevel("warning") is LogLevel.WARN``.
    """

    TRACE = "TRACE"
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARN = "WARN"
    ERROR = "ERROR"
    FATAL = "FATAL"
    OFF = "OFF"

    @classmethod
    def _missing_(cls, value: object) -> "LogLevel | None":
        if isinstance(value, str):
            normalized = value.strip().upper()
            if normalized == "WARNING":
                return cls.WARN
            if normalized == "CRITICAL":
                return cls.FATAL
            for member in cls:
                if member.value == normalized:
                    return member
        return None

    def to_python_level(self) -> int:
        """Return the numeric stdlib ``logging`` level for this threshold."""
        return _PYTHON_LEVELS[self]


_PYTHON_LEVELS = {
    LogLevel.TRACE: 5,
    LogLevel.DEBUG: 10,
    LogLevel.INFO: 20,
    LogLevel.WARN: 30,
    LogLevel.ERROR: 40,
    LogLevel.FATAL: 50,
    LogLevel.OFF: 100,
}
