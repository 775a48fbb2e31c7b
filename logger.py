"""Process-wide append-only file logger.

Every line written has the form ``"<TAG> <message>\\n"`` and is flushed before
the call returns. A single :class:`Logger` is shared by the whole process; it
is built on first use against :data:`DEFAULT_FILENAME` unless
:func:`init_logger` pointed it somewhere else first.
"""

from __future__ import annotations

import os
import threading
from enum import Enum
from pathlib import Path
from typing import TextIO


DEFAULT_FILENAME = "./.yash.log"


class LoggerError(RuntimeError):
    """Base class for logger contract faults."""


class LoggerNotInitializedError(LoggerError):
    """Raised when writing through a logger that holds no file."""


class LoggerInitError(LoggerError):
    """Raised when the default log file cannot be opened."""


class LogLevel(Enum):
    """Severity of a log line, rendered as its bracketed tag."""

    ERROR = "[ERROR]"
    WARN = "[WARN]"
    INFO = "[INFO]"
    TODO = "[TODO]"

    def __str__(self) -> str:
        return self.value


def _open_append(path: str | os.PathLike[str]) -> TextIO:
    return open(path, "a", encoding="utf-8", errors="backslashreplace", newline="\n")


class Logger:
    """Owns at most one append-mode file handle and writes tagged lines to it."""

    def __init__(self) -> None:
        self._file: TextIO | None = None

    @property
    def is_initialized(self) -> bool:
        return self._file is not None

    def init(self, path: str | os.PathLike[str]) -> "Logger":
        """Open ``path`` for appending, replacing any file already held.

        Args:
            path: Log file location; created if absent, never truncated.

        Returns:
            This logger.

        Raises:
            OSError: If the file cannot be opened for writing, in which case
                the file already held is kept; or if flushing the replaced
                file fails, in which case ``path`` is already installed.
        """
        new_file = _open_append(path)
        old_file, self._file = self._file, new_file
        if old_file is not None:
            _release(old_file)
        return self

    def log(self, level: LogLevel, message: str) -> None:
        """Append one tagged line and flush it."""
        if self._file is None:
            raise LoggerNotInitializedError("logger has no open log file; call init() first")
        self._file.write(f"{level} {message}\n")
        self._file.flush()

    def info(self, message: str) -> None:
        self.log(LogLevel.INFO, message)

    def warn(self, message: str) -> None:
        self.log(LogLevel.WARN, message)

    def error(self, message: str) -> None:
        self.log(LogLevel.ERROR, message)

    def todo(self, message: str) -> None:
        self.log(LogLevel.TODO, message)

    def clone(self) -> "Logger":
        """Return a logger writing to the same file through a duplicated descriptor.

        If the descriptor cannot be duplicated the copy holds no file.
        """
        instance = Logger()
        if self._file is not None:
            instance._file = _duplicate(self._file)
        return instance

    __copy__ = clone

    def close(self) -> None:
        """Flush and close the held file, if any."""
        file, self._file = self._file, None
        if file is not None:
            _release(file)

    def __del__(self) -> None:
        self.close()


def _duplicate(file: TextIO) -> TextIO | None:
    try:
        file.flush()
        fd = os.dup(file.fileno())
    except (OSError, ValueError):
        return None
    try:
        return os.fdopen(fd, "a", encoding="utf-8", errors="backslashreplace", newline="\n")
    except OSError:
        os.close(fd)
        return None


def _release(file: TextIO) -> None:
    try:
        file.flush()
    finally:
        file.close()


_LOGGER: Logger | None = None
_LOCK = threading.Lock()


def _default_logger() -> Logger:
    try:
        return Logger().init(DEFAULT_FILENAME)
    except OSError as exc:
        raise LoggerInitError(
            f"cannot open default log file {Path(DEFAULT_FILENAME).resolve()}: {exc}"
        ) from exc


def _shared_logger() -> Logger:
    # Caller must hold _LOCK.
    global _LOGGER
    if _LOGGER is None:
        _LOGGER = _default_logger()
    return _LOGGER


class SharedLogger:
    """Call-site handle for the process-wide logger.

    Every call takes the shared lock and writes to whatever target is current
    at that moment, so handles stay valid across :func:`init_logger`.
    """

    def log(self, level: LogLevel, message: str, *args: object) -> None:
        log(level, message, *args)

    def info(self, message: str, *args: object) -> None:
        info(message, *args)

    def warn(self, message: str, *args: object) -> None:
        warn(message, *args)

    def error(self, message: str, *args: object) -> None:
        error(message, *args)

    def todo(self, message: str, *args: object) -> None:
        todo(message, *args)


_SHARED = SharedLogger()


def get_logger() -> SharedLogger:
    """Return the shared logger handle, opening the default log file on first use.

    Raises:
        LoggerInitError: If the default log file cannot be opened.
    """
    with _LOCK:
        _shared_logger()
    return _SHARED


def init_logger(path: str | os.PathLike[str]) -> None:
    """Point the shared logger at ``path`` for every later call in the process.

    Raises:
        OSError: If ``path`` cannot be opened, in which case the previous
            target is kept; or if flushing the previous file fails, in which
            case ``path`` is already the target.
    """
    global _LOGGER
    with _LOCK:
        if _LOGGER is None:
            _LOGGER = Logger().init(path)
        else:
            _LOGGER.init(path)


def _format(message: str, args: tuple[object, ...]) -> str:
    if args:
        return message % args
    return message


def log(level: LogLevel, message: str, *args: object) -> None:
    """Format ``message`` printf-style with ``args`` and write it at ``level``."""
    text = _format(message, args)
    with _LOCK:
        _shared_logger().log(level, text)


def info(message: str, *args: object) -> None:
    log(LogLevel.INFO, message, *args)


def warn(message: str, *args: object) -> None:
    log(LogLevel.WARN, message, *args)


def error(message: str, *args: object) -> None:
    log(LogLevel.ERROR, message, *args)


def todo(message: str, *args: object) -> None:
    """Record a ``[TODO]`` line, then stop with ``NotImplementedError``.

    The write is best-effort: a failure to record the line does not prevent
    the stop.
    """
    text = _format(message, args)
    try:
        with _LOCK:
            _shared_logger().log(LogLevel.TODO, text)
    except (OSError, LoggerError):
        pass
    raise NotImplementedError(f"not yet implemented: {text}")
