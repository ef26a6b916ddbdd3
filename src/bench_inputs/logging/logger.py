"""Synchronous buffered logger implementation."""

import sys
import traceback

from bench_inputs.clock import datetime_now
from bench_inputs.logging.config import LoggerConfig, LogLevel
from bench_inputs.logging.handlers import BaseLogHandler


class Logger:
    """A simple logger that buffers messages and pushes them to.

    configured handlers once the buffer fills, on warnings and errors, or when
    flushed explicitly. Nothing runs in the background, so logging never
    competes with a timed section for the CPU.
    """

    def __init__(
        self,
        name: str = "",
        config: LoggerConfig | None = None,
        handlers: list[BaseLogHandler] | None = None,
    ):
        """Initializes a Logger with specified configuration and handlers.

        Args:
            name (str): Name of the logger. Defaults to an empty string.
            config (LoggerConfig): Configuration settings for the logger (base level, stdout, buffer size).
            handlers (list[BaseLogHandler], optional): A list of handler objects that inherit from BaseLogHandler.
                Defaults to an empty list if not provided.

        Raises:
            TypeError: If one of the provided handlers does not inherit from BaseLogHandler.

        """
        self._name = name

        self._config = config
        if self._config is None:
            self._config = LoggerConfig()

        self._handlers = handlers
        if self._handlers is None:
            self._handlers = []

        for handler in self._handlers:
            if not isinstance(handler, BaseLogHandler):
                raise TypeError(
                    f"Invalid handler class; expected BaseLogHandler but got {type(handler)}"
                )
            handler.add_primary_config(self._config)

        self._buffer: list[str] = []
        self._is_running = True

    @property
    def name(self) -> str:
        return self._name

    @property
    def config(self) -> LoggerConfig:
        return self._config

    def flush(self) -> None:
        """Flushes the log message buffer to stdout and all handlers."""
        if not self._buffer:
            return

        buffer, self._buffer = self._buffer, []

        if self._config.do_stdout:
            print("\n".join(buffer))

        for handler in self._handlers:
            try:
                handler.push(buffer)
            except Exception:
                traceback.print_exc(file=sys.stderr)

    def _process_log(self, level: LogLevel, msg: str) -> None:
        """Formats a message and buffers it, flushing when required.

        Args:
            level (LogLevel): The severity level of the message.
            msg (str): The actual log message.

        """
        log_msg = self._config.str_format % {
            "asctime": datetime_now(),
            "name": self._name,
            "levelname": level.name,
            "message": msg,
        }
        self._buffer.append(log_msg)

        if level >= LogLevel.WARNING or len(self._buffer) >= self._config.buffer_size:
            self.flush()

    def _is_enabled(self, level: LogLevel) -> bool:
        return self._is_running and self._config.base_level <= level

    def set_log_level(self, level: LogLevel) -> None:
        """Modify the logger's base log level at runtime.

        Args:
            level (LogLevel): The new base log level.

        """
        self.debug(f"Changing base log level from {self._config.base_level.name} to {level.name}")
        self._config.base_level = level
        for handler in self._handlers:
            handler.add_primary_config(self._config)

    def trace(self, msg: str) -> None:
        """Send a trace-level log message."""
        if self._is_enabled(LogLevel.TRACE):
            self._process_log(LogLevel.TRACE, msg)

    def debug(self, msg: str) -> None:
        """Send a debug-level log message."""
        if self._is_enabled(LogLevel.DEBUG):
            self._process_log(LogLevel.DEBUG, msg)

    def info(self, msg: str) -> None:
        """Send an info-level log message."""
        if self._is_enabled(LogLevel.INFO):
            self._process_log(LogLevel.INFO, msg)

    def warning(self, msg: str) -> None:
        """Send a warning-level log message."""
        if self._is_enabled(LogLevel.WARNING):
            self._process_log(LogLevel.WARNING, msg)

    def error(self, msg: str) -> None:
        """Send an error-level log message."""
        if self._is_enabled(LogLevel.ERROR):
            self._process_log(LogLevel.ERROR, msg)

    def close(self) -> None:
        """Flush remaining messages and close all handlers.

        Further log calls are ignored.
        """
        if not self._is_running:
            return
        self.flush()
        self._is_running = False
        for handler in self._handlers:
            handler.close()
