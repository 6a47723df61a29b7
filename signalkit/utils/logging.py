"""Log handlers and helpers for signalkit."""
import io
import logging
import sys
from enum import IntEnum
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional, Union

from signalkit.utils.helpers import check_arg


package_logger = logging.getLogger("signalkit")
logger = logging.getLogger(__name__)


DEFAULT_STREAM = object()


class LogLevel(IntEnum):
    """signalkit log level.

    FULL_DEBUG : Detailed debug log (one record per slot invocation)
    DEBUG : Debug log
    INFO : Information log
    WARNING : Warning log
    ERROR : Error log
    CRITICAL : Critical log
    """

    FULL_DEBUG = logging.DEBUG - 1
    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR
    CRITICAL = logging.CRITICAL


logging.addLevelName(LogLevel.FULL_DEBUG, "FULL_DEBUG")


class SignalFilter(logging.Filter):
    """Keep only the records emitted on behalf of signal `name`.

    Records which do not carry a `signal` attribute are always kept.
    If `name` is None, no record is filtered out.

    Parameters
    ----------
    name : str or None, optional
        Name of the signal to focus on; default None
    """

    def __init__(self, name: Optional[str] = None):
        super().__init__()
        self.signal_name = name

    def filter(self, record: logging.LogRecord) -> bool:
        if self.signal_name is None:
            return True
        signal_name = getattr(record, "signal", None)
        return signal_name is None or signal_name == self.signal_name


class HandlerMixin:
    """Marker class for handlers installed by :py:func:`set_log`."""


class FileLogHandler(RotatingFileHandler, HandlerMixin):
    """Special RotatingFileHandler for signalkit log message.

    Parameters
    ----------
    filename : str or Path, optional
        Log filename; default "signalkit.log"
    backupCount : int, optional
        Number of backup log files; default 5
    encoding : str, optional
        File encoding to be enforced
    """

    def __init__(
        self,
        filename: Union[str, Path] = "signalkit.log",
        backupCount: int = 5,
        encoding: Optional[str] = None,
    ) -> None:
        RotatingFileHandler.__init__(
            self, filename, backupCount=backupCount, encoding=encoding, delay=True
        )


class StreamLogHandler(logging.StreamHandler, HandlerMixin):
    """Special StreamHandler for signalkit log message."""

    def __init__(self, stream: io.TextIOBase = DEFAULT_STREAM) -> None:
        if stream is DEFAULT_STREAM:
            stream = sys.stdout
        logging.StreamHandler.__init__(self, stream=stream)


def rollover_logfile() -> None:
    """Rollover logfile of signalkit file handlers."""
    for handler in package_logger.handlers:
        if isinstance(handler, FileLogHandler):
            handler.doRollover()


def set_log(
    filename: Union[str, Path, None] = None,
    stream: Optional[io.TextIOBase] = DEFAULT_STREAM,
    level: int = LogLevel.INFO,
    signal: Optional[str] = None,
    format: str = "%(message)s",
    encoding: Optional[str] = None,
    backupCount: int = 5,
) -> None:
    """Set the log behavior of signalkit.

    Handlers previously installed by this function are closed and replaced.
    By default, log messages are only written to ``sys.stdout``. Set `filename`
    to also write them into a rotating log file, and `stream` to None to
    deactivate the stream handler.

    Parameters
    ----------
    filename : str or Path or None, optional
        Log filename; default None (no log file)
    stream : io.TextIOBase or None, optional
        Log stream; default ``sys.stdout``
    level : int or LogLevel, optional
        Log level; default LogLevel.INFO
    signal : str or None, optional
        Name of the signal on which to focus the log messages; default None
    format : str, optional
        Log record format; default "%(message)s"
    encoding : str, optional
        File encoding to be enforced
    backupCount : int, optional
        Number of backup log files; default 5
    """
    nonetype = type(None)
    check_arg(filename, "filename", (str, Path, nonetype))
    if stream is not DEFAULT_STREAM:
        check_arg(stream, "stream", (io.TextIOBase, nonetype))
    check_arg(level, "level", (int, LogLevel))
    check_arg(signal, "signal", (str, nonetype))
    check_arg(format, "format", str)
    check_arg(encoding, "encoding", (str, nonetype))
    check_arg(backupCount, "backupCount", int, lambda v: v >= 0)

    package_logger.setLevel(level)

    for handler in package_logger.handlers[:]:
        if isinstance(handler, HandlerMixin):
            handler.close()  # Be sure to close the file descriptor
            package_logger.removeHandler(handler)

    handlers = list()
    if filename is not None:
        handlers.append(
            FileLogHandler(filename, backupCount=backupCount, encoding=encoding)
        )

    if stream is not None:
        handlers.append(StreamLogHandler(stream))

    for handler in handlers:
        handler.setFormatter(logging.Formatter(format))
        handler.setLevel(level)
        handler.addFilter(SignalFilter(signal))
        package_logger.addHandler(handler)

    if len(handlers) == 0:
        logger.warning("No signalkit log handlers added.")
