"""
Queue-based logging.

Log records are queued by the event loop and written by a background
thread, so console or file I/O never stalls a scan waiting on RPC replies.
"""

import logging
import sys
from datetime import datetime
from logging.handlers import QueueHandler, QueueListener
from pathlib import Path
from queue import Queue

from triarb.config.constants import LOG_DATE_FORMAT, LOG_FORMAT, MAX_LOG_QUEUE_SIZE


ROOT_LOGGER_NAME = "triarb"

# Third-party loggers that are chatty below WARNING
NOISY_LOGGERS = ("aiohttp", "asyncio", "urllib3", "web3")


class MicrosecondFormatter(logging.Formatter):
    """Formatter with microsecond precision timestamps."""

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:
        created = datetime.fromtimestamp(record.created)
        return f"{created.strftime(datefmt or LOG_DATE_FORMAT)}.{created.microsecond:06d}"


def build_handlers(level: int, log_file: Path | None = None) -> list[logging.Handler]:
    """
    Create the output handlers drained by the queue listener.

    The console honours `level`; the file, when configured, keeps
    everything down to DEBUG so per-path progress survives in it.
    """
    formatter = MicrosecondFormatter(LOG_FORMAT, LOG_DATE_FORMAT)

    console = logging.StreamHandler(sys.stdout)
    console.setLevel(level)
    outputs: list[logging.Handler] = [console]

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        to_file = logging.FileHandler(log_file)
        to_file.setLevel(logging.DEBUG)
        outputs.append(to_file)

    for handler in outputs:
        handler.setFormatter(formatter)
    return outputs


class AsyncLogger:
    """
    Non-blocking log pipeline for one logger tree.

    Attaches a QueueHandler to the named logger and drains the queue
    into the real handlers on a listener thread. Usable as a context
    manager; `stop()` flushes whatever is still queued.
    """

    def __init__(
        self,
        name: str = ROOT_LOGGER_NAME,
        level: int = logging.INFO,
        log_file: Path | None = None,
    ) -> None:
        self._logger = logging.getLogger(name)
        self._level = level
        self._log_file = log_file
        self._queue: Queue[logging.LogRecord] = Queue(maxsize=MAX_LOG_QUEUE_SIZE)
        self._queue_handler: QueueHandler | None = None
        self._listener: QueueListener | None = None

    @property
    def running(self) -> bool:
        return self._listener is not None

    def start(self) -> None:
        if self.running:
            return

        self._listener = QueueListener(
            self._queue,
            *build_handlers(self._level, self._log_file),
            respect_handler_level=True,
        )
        self._queue_handler = QueueHandler(self._queue)
        self._logger.addHandler(self._queue_handler)
        self._logger.setLevel(logging.DEBUG if self._log_file else self._level)
        self._listener.start()

    def stop(self) -> None:
        if self._queue_handler is not None:
            self._logger.removeHandler(self._queue_handler)
            self._queue_handler = None
        if self._listener is not None:
            self._listener.stop()
            for handler in self._listener.handlers:
                handler.close()
            self._listener = None

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    def __enter__(self) -> "AsyncLogger":
        self.start()
        return self

    def __exit__(self, *args: object) -> None:
        self.stop()


def setup_logging(
    level: str = "INFO",
    log_file: str | Path | None = None,
) -> AsyncLogger:
    """
    Set up application-wide logging.

    Clears root handlers, starts the queue pipeline for the `triarb`
    logger tree and quiets noisy third-party loggers.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR).
        log_file: Optional log file path.

    Returns:
        Started AsyncLogger instance; call ``stop()`` on shutdown.
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    root = logging.getLogger()
    root.setLevel(numeric_level)
    for handler in list(root.handlers):
        root.removeHandler(handler)

    pipeline = AsyncLogger(
        level=numeric_level,
        log_file=Path(log_file) if log_file else None,
    )
    pipeline.start()

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(numeric_level, logging.WARNING))

    return pipeline
