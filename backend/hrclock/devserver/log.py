"""
Development server log file.

One append-only file per day, ``<log_dir>/<prefix>-<YYYY-MM-DD>.log``, opened
once per process. Each line reads ``[<ISO timestamp>] [<LEVEL>] <message>``.
"""
import logging
import os
from datetime import datetime, timezone
from typing import Optional

logger = logging.getLogger(__name__)

HTTP = 21
HMR = 22
BUILD = 23

logging.addLevelName(HTTP, "HTTP")
logging.addLevelName(HMR, "HMR")
logging.addLevelName(BUILD, "BUILD")


def iso_timestamp(moment: datetime) -> str:
    """UTC timestamp with millisecond precision and a trailing Z."""
    return moment.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class DevLogFormatter(logging.Formatter):
    """Formats records as ``[timestamp] [LEVEL] message``."""

    def __init__(self):
        super().__init__("[%(asctime)s] [%(levelname)s] %(message)s")

    def formatTime(self, record, datefmt=None):
        return iso_timestamp(datetime.fromtimestamp(record.created, tz=timezone.utc))


class DevLog:
    """
    Writer for the development server log file.

    The file is created (with its directory) on construction and must be
    closed when the dev server shuts down. Writes after ``close`` are dropped.
    """

    def __init__(self, log_dir: str, prefix: str = "vite", today: Optional[datetime] = None):
        day = (today or datetime.now(timezone.utc)).astimezone(timezone.utc).date()
        os.makedirs(log_dir, exist_ok=True)
        self.path = os.path.join(log_dir, f"{prefix}-{day.isoformat()}.log")
        self._handler = logging.FileHandler(self.path, mode="a", encoding="utf-8")
        self._handler.setFormatter(DevLogFormatter())
        self.closed = False
        logger.info(f"Dev server log file: {self.path}")

    def write(self, level: int, message: str):
        """
        Append one line to the log file.

        Args:
            level: Logging level (INFO or one of HTTP, HMR, BUILD)
            message: Line content
        """
        if self.closed:
            return
        record = logging.LogRecord(
            name=__name__,
            level=level,
            pathname=__file__,
            lineno=0,
            msg=message,
            args=None,
            exc_info=None,
        )
        self._handler.handle(record)

    def info(self, message: str):
        self.write(logging.INFO, message)

    def http(self, method: str, url: str, status_code: int, duration_ms: int):
        self.write(HTTP, f"{method} {url} - {status_code} ({duration_ms}ms)")

    def hot_update(self, file: str):
        self.write(HMR, f"Hot module update: {file}")

    def build_start(self):
        self.write(BUILD, "Build started")

    def build_end(self):
        self.write(BUILD, "Build completed")

    def close(self):
        if not self.closed:
            self._handler.close()
            self.closed = True

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
