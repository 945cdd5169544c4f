"""Logging handlers that split telepage output into per-area files.

ModuleDispatchHandler picks a file from the record's logger name through
MODULE_TO_LOG (content.log, api.log, upload.log, ...). ThirdPartyHandler
collects everything else (httpx, bleach, html5lib) in run-3p.log.

Each file keeps two generations: the first record a run writes to
<name>.log moves the old file to <name>.previous.log.
"""

import logging
from pathlib import Path
from typing import TextIO

from telepage.logging.run_manager import module_to_log_name, should_rotate


class RunLogFile:
    """One log file that is opened lazily and rotated once per run."""

    def __init__(self, log_dir: Path, log_name: str):
        self.log_name = log_name
        self.path = log_dir / f"{log_name}.log"
        self.previous_path = log_dir / f"{log_name}.previous.log"
        self._stream: TextIO | None = None

    def write(self, line: str) -> None:
        if should_rotate(self.log_name):
            self.rotate()
        if self._stream is None:
            self._stream = self.path.open("a", encoding="utf-8")
        self._stream.write(line + "\n")
        self._stream.flush()

    def rotate(self) -> None:
        """Close the file and keep its content as <name>.previous.log."""
        self.close()
        self.previous_path.unlink(missing_ok=True)
        if self.path.exists():
            self.path.rename(self.previous_path)

    def close(self) -> None:
        if self._stream is not None:
            self._stream.close()
            self._stream = None


class ModuleDispatchHandler(logging.Handler):
    """Routes records to one file per telepage area.

    Usage:
        handler = ModuleDispatchHandler(Path("logs"))
        handler.setFormatter(logging.Formatter("%(asctime)s - %(message)s"))
        logging.getLogger("telepage").addHandler(handler)
    """

    def __init__(self, log_dir: Path):
        super().__init__()
        self.log_dir = log_dir
        self._files: dict[str, RunLogFile] = {}

    def emit(self, record: logging.LogRecord) -> None:
        try:
            log_name = module_to_log_name(record.name)
            if log_name not in self._files:
                self._files[log_name] = RunLogFile(self.log_dir, log_name)
            self._files[log_name].write(self.format(record))
        except Exception:
            self.handleError(record)

    def close(self) -> None:
        self.acquire()
        try:
            for log_file in self._files.values():
                log_file.close()
            self._files.clear()
        finally:
            self.release()
        super().close()


class ThirdPartyHandler(logging.Handler):
    """Writes records from libraries outside telepage to run-3p.log."""

    LOG_NAME = "run-3p"

    def __init__(self, log_dir: Path):
        super().__init__()
        self.log_dir = log_dir
        self._file = RunLogFile(log_dir, self.LOG_NAME)

    def emit(self, record: logging.LogRecord) -> None:
        try:
            self._file.write(self.format(record))
        except Exception:
            self.handleError(record)

    def close(self) -> None:
        self.acquire()
        try:
            self._file.close()
        finally:
            self.release()
        super().close()
