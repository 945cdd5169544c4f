"""Module-based logging with run-based rotation.

Usage:
    # At entry points (CLI, tests):
    from telepage.logging import configure_logging, start_run, end_run

    configure_logging()
    start_run("publish")
    try:
        ...
    finally:
        end_run()

    # In modules:
    import logging
    logger = logging.getLogger(__name__)

Log files are created in TELEPAGE_LOG_DIR (default logs/):
    - logs/content.log, logs/api.log, logs/upload.log, ... (per area)
    - logs/run-3p.log (third-party libraries)
    - logs/*.previous.log (previous run's logs)
"""

import logging
import os
from pathlib import Path

from telepage.logging.handlers import ModuleDispatchHandler, ThirdPartyHandler
from telepage.logging.run_manager import (
    MODULE_TO_LOG,
    end_run,
    get_current_run_id,
    module_to_log_name,
    start_run,
)

_OWN_PREFIXES = ("telepage", "scripts", "testing")


class _OwnModulesFilter(logging.Filter):
    def __init__(self, own: bool):
        super().__init__()
        self.own = own

    def filter(self, record: logging.LogRecord) -> bool:
        is_own = record.name.split(".", 1)[0] in _OWN_PREFIXES
        return is_own == self.own


def configure_logging(
    log_dir: Path | str | None = None,
    level: int = logging.INFO,
) -> Path:
    """Install the dispatch handlers on the root logger.

    Idempotent: handlers installed by a previous call are replaced.

    Returns:
        The directory log files are written to.
    """
    log_dir = Path(log_dir or os.environ.get("TELEPAGE_LOG_DIR", "logs"))
    log_dir.mkdir(parents=True, exist_ok=True)

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    root = logging.getLogger()
    for handler in list(root.handlers):
        if isinstance(handler, (ModuleDispatchHandler, ThirdPartyHandler)):
            root.removeHandler(handler)
            handler.close()

    module_handler = ModuleDispatchHandler(log_dir)
    module_handler.addFilter(_OwnModulesFilter(own=True))
    third_party_handler = ThirdPartyHandler(log_dir)
    third_party_handler.addFilter(_OwnModulesFilter(own=False))

    for handler in (module_handler, third_party_handler):
        handler.setFormatter(formatter)
        root.addHandler(handler)
    root.setLevel(level)
    return log_dir


__all__ = [
    "configure_logging",
    "start_run",
    "end_run",
    "get_current_run_id",
    "module_to_log_name",
    "ModuleDispatchHandler",
    "ThirdPartyHandler",
    "MODULE_TO_LOG",
]
