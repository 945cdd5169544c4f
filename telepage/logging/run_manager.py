"""Run tracking for log rotation.

A run is one CLI invocation or one test module. Handlers ask should_rotate()
before writing; it answers True once per log file per run.

Usage:
    from telepage.logging import start_run, end_run

    start_run("publish-article")
    try:
        ...
    finally:
        end_run()
"""

from contextvars import ContextVar

_current_run_id: ContextVar[str | None] = ContextVar("current_run_id", default=None)
_rotated_this_run: ContextVar[set[str] | None] = ContextVar("rotated_this_run", default=None)

_module_log_cache: dict[str, str] = {}

# Logger name prefix -> log file name; the most specific prefix wins
MODULE_TO_LOG = {
    "telepage.content": "content",
    "telepage.api.upload": "upload",
    "telepage.api": "api",
    "telepage.utils": "http",
    "telepage.config": "config",
    "telepage.logging": "logging-internal",
    "scripts": "cli",
    "testing": "testing",
}

FALLBACK_LOG = "misc"


def start_run(run_id: str) -> None:
    """Begin a run; every log file rotates again on its next write."""
    _current_run_id.set(run_id)
    _rotated_this_run.set(set())


def end_run() -> None:
    _current_run_id.set(None)
    _rotated_this_run.set(None)


def get_current_run_id() -> str | None:
    return _current_run_id.get()


def should_rotate(log_name: str) -> bool:
    """True the first time log_name is asked about in the active run.

    Always False outside a run.
    """
    rotated = _rotated_this_run.get()
    if _current_run_id.get() is None or rotated is None or log_name in rotated:
        return False
    rotated.add(log_name)
    return True


def module_to_log_name(module_name: str) -> str:
    """Map a logger name such as "telepage.content.converter" to "content"."""
    log_name = _module_log_cache.get(module_name)
    if log_name is None:
        log_name = _module_log_cache[module_name] = _compute_log_name(module_name)
    return log_name


def _compute_log_name(module_name: str) -> str:
    # Drop trailing components until a mapped package remains
    parts = module_name.split(".")
    while parts:
        log_name = MODULE_TO_LOG.get(".".join(parts))
        if log_name is not None:
            return log_name
        parts.pop()
    return FALLBACK_LOG
