# Optgroups — (c) 2025 rtj.dev LLC — MIT Licensed
"""utils.py"""
from __future__ import annotations

import logging
import os

import pythonjsonlogger.json
from rich.logging import RichHandler

JSON_LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"
PLAIN_LOG_FORMAT = "%(asctime)s [%(name)s] [%(levelname)s] %(message)s"


def running_in_container() -> bool:
    try:
        with open("/proc/1/cgroup", "r", encoding="UTF-8") as f:
            content = f.read()
    except OSError:
        return False
    return any(
        marker in content for marker in ("docker", "kubepods", "containerd", "podman")
    )


def _console_handler(mode: str) -> logging.Handler:
    if mode == "cli":
        return RichHandler(
            rich_tracebacks=True,
            show_path=False,
            markup=False,
            log_time_format="[%Y-%m-%d %H:%M:%S]",
        )
    if mode == "json":
        handler = logging.StreamHandler()
        handler.setFormatter(pythonjsonlogger.json.JsonFormatter(JSON_LOG_FORMAT))
        return handler
    raise ValueError(f"Invalid log mode: {mode}")


def _file_handler(log_filename: str, as_json: bool) -> logging.Handler:
    handler = logging.FileHandler(log_filename, "a", "UTF-8")
    if as_json:
        handler.setFormatter(pythonjsonlogger.json.JsonFormatter(JSON_LOG_FORMAT))
    else:
        handler.setFormatter(logging.Formatter(PLAIN_LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    return handler


def setup_logging(
    mode: str | None = None,
    log_filename: str | None = None,
    json_log_to_file: bool = False,
    file_log_level: int = logging.DEBUG,
    console_log_level: int = logging.WARNING,
) -> None:
    """
    Replace the root logger's handlers so that "optgroups" debug output can be seen.

    The parser itself never configures logging; a program calls this once at startup.
    One handler always writes to the terminal. A second one, writing to a file, is
    added only when `log_filename` is given.

    Args:
        mode: "cli" renders records through Rich; "json" writes one JSON object per
            record, which suits log collectors. When omitted, `OPTGROUPS_LOG_MODE`
            decides, and failing that "json" is picked inside a container and "cli"
            everywhere else.
        log_filename: File to append records to. Leave as None to log to the
            terminal only.
        json_log_to_file: Write the file records as JSON rather than plain lines.
            Ignored without `log_filename`.
        file_log_level: Threshold for the file handler.
        console_log_level: Threshold for the terminal handler. Raise it to DEBUG
            to see each option registration and every group choice.

    Raises:
        ValueError: `mode` is neither "cli" nor "json".
    """
    if not mode:
        mode = os.getenv("OPTGROUPS_LOG_MODE") or (
            "json" if running_in_container() else "cli"
        )
    console_handler = _console_handler(mode)
    console_handler.setLevel(console_log_level)

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    root.handlers.clear()
    root.addHandler(console_handler)

    if log_filename:
        file_handler = _file_handler(log_filename, json_log_to_file)
        file_handler.setLevel(file_log_level)
        root.addHandler(file_handler)

    logging.getLogger("optgroups").debug("Logging initialized in '%s' mode.", mode)
