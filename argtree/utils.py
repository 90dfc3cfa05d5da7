# Argtree CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""utils.py"""
from __future__ import annotations

import logging
import os
import shutil
import sys

import pythonjsonlogger.json
from rich.logging import RichHandler

from argtree.console import console


def get_program_invocation() -> str:
    """Returns the recommended program invocation prefix."""
    script = sys.argv[0]
    program = shutil.which(script)
    if program:
        return os.path.basename(program)

    executable = sys.executable
    if "python" in executable:
        return f"python {script}"
    return script


def running_in_container() -> bool:
    """Best-effort check of PID 1's cgroups for a container runtime."""
    try:
        with open("/proc/1/cgroup", "r", encoding="UTF-8") as f:
            content = f.read()
            return (
                "docker" in content
                or "kubepods" in content
                or "containerd" in content
                or "podman" in content
            )
    except OSError:
        return False


def setup_logging(
    mode: str | None = None,
    log_filename: str | None = None,
    json_log_to_file: bool = False,
    file_log_level: int = logging.DEBUG,
    console_log_level: int = logging.WARNING,
) -> None:
    """
    Configure the root logger for an Argtree program.

    Argtree itself only writes through the `argtree` logger: the resolver at
    DEBUG, the dispatcher at INFO/DEBUG, handler failures at WARNING and tree
    construction errors at ERROR. With the default console level a normal run
    therefore prints no log lines. Parse errors are reported by `run_cli` on
    the console, not through logging.

    Args:
        mode (str | None): "cli" installs a `RichHandler` bound to the shared
            Argtree console with markup disabled, so user tokens are printed
            verbatim. "json" writes one JSON object per record to stderr. When
            omitted, `ARGTREE_LOG_MODE` is used, then "json" inside a container
            and "cli" elsewhere.
        log_filename (str | None): If given, records at `file_log_level` and
            above are appended to this file. No log file is created otherwise.
        json_log_to_file (bool): Write the file as JSON lines instead of text.
        file_log_level (int): Level for the file handler. Defaults to DEBUG,
            which captures every resolution step.
        console_log_level (int): Level for the console handler. Defaults to
            WARNING, which hides the per-call INFO and DEBUG records.

    Raises:
        ValueError: If `mode` is neither "cli" nor "json".
    """
    if not mode:
        mode = os.getenv("ARGTREE_LOG_MODE") or (
            "json" if running_in_container() else "cli"
        )

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    if root.hasHandlers():
        root.handlers.clear()

    if mode == "cli":
        console_handler: RichHandler | logging.StreamHandler = RichHandler(
            console=console,
            rich_tracebacks=True,
            show_time=True,
            show_level=True,
            show_path=False,
            markup=False,
            log_time_format="[%Y-%m-%d %H:%M:%S]",
        )
    elif mode == "json":
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(
            pythonjsonlogger.json.JsonFormatter(
                "%(asctime)s %(name)s %(levelname)s %(message)s"
            )
        )
    else:
        raise ValueError(f"Invalid log mode: {mode}")

    console_handler.setLevel(console_log_level)
    root.addHandler(console_handler)

    if log_filename:
        file_handler = logging.FileHandler(log_filename, "a", "UTF-8")
        file_handler.setLevel(file_log_level)
        if json_log_to_file:
            file_handler.setFormatter(
                pythonjsonlogger.json.JsonFormatter(
                    "%(asctime)s %(name)s %(levelname)s %(message)s"
                )
            )
        else:
            file_handler.setFormatter(
                logging.Formatter(
                    "%(asctime)s [%(name)s] [%(levelname)s] %(message)s",
                    datefmt="%Y-%m-%d %H:%M:%S",
                )
            )
        root.addHandler(file_handler)

    logger = logging.getLogger("argtree")
    logger.propagate = True
    logger.debug("Logging initialized in '%s' mode.", mode)
