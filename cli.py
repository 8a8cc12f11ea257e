"""
Title: Append Logger Command Console
Date Created: 2026-10-14
Last Modified: 2026-10-15
Version: 1.1

Purpose:
Provides a line-oriented console for exercising the LogWriter by hand:
appending entries, creating empty log files, checking candidate paths
against the relative-path grammar and printing the meta-log.

Scope and Limitations:
- Messages are taken verbatim from the rest of the command line; repeated
  spaces between words are collapsed by the tokenizer.
- The console takes no flags and reads no environment variables.
- Meta-log write faults are reported on stdout and the console keeps running.

Dependencies:
- Python 3.10+
- logging (standard library)
- pathlib (standard library)
- app_context.py
- log_paths.py
"""

import logging
from pathlib import Path

from app_context import AppContext
from log_paths import is_valid_relative_path

PROMPT = "> "


def _print_help() -> None:
    print(
        """
Commands
  help                         Print help
  q                            Quit

Logging
  log <path> <message...>      Append a timestamped entry to <path>
  ensure [path]                Create an empty file if absent (default: log)
  check <path> [path ...]      Report whether every path is a valid relative path
  meta                         Print the meta-log
"""
    )


def _print_meta_log(ctx: AppContext) -> None:
    meta_log = Path(ctx.config.meta_log_path)
    if not meta_log.exists():
        print(f"{meta_log}: (none)")
        return
    text = meta_log.read_text(encoding=ctx.config.encoding)
    print(text if text.strip() else f"{meta_log}: (empty)")


def dispatch(ctx: AppContext, cmd: str) -> bool:
    # Runs one command line. Returns False when the console should stop.
    parts = cmd.split()
    if not parts:
        return True

    op = parts[0].lower()

    if op in ("q", "quit", "exit"):
        ctx.shutdown()
        return False

    if op in ("help", "?"):
        _print_help()
        return True

    if op == "log":
        if len(parts) < 3:
            print("Usage: log <path> <message...>")
            return True
        try:
            result = ctx.writer.try_log(parts[1], " ".join(parts[2:]))
        except OSError as e:
            logging.error("Meta-log write failed: %s", e)
            print(f"Meta-log unavailable: {e}")
            return True
        print(f"{result.outcome.name}: {parts[1]}")
        if result.error is not None:
            print(f"  {type(result.error).__name__}: {result.error}")
        return True

    if op == "ensure":
        path = parts[1] if len(parts) >= 2 else None
        if path is not None and not is_valid_relative_path(path):
            print(f"Invalid relative path: {path}")
            return True
        try:
            ctx.writer.ensure_file_exists(path)
        except OSError as e:
            print(f"Could not create {path or ctx.config.default_log_path}: {e}")
            return True
        print(f"Ready: {path or ctx.config.default_log_path}")
        return True

    if op == "check":
        if len(parts) < 2:
            print("Usage: check <path> [path ...]")
            return True
        print(f"Valid: {is_valid_relative_path(*parts[1:])}")
        return True

    if op == "meta":
        _print_meta_log(ctx)
        return True

    print("Unknown command. Type 'help'.")
    return True


def command_loop(ctx: AppContext) -> None:
    _print_help()
    while not ctx.shutdown_event.is_set():
        try:
            cmd = input(PROMPT).strip()
        except (EOFError, KeyboardInterrupt):
            print()
            ctx.shutdown()
            break

        # A signal may have requested shutdown while input() was blocked.
        if ctx.shutdown_event.is_set():
            break

        if not dispatch(ctx, cmd):
            break

    logging.info("Command loop terminated")
