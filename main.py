#!/usr/bin/env python3
import logging
import signal
from datetime import datetime

from app_context import AppContext
from cli import command_loop
from logger_configuration import LoggerConfiguration
from log_writer import LogWriter


def setup_logging():
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )


def setup_signal_handlers(ctx: AppContext):
    def _handle_shutdown(signum, frame):
        logging.info("Shutdown signal received (%s)", signum)
        ctx.shutdown()

    # SIGINT keeps its default so Ctrl-C raises KeyboardInterrupt inside input().
    signal.signal(signal.SIGTERM, _handle_shutdown)


def initialize() -> AppContext:
    logging.info("Initializing application")

    config = LoggerConfiguration()
    clock = datetime.now

    writer = LogWriter(config=config, clock=clock)

    return AppContext(writer=writer, config=config, clock=clock)


def main():
    setup_logging()
    ctx = initialize()
    setup_signal_handlers(ctx)

    command_loop(ctx)

    logging.info("Main loop terminated")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
