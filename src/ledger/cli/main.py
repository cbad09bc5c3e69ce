# src/ledger/cli/main.py

"""
CLI entrypoint.

Loads settings, initializes logging, builds AppState, then dispatches a
single subcommand. Errors become a message on stderr and exit code 1.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence

from ..cli.bootstrap import create_initial_state
from ..cli.commands import registry
from ..config import get_settings
from ..errors import LedgerError
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main(argv: Sequence[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "WARNING")).upper()
    console_level = getattr(logging, level_name, logging.WARNING)
    log_file = settings.log_path if settings.log_to_file else None

    try:
        setup_logging(log_file=log_file, console_level=console_level)
        state = create_initial_state(settings=settings)
    except OSError as e:
        print(f"could not prepare ledger directory: {e}", file=sys.stderr)
        return 1

    logger.debug("Starting %s argv=%s", settings.app_name, list(argv))

    try:
        return registry.handle(state, argv)
    except LedgerError as e:
        logger.debug("Command failed", exc_info=True)
        print(str(e), file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
