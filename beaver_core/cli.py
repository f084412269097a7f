# File: beaver_core/cli.py

"""Command-line entry point: load the environment, then start uvicorn."""

from __future__ import annotations

import logging
import sys
from typing import Sequence

import uvicorn

from beaver_core.core.bootstrap import bootstrap
from beaver_core.core.config import get_settings

logger = logging.getLogger("beaver_core.cli")

APP_FACTORY = "beaver_core.main:create_application"


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def main(argv: Sequence[str] | None = None) -> None:
    """
    Bootstrap the process and hand over to uvicorn's own command line.

    ``argv`` (default ``sys.argv[1:]``) is forwarded to uvicorn unchanged,
    so ``beaver-core --port 9000 --reload`` behaves like the matching
    ``uvicorn`` invocation.
    """
    args = list(argv) if argv is not None else sys.argv[1:]

    profile = bootstrap()
    # Settings may have been read before the env files were applied.
    get_settings.cache_clear()
    settings = get_settings()

    _configure_logging(settings.log_level)
    logger.info("Starting %s with profile %s", settings.PROJECT_NAME, profile)

    uvicorn.main(args=[APP_FACTORY, "--factory", *args], prog_name="beaver-core")


if __name__ == "__main__":  # pragma: no cover
    main()
