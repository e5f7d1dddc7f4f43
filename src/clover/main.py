"""Main entry point for the clover class actions CLI."""

import asyncio
import logging
import sys

from .actions import ActionOrchestrator, ConsoleNotifier
from .clients import ClassesClient
from .storage import ActionJournal
from .interfaces.cli import ClassActionCLI, console
from .config import config

logger = logging.getLogger(__name__)


def setup_logging(level: str):
    """Configure root logging from a level name."""
    numeric = getattr(logging, level.upper(), None)
    if not isinstance(numeric, int):
        numeric = logging.INFO
    logging.basicConfig(
        level=numeric,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


async def run_cli(user_id: str | None = None):
    """Wire collaborators together and run the CLI until exit."""
    client = ClassesClient(
        base_url=config.api.base_url,
        timeout=config.api.timeout,
    )
    orchestrator = ActionOrchestrator(
        client=client,
        notifier=ConsoleNotifier(console),
        timeout=config.dialog.confirm_timeout,
    )
    journal = ActionJournal()
    cli = ClassActionCLI(orchestrator, journal=journal, user_id=user_id)

    try:
        await cli.run()
    finally:
        await client.aclose()


def cli_main():
    """Entry point for CLI."""
    setup_logging(config.log_level)

    user_id = sys.argv[1] if len(sys.argv) > 1 else config.user_id
    logger.debug("Using API at %s", config.api.base_url)

    try:
        asyncio.run(run_cli(user_id))
    except KeyboardInterrupt:
        sys.exit(130)


if __name__ == "__main__":
    cli_main()
