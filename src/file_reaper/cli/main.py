# src/file_reaper/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, then runs one scheduler session:
load -> (optional) ingest -> reconcile -> start waiters -> wait for
SIGINT/SIGTERM -> merge outcomes -> final save.
"""

from __future__ import annotations

import asyncio
import logging
import signal
import sys
from dataclasses import dataclass

import click

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..core.ports import DeleteFunc
from ..core.state import AppState
from ..errors import CorruptStateError, PersistenceError
from ..logging_setup import setup_logging
from ..tasks.reconciler import reconcile
from ..tasks.shutdown import ShutdownCoordinator
from ..tasks.task_api import ingest_deletion, log_task_summary
from ..tasks.task_scheduler import remove_file, start_waiters

logger = logging.getLogger(__name__)

# A thousand years; keeps now + delay inside datetime range.
MAX_DELAY_MINUTES = 1000 * 365 * 24 * 60


@dataclass(slots=True, frozen=True)
class DeletionRequest:
    file_path: str
    delay_minutes: int


def _install_signal_handlers(stop: asyncio.Event) -> None:
    loop = asyncio.get_running_loop()

    def _handle_signal(signum, _frame=None) -> None:
        logger.info("Signal %s received, shutting down...", signum)
        loop.call_soon_threadsafe(stop.set)

    for sig in (signal.SIGINT, signal.SIGTERM):
        try:
            loop.add_signal_handler(sig, _handle_signal, sig)
        except (NotImplementedError, RuntimeError):
            # Windows event loops have no add_signal_handler.
            signal.signal(sig, _handle_signal)


async def run(
        state: AppState,
        request: DeletionRequest | None = None,
        *,
        stop: asyncio.Event | None = None,
        delete: DeleteFunc = remove_file,
) -> None:
    """
    One scheduler session.

    A new request is ingested before reconciliation, so it is handled in this
    same run. When stop is None, SIGINT/SIGTERM set it.
    """
    state.tasks = state.task_store.load()
    log_task_summary(state.tasks)

    if request is not None:
        ingest_deletion(
            state.tasks,
            state.task_store,
            file_path=request.file_path,
            delay_minutes=request.delay_minutes,
        )

    scheduled = reconcile(state.tasks)
    start_waiters(scheduled, state.outcomes, delete)

    if stop is None:
        stop = asyncio.Event()
        _install_signal_handlers(stop)

    coordinator = ShutdownCoordinator(state.task_store, state.outcomes)
    await coordinator.wait(stop)
    coordinator.finish(state.tasks)


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option("--file-path", "-f", type=str, default=None, help="File to delete.")
@click.option(
    "--time-in-minutes",
    "-t",
    type=click.IntRange(min=0, max=MAX_DELAY_MINUTES),
    default=None,
    help="Delay before deletion, in minutes.",
)
def cli(file_path: str | None, time_in_minutes: int | None) -> None:
    """Schedule file deletions and carry them out, surviving restarts."""
    if (file_path is None) != (time_in_minutes is None):
        raise click.UsageError("--file-path and --time-in-minutes must be given together.")
    if file_path is not None and not file_path.strip():
        raise click.UsageError("--file-path must not be empty.")

    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "INFO")).upper()
    console_level = getattr(logging, level_name, logging.INFO)
    log_dir = settings.log_dir if settings.log_to_file else None
    setup_logging(log_dir=log_dir, console_level=console_level)

    logger.info("Starting %s...", settings.app_name)

    request = None
    if file_path is not None:
        request = DeletionRequest(file_path=file_path, delay_minutes=time_in_minutes)

    state = create_initial_state(settings=settings)

    try:
        asyncio.run(run(state, request))
    except (CorruptStateError, PersistenceError) as exc:
        logger.error("%s", exc)
        sys.exit(1)

    logger.info("Bye.")


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
