"""Interactive thread-count selection loop"""

import logging
import re
from pathlib import Path
from typing import Callable

import click

from cpfcheck.config import EXIT_OPTION, VALID_THREAD_OPTIONS, is_valid_thread_option
from cpfcheck.coordinator import run_validation
from cpfcheck.models import ValidationRunResult

logger = logging.getLogger(__name__)

# Plain ASCII decimal, optionally signed
_CHOICE_RE = re.compile(r'[+-]?[0-9]+')


def format_run_report(result: ValidationRunResult) -> list[str]:
    """Console lines describing a finished run."""
    lines = [
        f'Valid CPFs: {result.valid_count}',
        f'Invalid CPFs: {result.invalid_count}',
        f'Total execution time with {result.num_threads} threads: {result.elapsed_ms} ms',
    ]
    if result.failed_batches:
        lines.append(f'Failed batches: {result.failed_batches} of {result.batch_count}')
    if result.result_path:
        lines.append(f'Time saved to: {Path(result.result_path).resolve()}')
    return lines


def read_choice() -> str | None:
    """Prompt for one line. Returns None when input is exhausted or interrupted."""
    click.echo('\nSelect the number of threads (or enter 0 to exit):')
    click.echo(f'Valid options: {", ".join(str(o) for o in VALID_THREAD_OPTIONS)}')
    try:
        return click.prompt('Your choice', default='', show_default=False)
    except click.Abort:
        return None


def run_shell(
    files: list[Path],
    results_dir: str | Path,
    runner: Callable[..., ValidationRunResult] | None = None,
) -> int:
    """
    Ask for thread counts until the user enters 0, running a validation for each.

    Non-numeric input and numbers outside VALID_THREAD_OPTIONS are reported
    and the prompt is shown again.

    Args:
        files: Input files handed to every run
        results_dir: Where each run writes its timing record
        runner: Callable performing one run (files, num_threads, results_dir),
                defaults to run_validation

    Returns:
        Number of runs performed
    """
    if runner is None:
        runner = run_validation

    runs = 0
    while True:
        raw = read_choice()
        if raw is None:
            click.echo()
            break

        raw = raw.strip()
        if not _CHOICE_RE.fullmatch(raw):
            click.echo('Invalid input. Please try again.')
            continue
        choice = int(raw)

        if choice == EXIT_OPTION:
            click.echo('Exiting.')
            break

        if not is_valid_thread_option(choice):
            click.echo('Invalid option. Please try again.')
            continue

        result = runner(files, choice, results_dir)
        for line in format_run_report(result):
            click.echo(line)
        runs += 1

    logger.debug(f'Shell finished after {runs} runs')
    return runs
