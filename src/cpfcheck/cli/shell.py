"""CLI command for the interactive validation loop"""

import click

from cpfcheck import prometheus as prom
from cpfcheck.config import get_input_dir, get_results_dir
from cpfcheck.discovery import list_txt_files
from cpfcheck.shell import run_shell


@click.command('shell')
@click.option(
    '--input-dir',
    type=click.Path(file_okay=False),
    default=None,
    help='Directory with .txt CPF lists (default: CPFCHECK_INPUT_DIR or ./cpfs)',
)
@click.option(
    '--results-dir',
    type=click.Path(file_okay=False),
    default=None,
    help='Directory for timing records (default: CPFCHECK_RESULTS_DIR or ./resultados)',
)
@click.option(
    '--metrics-port',
    type=click.IntRange(1, 65535),
    default=None,
    help='Serve Prometheus metrics on this port while the shell is open',
)
def shell_command(input_dir: str | None, results_dir: str | None, metrics_port: int | None):
    """Prompt for thread counts and validate all input files with each.

    \b
    Valid thread counts: 1, 2, 3, 5, 6, 10, 15, 30. Enter 0 to exit.
    """
    input_dir = input_dir or get_input_dir()
    results_dir = results_dir or get_results_dir()

    files = list_txt_files(input_dir)
    if not files:
        click.echo(f"No .txt files found in '{input_dir}'.")
        return

    if metrics_port is not None:
        prom.start_metrics_server(metrics_port)
        click.echo(f'Serving metrics on http://localhost:{metrics_port}/metrics')

    run_shell(files, results_dir)
