"""CLI command to show saved timings per thread count"""

import click

from cpfcheck.config import get_results_dir
from cpfcheck.results import load_execution_times, summarize


@click.command('results')
@click.option('--results-dir', type=click.Path(file_okay=False), default=None, help='Directory with timing records')
@click.option('--json', 'json_output', is_flag=True, help='Output in JSON format')
def results_command(results_dir: str | None, json_output: bool):
    """Show the timing record of every thread count run so far."""
    results_dir = results_dir or get_results_dir()
    summary = summarize(load_execution_times(results_dir), results_dir)

    if json_output:
        click.echo(summary.model_dump_json(indent=2))
        return

    if not summary.entries:
        click.echo(f"No results found in '{results_dir}'.")
        return

    click.echo(f'{"Threads":>7}  {"Time (ms)":>10}  {"Speedup":>7}')
    for entry in summary.entries:
        speedup = f'{entry.speedup:.2f}x' if entry.speedup is not None else '-'
        click.echo(f'{entry.num_threads:>7}  {entry.elapsed_ms:>10}  {speedup:>7}')
