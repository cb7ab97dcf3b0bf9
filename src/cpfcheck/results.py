"""Timing records, one file per thread count"""

import logging
import re
from pathlib import Path

from cpfcheck.models import BenchmarkEntry, BenchmarkSummary

logger = logging.getLogger(__name__)

RESULT_FILENAME_RE = re.compile(r'^versao_(\d+)_threads\.txt$')


def get_result_path(results_dir: str | Path, num_threads: int) -> Path:
    """Path of the timing record for a thread count (e.g. resultados/versao_5_threads.txt)."""
    return Path(results_dir) / f'versao_{num_threads}_threads.txt'


def save_execution_time(elapsed_ms: int, num_threads: int, results_dir: str | Path) -> Path | None:
    """
    Write elapsed_ms as the single line of the record for num_threads.

    Any previous record for the same thread count is overwritten. The results
    directory is created with its parents when missing.

    Returns:
        Path of the written file, or None if the directory or file could not be written
    """
    results_dir = Path(results_dir)
    try:
        results_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        logger.error(f'Failed to create results directory {results_dir}: {e}')
        return None

    result_path = get_result_path(results_dir, num_threads)
    try:
        result_path.write_text(f'{elapsed_ms}\n', encoding='utf-8')
    except OSError as e:
        logger.error(f'Failed to save execution time to {result_path}: {e}')
        return None

    logger.info(f'Saved {elapsed_ms} ms for {num_threads} threads to {result_path}')
    return result_path


def load_execution_times(results_dir: str | Path) -> dict[int, int]:
    """
    Read every timing record in results_dir.

    Returns:
        Mapping of thread count -> elapsed milliseconds. Records that can't be
        read or parsed are skipped.
    """
    results_dir = Path(results_dir)
    if not results_dir.is_dir():
        return {}

    times: dict[int, int] = {}
    for path in results_dir.iterdir():
        match = RESULT_FILENAME_RE.match(path.name)
        if not match:
            continue
        try:
            times[int(match.group(1))] = int(path.read_text(encoding='utf-8').strip())
        except (OSError, ValueError) as e:
            logger.warning(f'Skipping unreadable result file {path}: {e}')
    return times


def summarize(times: dict[int, int], results_dir: str | Path = '') -> BenchmarkSummary:
    """Build the benchmark table, with speedup relative to the 1-thread run when present."""
    baseline = times.get(1)
    entries = []
    for num_threads in sorted(times):
        elapsed_ms = times[num_threads]
        speedup = None
        if baseline is not None and elapsed_ms > 0:
            speedup = round(baseline / elapsed_ms, 2)
        entries.append(BenchmarkEntry(num_threads=num_threads, elapsed_ms=elapsed_ms, speedup=speedup))
    return BenchmarkSummary(results_dir=str(results_dir), entries=entries)
