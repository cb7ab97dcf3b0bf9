"""Runs the batch validators on a fixed-size thread pool and aggregates their counts"""

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path
from time import time

from cpfcheck import prometheus as prom
from cpfcheck.config import VALID_THREAD_OPTIONS, get_results_dir, is_valid_thread_option
from cpfcheck.models import ValidationRunResult
from cpfcheck.processor import process_batch
from cpfcheck.results import save_execution_time
from cpfcheck.scheduler import split_into_batches

logger = logging.getLogger(__name__)


def run_validation(
    files: list[Path],
    num_threads: int,
    results_dir: str | Path | None = None,
) -> ValidationRunResult:
    """
    Validate all files with a pool of num_threads workers.

    Files are split into contiguous batches, one task per batch. The pool
    stops taking work as soon as every batch is submitted; results are summed
    on the calling thread as the tasks finish. A task that raises is logged
    and counted in failed_batches, and its counts are left out.

    The elapsed time is written to the timing record for num_threads.

    Args:
        files: Input files, in discovery order
        num_threads: Pool size, one of VALID_THREAD_OPTIONS
        results_dir: Where to write the timing record (default from config)

    Returns:
        ValidationRunResult with the aggregated counts
    """
    if not is_valid_thread_option(num_threads):
        raise ValueError(f'num_threads must be one of {VALID_THREAD_OPTIONS}, got {num_threads}')
    if results_dir is None:
        results_dir = get_results_dir()

    start_time = time()
    batches = split_into_batches(files, num_threads)
    logger.info(f'Created {len(batches)} batches from {len(files)} files for {num_threads} threads')

    result = ValidationRunResult(num_threads=num_threads, file_count=len(files), batch_count=len(batches))

    prom.active_workers.set(num_threads)
    with ThreadPoolExecutor(max_workers=num_threads, thread_name_prefix='Validator') as executor:
        future_to_batch = {executor.submit(process_batch, batch): batch for batch in batches}
        executor.shutdown(wait=False)

        for future in as_completed(future_to_batch):
            batch = future_to_batch[future]
            try:
                batch_result = future.result()
            except Exception:
                logger.exception(f'Batch {batch.batch_id} failed ({len(batch)} files), its counts are lost')
                result.failed_batches += 1
                prom.batches_failed_total.inc()
                continue
            result.valid_count += batch_result.valid_count
            result.invalid_count += batch_result.invalid_count
            result.files_failed += batch_result.files_failed
    prom.active_workers.set(0)

    elapsed = time() - start_time
    result.elapsed_ms = int(elapsed * 1000)
    prom.runs_total.labels(threads=str(num_threads)).inc()
    prom.run_duration_seconds.labels(threads=str(num_threads)).observe(elapsed)

    logger.info(
        f'Run with {num_threads} threads: {result.valid_count} valid, '
        f'{result.invalid_count} invalid in {result.elapsed_ms} ms'
    )

    result_path = save_execution_time(result.elapsed_ms, num_threads, results_dir)
    if result_path is not None:
        result.result_path = str(result_path)
    return result
