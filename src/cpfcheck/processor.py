"""Counts valid and invalid CPFs in a batch of files"""

import logging
import threading
from dataclasses import dataclass
from pathlib import Path
from time import time

from cpfcheck import prometheus as prom
from cpfcheck.scheduler import FileBatch
from cpfcheck.validator import validate_cpf

logger = logging.getLogger(__name__)


@dataclass
class BatchResult:
    """Counts produced by one worker for one batch"""

    batch_id: int
    valid_count: int = 0
    invalid_count: int = 0
    files_processed: int = 0
    files_failed: int = 0
    elapsed: float = 0.0

    @property
    def total_count(self) -> int:
        return self.valid_count + self.invalid_count


def _count_file(filepath: Path, result: BatchResult):
    """Add the CPF counts of one file to result. Raises OSError if it can't be opened."""
    valid = 0
    invalid = 0
    with open(filepath, 'r', encoding='utf-8', errors='replace') as f:
        for line in f:
            cpf = line.strip()
            if not cpf:
                continue
            if validate_cpf(cpf):
                valid += 1
            else:
                invalid += 1

    result.valid_count += valid
    result.invalid_count += invalid
    prom.cpfs_validated_total.labels(result='valid').inc(valid)
    prom.cpfs_validated_total.labels(result='invalid').inc(invalid)


def process_batch(batch: FileBatch) -> BatchResult:
    """
    Validate every non-empty line of every file in the batch.

    Files that cannot be opened are logged and skipped; they add nothing to
    either counter and the rest of the batch is still processed.

    Args:
        batch: The files assigned to this worker

    Returns:
        BatchResult with the batch's valid/invalid counts
    """
    start_time = time()
    thread_id = threading.current_thread().name
    result = BatchResult(batch_id=batch.batch_id)

    logger.debug(f'[{thread_id}] Processing batch {batch.batch_id}: {len(batch)} files')

    for filepath in batch.files:
        try:
            _count_file(filepath, result)
        except OSError as e:
            logger.error(f'File could not be read: {Path(filepath).name} ({e})')
            result.files_failed += 1
            prom.files_failed_total.inc()
            continue
        result.files_processed += 1
        prom.files_processed_total.inc()

    result.elapsed = time() - start_time
    logger.debug(
        f'[{thread_id}] Batch {batch.batch_id} completed: '
        f'{result.valid_count} valid, {result.invalid_count} invalid in {result.elapsed:.3f}s'
    )
    return result


def process_files(files: list[Path]) -> BatchResult:
    """Process a plain list of files as a single batch on the calling thread.

    This is the sequential reference a threaded run must agree with: for the
    same files, run_validation sums to the same valid/invalid counts.
    """
    return process_batch(FileBatch(batch_id=1, files=list(files)))
