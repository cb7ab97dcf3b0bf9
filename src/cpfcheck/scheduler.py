"""Splits the input file list into per-worker batches"""

import math
from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class FileBatch:
    """A contiguous slice of the input file list handled by one worker"""

    batch_id: int
    files: list[Path] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.files)


def split_into_batches(files: list[Path], num_workers: int) -> list[FileBatch]:
    """
    Partition files into contiguous batches of near-equal size.

    Batch size is ceil(len(files) / num_workers), so the last batch holds the
    remainder and there may be fewer batches than workers (e.g. 31 files over
    30 workers gives 16 batches of at most 2 files).

    Args:
        files: Ordered list of input files
        num_workers: Number of workers the batches are meant for

    Returns:
        Ordered list of FileBatch objects, empty when files is empty
    """
    if num_workers < 1:
        raise ValueError(f'num_workers must be positive, got {num_workers}')

    total = len(files)
    if total == 0:
        return []

    batch_size = math.ceil(total / num_workers)
    return [
        FileBatch(batch_id=batch_id, files=list(files[start : start + batch_size]))
        for batch_id, start in enumerate(range(0, total, batch_size), 1)
    ]
