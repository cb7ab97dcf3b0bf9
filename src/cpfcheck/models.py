"""Pydantic models for validation runs and benchmark summaries"""

from pydantic import BaseModel, Field


class ValidationRunResult(BaseModel):
    """Aggregate result of one validation run

    Attributes:
        num_threads: Thread count the pool was sized to
        valid_count: CPF lines that passed validation, summed over all batches
        invalid_count: CPF lines that failed validation, summed over all batches
        elapsed_ms: Wall-clock duration of the run in milliseconds
        file_count: Number of input files handed to the run
        batch_count: Number of batches submitted to the pool
        failed_batches: Batches whose worker raised an unexpected error (counted as zero)
        files_failed: Files that could not be opened
        result_path: Where the timing record was written, None if it couldn't be
    """

    num_threads: int = Field(..., examples=[5], description='Thread count for this run')
    valid_count: int = Field(0, examples=[1200], description='Number of valid CPFs')
    invalid_count: int = Field(0, examples=[34], description='Number of invalid CPFs')
    elapsed_ms: int = Field(0, examples=[152], description='Elapsed wall-clock time in milliseconds')
    file_count: int = Field(0, examples=[30], description='Number of input files')
    batch_count: int = Field(0, examples=[5], description='Number of batches submitted')
    failed_batches: int = Field(0, examples=[0], description='Batches lost to unexpected worker errors')
    files_failed: int = Field(0, examples=[0], description='Files that could not be opened')
    result_path: str | None = Field(
        None, examples=['resultados/versao_5_threads.txt'], description='Timing record path, if written'
    )

    @property
    def total_count(self) -> int:
        return self.valid_count + self.invalid_count


class BenchmarkEntry(BaseModel):
    """One row of the thread-count benchmark table"""

    num_threads: int = Field(..., examples=[10])
    elapsed_ms: int = Field(..., examples=[87])
    speedup: float | None = Field(
        None, examples=[3.2], description='Single-thread time divided by this time, if a 1-thread record exists'
    )


class BenchmarkSummary(BaseModel):
    """All timing records found in a results directory"""

    results_dir: str = Field(..., examples=['resultados'])
    entries: list[BenchmarkEntry] = Field(default_factory=list)
