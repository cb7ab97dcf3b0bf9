"""Prometheus metrics for cpfcheck"""

from prometheus_client import Counter, Gauge, Histogram, generate_latest, start_http_server

# ============================================================================
# Validation Metrics
# ============================================================================

# Lines classified by the checksum validator
cpfs_validated_total = Counter(
    'cpfcheck_cpfs_validated_total',
    'Total number of CPF lines validated',
    ['result'],  # valid, invalid
)


# ============================================================================
# File Processing Metrics
# ============================================================================

files_processed_total = Counter('cpfcheck_files_processed_total', 'Total number of input files read to completion')

files_failed_total = Counter('cpfcheck_files_failed_total', 'Total number of input files that could not be opened')


# ============================================================================
# Run Metrics
# ============================================================================

runs_total = Counter(
    'cpfcheck_runs_total',
    'Total number of validation runs',
    ['threads'],
)

run_duration_seconds = Histogram(
    'cpfcheck_run_duration_seconds',
    'Wall-clock time of a validation run',
    ['threads'],
    buckets=[0.001, 0.005, 0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0, 30.0, 60.0],
)

batches_failed_total = Counter(
    'cpfcheck_batches_failed_total', 'Total number of batches whose worker raised an unexpected error'
)


# ============================================================================
# Worker Metrics
# ============================================================================

active_workers = Gauge('cpfcheck_active_workers', 'Number of worker threads in the current pool')


# ============================================================================
# Exposition
# ============================================================================


def export_metrics() -> str:
    """Render the default registry in the Prometheus text exposition format."""
    return generate_latest().decode('utf-8')


def start_metrics_server(port: int, addr: str = '0.0.0.0'):
    """Serve /metrics on port from a daemon thread for the life of the process."""
    start_http_server(port, addr=addr)
