"""Runtime settings for cpfcheck"""

from pathlib import Path

from cpfcheck.utils import get_str_env


# Thread counts a run may be started with
VALID_THREAD_OPTIONS: tuple[int, ...] = (1, 2, 3, 5, 6, 10, 15, 30)

# Shell choice that ends the interactive loop
EXIT_OPTION = 0

DEFAULT_INPUT_DIR = 'cpfs'
DEFAULT_RESULTS_DIR = 'resultados'


def is_valid_thread_option(value: int) -> bool:
    return value in VALID_THREAD_OPTIONS


def get_input_dir() -> Path:
    """Get the directory scanned for CPF list files.

    Priority:
    1. CPFCHECK_INPUT_DIR environment variable (if set)
    2. ./cpfs (default)
    """
    return Path(get_str_env('CPFCHECK_INPUT_DIR', DEFAULT_INPUT_DIR))


def get_results_dir() -> Path:
    """Get the directory that receives per-thread-count timing records.

    Priority:
    1. CPFCHECK_RESULTS_DIR environment variable (if set)
    2. ./resultados (default)
    """
    return Path(get_str_env('CPFCHECK_RESULTS_DIR', DEFAULT_RESULTS_DIR))
