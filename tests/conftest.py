"""Pytest configuration and shared fixtures for cpfcheck tests.

Every test gets its own input and results directories so timing records
never land in the working directory.
"""

import shutil
import tempfile
from pathlib import Path

import pytest

VALID_CPFS = ['529.982.247-25', '111.444.777-35', '00000000604']
INVALID_CPFS = ['529.982.247-24', '11111111111', '123']


@pytest.fixture(autouse=True)
def isolate_directories(monkeypatch):
    """Auto-use fixture pointing CPFCHECK_INPUT_DIR and CPFCHECK_RESULTS_DIR at temp dirs."""
    temp_root = tempfile.mkdtemp(prefix='cpfcheck_test_')
    input_dir = Path(temp_root) / 'cpfs'
    results_dir = Path(temp_root) / 'resultados'
    input_dir.mkdir()

    monkeypatch.setenv('CPFCHECK_INPUT_DIR', str(input_dir))
    monkeypatch.setenv('CPFCHECK_RESULTS_DIR', str(results_dir))

    yield Path(temp_root)

    shutil.rmtree(temp_root, ignore_errors=True)


@pytest.fixture
def input_dir(isolate_directories):
    """The isolated input directory (exists, empty)."""
    return isolate_directories / 'cpfs'


@pytest.fixture
def results_dir(isolate_directories):
    """The isolated results directory (not created yet)."""
    return isolate_directories / 'resultados'


@pytest.fixture
def cpf_files(input_dir):
    """Seven CPF list files with a known mix of valid, invalid and blank lines.

    Totals: 21 valid, 21 invalid.
    """
    files = []
    for i in range(7):
        path = input_dir / f'lista_{i:02d}.txt'
        lines = VALID_CPFS + ['', '   '] + INVALID_CPFS
        path.write_text('\n'.join(lines) + '\n')
        files.append(path)
    return files
