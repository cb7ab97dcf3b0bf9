"""cpfcheck - parallel CPF validation and thread-count benchmarking."""

from cpfcheck.__version__ import __version__

__all__ = ['__version__']
