"""
Batch backends for analysing many independent samples.

This subpackage provides pluggable execution strategies:

CPU Backends
    :class:`SequentialBackend`: single-threaded execution
    :class:`ThreadBackend`: thread-based parallelism
    :class:`ProcessBackend`: process-based parallelism

Entry points
    :func:`analyse_samples`: build one distribution per sample
    :func:`create_backend`: backend selection

Utilities
    :func:`make_blocks`: chunking helper for work distribution
    :func:`worker_analyse_chunk`: top-level worker for process pools
    :func:`is_windows_platform`: platform detection helper

Protocol
    :class:`ExecutionBackend`: interface for custom backends
"""

from .base import ExecutionBackend, is_windows_platform, make_blocks, worker_analyse_chunk
from .dispatch import analyse_samples, create_backend
from .parallel import ProcessBackend, ThreadBackend
from .sequential import SequentialBackend

__all__ = [
    # Protocol
    "ExecutionBackend",
    # CPU Backends
    "SequentialBackend",
    "ThreadBackend",
    "ProcessBackend",
    # Entry points
    "analyse_samples",
    "create_backend",
    # Utility Functions
    "make_blocks",
    "worker_analyse_chunk",
    "is_windows_platform",
]
