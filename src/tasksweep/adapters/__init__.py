"""Adapters - I/O implementations of ports."""

from .sample_tasks import SampleTaskSource
from .json_file import JsonFileTaskSource

__all__ = [
    "SampleTaskSource",
    "JsonFileTaskSource",
]
