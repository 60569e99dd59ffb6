"""
Sinks
=====

Destinations a Logger writes finished records to.
"""

from .base import Sink
from .file import FileSink
from .stream import StreamSink

__all__ = [
    "Sink",
    "StreamSink",
    "FileSink",
]
