"""
Stream Sink
===========

Writes records to a caller-supplied stream such as sys.stdout or sys.stderr.
"""

import io
import logging
from typing import IO, Any

from ..errors import SinkWriteError

logger = logging.getLogger(__name__)


def is_binary_stream(stream: IO[Any]) -> bool:
    """
    Whether stream takes bytes.

    Streams outside the io hierarchy (tempfile wrappers, duck-typed writers)
    are judged by their mode; without a mode they are treated as text.
    """
    if isinstance(stream, io.TextIOBase):
        return False
    if isinstance(stream, (io.RawIOBase, io.BufferedIOBase)):
        return True
    mode = getattr(stream, "mode", None)
    return isinstance(mode, str) and "b" in mode


class StreamSink:
    """
    Sink over an existing text or binary stream.

    Binary streams receive the record bytes unchanged; text streams receive
    them decoded with the sink's encoding. Every write is flushed.
    """

    def __init__(self, stream: IO[Any], encoding: str = "utf-8", close_stream: bool = False):
        """
        Initialize stream sink.

        Args:
            stream: Destination stream, owned by the caller
            encoding: Encoding of the bytes handed to write()
            close_stream: Close the stream on close() instead of only flushing it
        """
        self.stream = stream
        self.encoding = encoding
        self.close_stream = close_stream
        self.binary = is_binary_stream(stream)

    def write(self, data: bytes) -> None:
        try:
            if self.binary:
                self.stream.write(data)
            else:
                self.stream.write(data.decode(self.encoding, "replace"))
            self.stream.flush()
        except (OSError, ValueError, TypeError) as e:
            raise SinkWriteError(
                f"Failed to write to stream: {e}",
                details={"stream": repr(self.stream)},
            ) from e

    def close(self) -> None:
        """Flush the stream; close it only when the sink was told to."""
        self.stream.flush()
        if self.close_stream:
            self.stream.close()
            logger.debug("Closed stream %r", self.stream)
