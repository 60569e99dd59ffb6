from typing import Protocol


class Sink(Protocol):
    """
    Writable destination for formatted records.

    A sink does not track whether it was closed; the owning Logger refuses
    writes after close.
    """

    def write(self, data: bytes) -> None:
        """
        Write one record and flush it before returning.

        Raises:
            SinkWriteError: If the destination rejects the write or flush
        """

    def close(self) -> None:
        """Release the underlying resource."""
