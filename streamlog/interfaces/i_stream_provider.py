"""Output stream provider interface (adapter pattern)."""

from typing import Optional, Protocol, Union


class IOutputStream(Protocol):
    """Writer the logger prints records to (text or binary)."""

    def write(self, data: Union[str, bytes]) -> object:
        """Write data."""
        ...

    def flush(self) -> None:
        """Flush buffered data."""
        ...

    def close(self) -> None:
        """Close the stream."""
        ...


class IStreamProvider(Protocol):
    """Interface yielding the current output stream."""

    def get_stream(self) -> Optional[IOutputStream]:
        """Return the stream to write the next record to."""
        ...
