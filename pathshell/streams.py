"""
Output streams used by commands.

Commands write either text or bytes; both are normalized to bytes on the
underlying binary stream. The shell wires these to sys.stdout.buffer and
sys.stderr.buffer, tests wire them to in-memory buffers.
"""

import io
import sys
from typing import BinaryIO, Union


class OutputStream:
    """Byte-oriented output stream that also accepts str"""

    def __init__(self, stream: BinaryIO, encoding: str = 'utf-8', errors: str = 'surrogateescape'):
        self.stream = stream
        self.encoding = encoding
        # Undecodable input bytes come back out unchanged
        self.errors = errors

    @classmethod
    def to_buffer(cls) -> 'OutputStream':
        """Create a stream backed by an in-memory buffer"""
        return cls(io.BytesIO())

    @classmethod
    def to_stdout(cls) -> 'OutputStream':
        return cls(sys.stdout.buffer)

    def write(self, data: Union[str, bytes]) -> int:
        """
        Write data to the stream.

        Args:
            data: Text (encoded with the stream encoding) or raw bytes

        Returns:
            Number of bytes written
        """
        if isinstance(data, str):
            data = data.encode(self.encoding, self.errors)
        self.stream.write(data)
        return len(data)

    def flush(self):
        self.stream.flush()

    def get_value(self) -> bytes:
        """
        Get everything written so far.

        Only meaningful for buffer-backed streams; returns b'' otherwise.
        """
        if isinstance(self.stream, io.BytesIO):
            return self.stream.getvalue()
        return b''


class ErrorStream(OutputStream):
    """Output stream for diagnostics, flushed on every write"""

    @classmethod
    def to_stderr(cls) -> 'ErrorStream':
        return cls(sys.stderr.buffer)

    def write(self, data: Union[str, bytes]) -> int:
        written = super().write(data)
        self.flush()
        return written
