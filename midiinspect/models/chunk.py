"""
Track chunk descriptors.
"""

from dataclasses import dataclass

CHUNK_HEADER_SIZE = 8  # 4-byte tag + 4-byte length


@dataclass(frozen=True)
class TrackDescriptor:
    """
    Location of one MTrk chunk.

    Track bodies are bounded, never parsed. data_end is clipped to the file
    size; declared_end keeps the value implied by the length field.
    """

    offset: int  # Offset of the "MTrk" tag
    length: int  # Declared body length
    file_size: int

    @property
    def data_start(self) -> int:
        return self.offset + CHUNK_HEADER_SIZE

    @property
    def declared_end(self) -> int:
        return self.data_start + self.length

    @property
    def data_end(self) -> int:
        return min(self.declared_end, self.file_size)

    @property
    def clipped(self) -> bool:
        """True if the declared length runs past the end of the file."""
        return self.declared_end > self.file_size

    @property
    def available(self) -> int:
        """Number of body bytes actually present in the file."""
        return max(0, self.data_end - self.data_start)
