"""Block-scoped string tables.

Entities in a primitive block reference strings by index into the block's
string table. The encode side builds the table while entities are added;
the decode side resolves indices against the table read from the block.
Index 0 is always the empty string.
"""

from __future__ import annotations

from collections.abc import Iterable

from google.protobuf.message import DecodeError as ProtobufDecodeError

from .exceptions import DecodeError, StringIndexError
from .proto import osmformat_pb2


class StringTable:
    """Read-only string table of one block.

    Example:
        >>> table = StringTable(["", "highway", "residential"])
        >>> table.resolve(1)
        'highway'
    """

    def __init__(self, strings: Iterable[str]) -> None:
        self._strings = list(strings)

    def __len__(self) -> int:
        return len(self._strings)

    def resolve(self, index: int) -> str:
        """Return the string stored at ``index``.

        Raises:
            StringIndexError: If index is outside the table
        """
        if index < 0 or index >= len(self._strings):
            raise StringIndexError(index, len(self._strings))
        return self._strings[index]

    def to_message(self) -> osmformat_pb2.StringTable:
        """Return the table as a ``StringTable`` message."""
        return osmformat_pb2.StringTable(s=[text.encode("utf-8") for text in self._strings])

    def to_bytes(self) -> bytes:
        """Serialize as a ``StringTable`` message."""
        return self.to_message().SerializeToString()

    @classmethod
    def from_message(cls, message: osmformat_pb2.StringTable) -> StringTable:
        """Build a table from a ``StringTable`` message.

        Raises:
            DecodeError: If an entry is not valid UTF-8
        """
        try:
            return cls(raw.decode("utf-8") for raw in message.s)
        except UnicodeDecodeError as e:
            raise DecodeError(f"Malformed string table: {e}") from e

    @classmethod
    def from_bytes(cls, data: bytes) -> StringTable:
        """Parse a serialized ``StringTable`` message.

        Raises:
            DecodeError: If data is not a valid message or an entry is not valid UTF-8
        """
        message = osmformat_pb2.StringTable()
        try:
            message.ParseFromString(data)
        except ProtobufDecodeError as e:
            raise DecodeError(f"Malformed string table: {e}") from e
        return cls.from_message(message)


class StringTableEncoder:
    """Deduplicating string table builder for one block.

    Indices are stable for the lifetime of the block. Call clear() before
    reusing the encoder for the next block.

    Example:
        >>> encoder = StringTableEncoder()
        >>> encoder.get_index("name")
        1
        >>> encoder.get_index("name")
        1
    """

    def __init__(self) -> None:
        self._strings: list[str] = []
        self._indices: dict[str, int] = {}
        self.clear()

    def __len__(self) -> int:
        return len(self._strings)

    def get_index(self, text: str) -> int:
        """Return the index of ``text``, adding it to the table if new."""
        index = self._indices.get(text)
        if index is None:
            index = len(self._strings)
            self._strings.append(text)
            self._indices[text] = index
        return index

    def estimate_size(self) -> int:
        """Return the UTF-8 byte size of all stored strings."""
        return sum(len(text.encode("utf-8")) for text in self._strings)

    def build(self) -> StringTable:
        """Return a read-only snapshot of the table."""
        return StringTable(self._strings)

    def to_bytes(self) -> bytes:
        """Serialize as a ``StringTable`` message."""
        return self.build().to_bytes()

    def clear(self) -> None:
        """Reset the table to its initial state (only the empty string)."""
        self._strings = [""]
        self._indices = {"": 0}
