"""Sequential little-endian reader over an immutable byte buffer."""
import struct
from typing import Tuple, Union

BufferLike = Union[bytes, bytearray, memoryview]


class OutOfBoundsError(Exception):
    """Raised when a read would run past the end of the buffer."""

    def __init__(self, position: int, size: int, length: int):
        super().__init__(
            f"Read of {size} bytes at offset {position} exceeds buffer length {length}"
        )
        self.position = position
        self.size = size
        self.length = length


class ByteCursor:
    """Bounds-checked reader with a movable read position.

    A failed read never moves the position.
    """

    def __init__(self, data: BufferLike, position: int = 0):
        self.data = bytes(data)
        self._position = position

    @property
    def position(self) -> int:
        return self._position

    @property
    def remaining(self) -> int:
        return max(0, len(self.data) - self._position)

    def seek(self, offset: int) -> None:
        if offset < 0:
            raise ValueError(f"Negative offset: {offset}")
        self._position = offset

    def _check(self, size: int) -> None:
        if self._position + size > len(self.data):
            raise OutOfBoundsError(self._position, size, len(self.data))

    def _unpack(self, fmt: str) -> Tuple[int, ...]:
        size = struct.calcsize(fmt)
        self._check(size)
        values = struct.unpack_from(fmt, self.data, self._position)
        self._position += size
        return values

    def read_u8(self) -> int:
        return self._unpack('<B')[0]

    def read_u16le(self) -> int:
        return self._unpack('<H')[0]

    def read_u32le(self) -> int:
        return self._unpack('<I')[0]

    def read_u16le_array(self, count: int) -> Tuple[int, ...]:
        """Read `count` consecutive u16 values."""
        if count <= 0:
            return ()
        return self._unpack(f'<{count}H')

    def read_bytes(self, n: int) -> bytes:
        if n < 0:
            raise ValueError(f"Negative read size: {n}")
        self._check(n)
        result = self.data[self._position:self._position + n]
        self._position += n
        return result

    def read_fixed_string(self, n: int) -> str:
        """Read an n-byte field, truncated at the first NUL."""
        raw = self.read_bytes(n)
        end = raw.find(b'\0')
        if end != -1:
            raw = raw[:end]
        return raw.decode('utf-8', 'replace')
