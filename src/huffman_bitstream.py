# filename: huffman_bitstream.py

from huffman_errors import OutOfDataError


class BitWriter:
    """Packs bits MSB-first into a growing byte buffer.

    ``bit_buffer`` holds the pending bits of the current byte and
    ``bit_count`` how many of them are valid (0-7).
    """

    def __init__(self):
        self.buffer = bytearray()
        self.bit_buffer = 0
        self.bit_count = 0
        self.bits_written = 0

    def write_bit(self, bit):
        self.bit_buffer = (self.bit_buffer << 1) | (bit & 1)
        self.bit_count += 1
        self.bits_written += 1
        if self.bit_count == 8:
            self.buffer.append(self.bit_buffer)
            self.bit_buffer = 0
            self.bit_count = 0

    def write_uint(self, value: int, nbits: int):
        """Write the low ``nbits`` of ``value``, most significant bit first."""
        if value < 0 or value >> nbits:
            raise ValueError(f"{value} does not fit in {nbits} bits")
        self._push(value, nbits)

    def write_code(self, code):
        """Write a ``(bits, length)`` code as produced by ``CodeTable``."""
        bits, length = code
        self._push(bits, length)

    def _push(self, value, nbits):
        # Whole bytes go out at once; only the tail stays in bit_buffer.
        acc = (self.bit_buffer << nbits) | value
        count = self.bit_count + nbits
        while count >= 8:
            count -= 8
            self.buffer.append((acc >> count) & 0xFF)
        self.bit_buffer = acc & ((1 << count) - 1)
        self.bit_count = count
        self.bits_written += nbits

    def finish(self) -> bytes:
        """Pad the partial byte (if any) with zero bits and return the buffer."""
        if self.bit_count > 0:
            self.buffer.append((self.bit_buffer << (8 - self.bit_count)) & 0xFF)
            self.bit_buffer = 0
            self.bit_count = 0
        return bytes(self.buffer)


class BitReader:
    """Reads bits MSB-first from a bytes-like object.

    The reader is the decode cursor: it is created per call and handed to every
    function that consumes bits, so nothing about a decode lives anywhere else.
    """

    def __init__(self, data):
        self.data = data
        self.pos = 0
        self.bit_buffer = 0
        self.bit_count = 0
        self.bits_read = 0

    def read_bit(self) -> int:
        if self.bit_count == 0:
            if self.pos >= len(self.data):
                raise OutOfDataError(
                    f"bitstream exhausted after {self.bits_read} bits"
                )
            self.bit_buffer = self.data[self.pos]
            self.pos += 1
            self.bit_count = 8
        self.bit_count -= 1
        self.bits_read += 1
        return (self.bit_buffer >> self.bit_count) & 1

    def read_bit_available(self) -> bool:
        return self.bit_count > 0 or self.pos < len(self.data)

    def read_uint(self, nbits: int) -> int:
        value = 0
        for _ in range(nbits):
            value = (value << 1) | self.read_bit()
        return value
