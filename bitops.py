class BitWriter:
    """Packs a stream of ``"0"``/``"1"`` digits into bytes, MSB first.

    :ivar buffer: Fully written bytes.
    :type buffer: bytearray
    :ivar bit_buffer: 8-bit scratch register for accumulating pending bits.
    :type bit_buffer: int
    :ivar bit_count: Number of valid bits currently stored in ``bit_buffer`` (0-7).
    :type bit_count: int
    :ivar bits_written: Total number of bits written so far.
    :type bits_written: int
    """

    def __init__(self):
        """Initialize an empty bit writer.

        :returns: None
        :rtype: None
        """
        self.buffer = bytearray()
        self.bit_buffer = 0
        self.bit_count = 0
        self.bits_written = 0

    def write_bit(self, bit: int):
        """Append a single bit.

        :param bit: ``0`` or ``1``.
        :type bit: int
        :returns: None
        :rtype: None
        """
        self.bit_buffer = (self.bit_buffer << 1) | (bit & 1)
        self.bit_count += 1
        self.bits_written += 1
        if self.bit_count == 8:
            self.buffer.append(self.bit_buffer)
            self.bit_buffer = 0
            self.bit_count = 0

    def write_code(self, code: str):
        """Append every digit of a bit string such as a Huffman codeword.

        :param code: String made of ``"0"`` and ``"1"`` characters.
        :type code: str
        :returns: None
        :rtype: None
        :raises ValueError: If ``code`` contains any other character.
        """
        for digit in code:
            if digit == "0":
                self.write_bit(0)
            elif digit == "1":
                self.write_bit(1)
            else:
                raise ValueError(f"Invalid bit character {digit!r}")

    def flush(self) -> bytes:
        """Flush remaining bits (if any) and return the full byte buffer.

        Any partial byte in ``bit_buffer`` is padded with zeros to complete the
        byte before being appended.

        :returns: The accumulated bytes written so far.
        :rtype: bytes
        """
        if self.bit_count > 0:
            self.bit_buffer <<= (8 - self.bit_count)
            self.buffer.append(self.bit_buffer)
            self.bit_buffer = 0
            self.bit_count = 0
        return bytes(self.buffer)


class BitReader:
    """Reads bits MSB first from a bytes-like object.

    :ivar data: Input data to read bits from.
    :type data: bytes
    :ivar pos: Index of the next source byte to load.
    :type pos: int
    :ivar bit_buffer: Scratch register holding the current source byte.
    :type bit_buffer: int
    :ivar bit_count: Number of unread bits remaining in ``bit_buffer`` (0-8).
    :type bit_count: int
    """

    def __init__(self, data: bytes):
        """Create a bit reader for the given input ``data``.

        :param data: Source data to read from.
        :type data: bytes
        :returns: None
        :rtype: None
        """
        self.data = data
        self.pos = 0
        self.bit_buffer = 0
        self.bit_count = 0

    def read_bit(self) -> int:
        """Read the next bit.

        :returns: ``0`` or ``1``.
        :rtype: int
        :raises EOFError: If every bit of ``data`` has been consumed.
        """
        if self.bit_count == 0:
            if self.pos >= len(self.data):
                raise EOFError("Unexpected end of data")
            self.bit_buffer = self.data[self.pos]
            self.pos += 1
            self.bit_count = 8
        self.bit_count -= 1
        return (self.bit_buffer >> self.bit_count) & 1

    def read_code(self, nbits: int) -> str:
        """Read ``nbits`` bits and return them as a ``"0"``/``"1"`` string.

        :param nbits: Number of bits to read.
        :type nbits: int
        :returns: The next ``nbits`` bits, first bit first.
        :rtype: str
        :raises EOFError: If the end of data is reached before reading ``nbits``.
        """
        return "".join("1" if self.read_bit() else "0" for _ in range(nbits))
