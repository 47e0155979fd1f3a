from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Hashable, Iterable, List, Mapping, Sequence, Tuple, Union

from bitops import BitReader, BitWriter
from errors import MalformedStreamError, UnknownSymbolError
from frequency import count_frequencies
from huffman import HuffmanNode, HuffmanTree


@dataclass(frozen=True)
class CodeBook:
    """Immutable snapshot of a built Huffman code.

    A snapshot is never modified after :meth:`HuffmanCodec.build` returns
    it; building again produces a new one, so readers holding an older
    snapshot keep decoding against the tree they were given.

    :ivar root: Root of the Huffman tree.
    :type root: HuffmanNode
    :ivar codes: Read-only mapping from symbol to codeword.
    :type codes: Mapping[Hashable, str]
    :ivar frequencies: Read-only copy of the frequencies the tree was built from.
    :type frequencies: Mapping[Hashable, int]
    """

    root: HuffmanNode = field(compare=False, repr=False)
    codes: Mapping[Hashable, str]
    frequencies: Mapping[Hashable, int]

    def code_lengths(self) -> Dict[Hashable, int]:
        return {symbol: len(code) for symbol, code in self.codes.items()}

    def average_length(self) -> float:
        """Mean codeword length weighted by symbol frequency."""
        total = sum(self.frequencies.values())
        if total == 0:
            return 0.0
        weighted = sum(len(self.codes[s]) * f for s, f in self.frequencies.items())
        return weighted / total

    def encoded_length(self, symbols: Iterable[Hashable]) -> int:
        """Number of bits :meth:`HuffmanCodec.encode` would produce for ``symbols``.

        :raises UnknownSymbolError: If a symbol has no codeword.
        """
        total = 0
        for position, symbol in enumerate(symbols):
            try:
                total += len(self.codes[symbol])
            except KeyError:
                raise UnknownSymbolError(symbol, position) from None
        return total


class HuffmanCodec:
    """Facade tying frequency counting, tree construction and coding together.

    :ivar BITS_PER_SYMBOL: Size of one uncompressed symbol, used for the
        compression ratio.
    :type BITS_PER_SYMBOL: int
    """

    BITS_PER_SYMBOL = 8

    @staticmethod
    def count(symbols: Iterable[Hashable]) -> Mapping[Hashable, int]:
        """Count symbol occurrences; see :func:`frequency.count_frequencies`."""
        return count_frequencies(symbols)

    @staticmethod
    def build(frequencies: Mapping[Hashable, int]) -> CodeBook:
        """Build a tree and its code table from a frequency mapping.

        :param frequencies: Mapping from symbol to a positive count.
        :type frequencies: Mapping[Hashable, int]
        :returns: New immutable snapshot holding the tree and its codes.
        :rtype: CodeBook
        :raises EmptyAlphabetError: If ``frequencies`` is empty.
        """
        tree = HuffmanTree()
        root = tree.build(frequencies)
        codes = tree.generate_codes()
        return CodeBook(
            root=root,
            codes=MappingProxyType(dict(codes)),
            frequencies=MappingProxyType(dict(frequencies)),
        )

    @staticmethod
    def encode(
        symbols: Iterable[Hashable],
        codes: Union[CodeBook, Mapping[Hashable, str]],
    ) -> str:
        """Encode ``symbols`` with a code book or a bare code table.

        :returns: Bit string of ``"0"``/``"1"`` characters.
        :rtype: str
        :raises UnknownSymbolError: If a symbol is missing from the table.
        """
        if isinstance(codes, CodeBook):
            codes = codes.codes
        return HuffmanTree().encode(symbols, codes)

    @staticmethod
    def decode(
        bits: str,
        tree: Union[CodeBook, HuffmanNode],
    ) -> Union[str, List[Any]]:
        """Decode ``bits`` against a code book or a bare tree root.

        :returns: Decoded symbols (a ``str`` for character symbols).
        :rtype: str | List[Any]
        :raises MalformedStreamError: If the stream does not fit the tree.
        :raises EmptyTreeError: If ``tree`` is ``None``.
        """
        if isinstance(tree, CodeBook):
            tree = tree.root
        return HuffmanTree().decode(bits, tree)

    def roundtrip(self, symbols: Sequence[Hashable]) -> Tuple[CodeBook, str, Union[str, List[Any]]]:
        """Count, build, encode and decode ``symbols`` in one go.

        :param symbols: Non-empty symbol sequence.
        :type symbols: Sequence[Hashable]
        :returns: ``(codebook, encoded_bits, decoded_symbols)``.
        :rtype: Tuple[CodeBook, str, str | List[Any]]
        :raises EmptyAlphabetError: If ``symbols`` is empty.
        """
        codebook = self.build(self.count(symbols))
        bits = self.encode(symbols, codebook)
        return codebook, bits, self.decode(bits, codebook)

    @classmethod
    def compression_ratio(cls, symbol_count: int, encoded_bits: int) -> float:
        """Encoded size as a percentage of the uncompressed size.

        :param symbol_count: Number of symbols in the original input.
        :type symbol_count: int
        :param encoded_bits: Length of the encoded bit string.
        :type encoded_bits: int
        :returns: ``encoded_bits / (symbol_count * BITS_PER_SYMBOL) * 100``,
            or ``0.0`` for empty input.
        :rtype: float
        """
        if symbol_count <= 0:
            return 0.0
        return encoded_bits / (symbol_count * cls.BITS_PER_SYMBOL) * 100

    @staticmethod
    def pack(bits: str) -> bytes:
        """Pack a bit string into bytes, MSB first, zero-padding the last byte.

        :raises MalformedStreamError: If ``bits`` contains characters other
            than 0/1.
        """
        writer = BitWriter()
        try:
            writer.write_code(bits)
        except ValueError as e:
            raise MalformedStreamError(str(e), writer.bits_written) from None
        return writer.flush()

    @staticmethod
    def unpack(data: bytes, nbits: int) -> str:
        """Recover the first ``nbits`` bits of ``data`` as a bit string.

        :param data: Bytes produced by :meth:`pack`.
        :type data: bytes
        :param nbits: Length of the original bit string.
        :type nbits: int
        :returns: The bit string.
        :rtype: str
        :raises MalformedStreamError: If ``data`` holds fewer than ``nbits`` bits.
        """
        reader = BitReader(data)
        try:
            return reader.read_code(nbits)
        except EOFError:
            raise MalformedStreamError(
                f"Packed data holds {len(data) * 8} bits, expected {nbits}",
                len(data) * 8,
            ) from None
