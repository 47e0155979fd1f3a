from typing import Any, Optional


class HuffmanError(Exception):
    """Base class for every error raised by the Huffman coding core."""


class EmptyAlphabetError(HuffmanError, ValueError):
    """Raised when a tree is requested for a frequency mapping with no entries."""


class EmptyTreeError(HuffmanError, RuntimeError):
    """Raised when codes are generated or a stream is decoded before a build."""


class EmptyQueueError(HuffmanError, IndexError):
    """Raised on ``pop`` from an empty priority queue.

    Tree construction never pops more nodes than it pushed, so seeing this
    outside of direct queue usage means the builder itself is broken.
    """


class UnknownSymbolError(HuffmanError, KeyError):
    """Raised when a symbol has no codeword in the supplied code table.

    :ivar symbol: The symbol that could not be encoded.
    :type symbol: Any
    :ivar position: Index of the symbol in the input sequence.
    :type position: int
    """

    def __init__(self, symbol: Any, position: int):
        self.symbol = symbol
        self.position = position
        super().__init__(symbol)

    def __str__(self):
        # KeyError.__str__ would only repr the key
        return f"No codeword for symbol {self.symbol!r} at position {self.position}"


class MalformedStreamError(HuffmanError, ValueError):
    """Raised when a bit stream cannot be decoded against a tree.

    :ivar position: Index of the offending bit, or the stream length when
        the stream ends in the middle of a codeword.
    :type position: int | None
    """

    def __init__(self, message: str, position: Optional[int] = None):
        self.position = position
        super().__init__(message)
