from typing import Any, Dict, Hashable, Iterable, List, Mapping, Optional, Union

from errors import (
    EmptyAlphabetError,
    EmptyTreeError,
    MalformedStreamError,
    UnknownSymbolError,
)
from pqueue import MinPriorityQueue


class HuffmanNode:
    """Node for a standard binary Huffman tree.

    A node is either a leaf (``symbol`` set, no children) or an internal
    node (``symbol`` is ``None`` and both children are set). Each internal
    node owns its two subtrees; nodes are never shared between parents.

    :ivar symbol: The symbol stored at a leaf; ``None`` for internal nodes.
    :type symbol: Hashable | None
    :ivar weight: Frequency of the leaf, or the sum of the children's weights.
    :type weight: int
    :ivar left: Child reached with bit ``0``.
    :type left: HuffmanNode | None
    :ivar right: Child reached with bit ``1``.
    :type right: HuffmanNode | None
    """

    __slots__ = ("symbol", "weight", "left", "right")

    def __init__(self, symbol=None, weight=0, left=None, right=None):
        """Create a Huffman node.

        :param symbol: Symbol value for leaf nodes; ``None`` for internal nodes.
        :type symbol: Hashable | None
        :param int weight: Weight (frequency) of the subtree rooted here.
        :param left: Left child node, if any.
        :type left: HuffmanNode|None
        :param right: Right child node, if any.
        :type right: HuffmanNode|None
        :returns: None
        :rtype: None
        """
        self.symbol = symbol
        self.weight = weight
        self.left = left
        self.right = right

    @classmethod
    def leaf(cls, symbol: Hashable, weight: int) -> "HuffmanNode":
        return cls(symbol=symbol, weight=weight)

    @classmethod
    def merge(cls, left: "HuffmanNode", right: "HuffmanNode") -> "HuffmanNode":
        """Create the internal parent of ``left`` (bit 0) and ``right`` (bit 1)."""
        return cls(weight=left.weight + right.weight, left=left, right=right)

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def __repr__(self):
        if self.is_leaf:
            return f"HuffmanNode(symbol={self.symbol!r}, weight={self.weight})"
        return f"HuffmanNode(weight={self.weight})"


class HuffmanTree:
    """Huffman tree builder, encoder and decoder.

    Construction repeatedly merges the two lightest nodes taken from a
    :class:`pqueue.MinPriorityQueue`. The node popped first becomes the left
    child (branch ``0``) and the node popped second the right child
    (branch ``1``). Equal weights pop in insertion order, and leaves are
    inserted in the iteration order of the frequency mapping, so identical
    mappings always produce identical trees and codewords.

    A one-symbol alphabet has no internal node: the root is the lone leaf
    and its codeword is the fixed single digit ``"0"``.

    :ivar root: Root of the current tree; ``None`` until :meth:`build` succeeds.
    :type root: HuffmanNode | None
    :ivar codes: Code table from the last :meth:`generate_codes` call.
    :type codes: Dict[Hashable, str]
    """

    SINGLE_SYMBOL_CODE = "0"

    def __init__(self):
        """Initialize an empty tree.

        :returns: None
        :rtype: None
        """
        self.root: Optional[HuffmanNode] = None
        self.codes: Dict[Hashable, str] = {}

    def build(self, frequencies: Mapping[Hashable, int]) -> HuffmanNode:
        """Build a Huffman tree from a symbol frequency table.

        Any previously built tree and its code table are dropped first.

        :param frequencies: Mapping from symbol to observed frequency.
        :type frequencies: Mapping[Hashable, int]
        :returns: Root of the new tree.
        :rtype: HuffmanNode
        :raises EmptyAlphabetError: If ``frequencies`` has no entries.
        :raises ValueError: If a frequency is not a positive integer.
        """
        self.root = None
        self.codes = {}

        if not frequencies:
            raise EmptyAlphabetError("Cannot build a Huffman tree from an empty alphabet")

        queue = MinPriorityQueue()
        for symbol, freq in frequencies.items():
            if not isinstance(freq, int) or freq < 1:
                raise ValueError(f"Invalid frequency {freq!r} for symbol {symbol!r}")
            queue.push(HuffmanNode.leaf(symbol, freq), freq)

        while len(queue) > 1:
            left = queue.pop()
            right = queue.pop()
            merged = HuffmanNode.merge(left, right)
            queue.push(merged, merged.weight)

        self.root = queue.pop()
        return self.root

    def generate_codes(self) -> Dict[Hashable, str]:
        """Derive the symbol to codeword table by walking the tree.

        :returns: Mapping from every symbol of the tree to its codeword.
        :rtype: Dict[Hashable, str]
        :raises EmptyTreeError: If no tree has been built yet.
        """
        if self.root is None:
            raise EmptyTreeError("Huffman tree has not been built")

        codes: Dict[Hashable, str] = {}
        if self.root.is_leaf:
            codes[self.root.symbol] = self.SINGLE_SYMBOL_CODE
        else:
            self._assign_codes(self.root, codes)
        self.codes = codes
        return codes

    @staticmethod
    def _assign_codes(root: HuffmanNode, codes: Dict[Hashable, str]):
        """Populate ``codes`` depth-first, left before right, below ``root``.

        Uses an explicit stack so skewed trees deeper than the interpreter's
        recursion limit are handled.

        :param root: Internal node to start from.
        :type root: HuffmanNode
        :param codes: Table being filled in.
        :type codes: Dict[Hashable, str]
        :returns: None
        :rtype: None
        """
        stack = [(root, "")]
        while stack:
            node, prefix = stack.pop()
            if node.is_leaf:
                codes[node.symbol] = prefix
                continue
            stack.append((node.right, prefix + "1"))
            stack.append((node.left, prefix + "0"))

    def encode(
        self,
        symbols: Iterable[Hashable],
        codes: Optional[Mapping[Hashable, str]] = None,
    ) -> str:
        """Concatenate the codewords of ``symbols`` in order.

        :param symbols: Symbols to encode.
        :type symbols: Iterable[Hashable]
        :param codes: Code table to use; defaults to the table of the last
            :meth:`generate_codes` call.
        :type codes: Mapping[Hashable, str] | None
        :returns: Bit string made of ``"0"`` and ``"1"`` characters.
        :rtype: str
        :raises UnknownSymbolError: If a symbol has no entry in ``codes``.
        :raises EmptyTreeError: If ``codes`` is omitted and no codes exist yet.
        """
        if codes is None:
            if not self.codes:
                raise EmptyTreeError("No code table available; build the tree first")
            codes = self.codes

        output = []
        for position, symbol in enumerate(symbols):
            try:
                output.append(codes[symbol])
            except KeyError:
                raise UnknownSymbolError(symbol, position) from None
        return "".join(output)

    def decode(
        self,
        bits: str,
        root: Optional[HuffmanNode] = None,
    ) -> Union[str, List[Any]]:
        """Decode a bit string by walking the tree from the root.

        Bit ``0`` moves to the left child and bit ``1`` to the right child.
        Reaching a leaf emits its symbol and restarts the walk at the root.

        :param bits: Bit string produced by :meth:`encode`.
        :type bits: str
        :param root: Tree to decode against; defaults to this tree's root.
        :type root: HuffmanNode | None
        :returns: The decoded symbols, joined into a ``str`` when every
            symbol is a string. An empty stream gives ``""`` for a tree of
            string symbols and ``[]`` otherwise.
        :rtype: str | List[Any]
        :raises EmptyTreeError: If no tree is available.
        :raises MalformedStreamError: If the stream contains anything other
            than ``0``/``1``, follows an edge the tree does not have, or ends
            in the middle of a codeword.
        """
        if root is None:
            root = self.root
        if root is None:
            raise EmptyTreeError("Huffman tree has not been built")

        decoded = []
        node = root
        for position, bit in enumerate(bits):
            if bit != "0" and bit != "1":
                raise MalformedStreamError(
                    f"Invalid bit {bit!r} at position {position}", position
                )
            if root.is_leaf:
                # Single-symbol tree: only the fixed "0" codeword exists
                if bit != self.SINGLE_SYMBOL_CODE:
                    raise MalformedStreamError(
                        f"No branch for bit {bit!r} at position {position}", position
                    )
                decoded.append(root.symbol)
                continue

            child = node.left if bit == "0" else node.right
            if child is None:
                raise MalformedStreamError(
                    f"No branch for bit {bit!r} at position {position}", position
                )
            if child.is_leaf:
                decoded.append(child.symbol)
                node = root
            else:
                node = child

        if node is not root:
            raise MalformedStreamError(
                f"Bit stream ends in the middle of a codeword after {len(bits)} bits",
                len(bits),
            )

        if not decoded:
            first = root
            while not first.is_leaf:
                first = first.left
            return "" if isinstance(first.symbol, str) else []
        if all(isinstance(symbol, str) for symbol in decoded):
            return "".join(decoded)
        return decoded
