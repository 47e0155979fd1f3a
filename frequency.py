from collections import Counter
from typing import Hashable, Iterable


def count_frequencies(symbols: Iterable[Hashable]) -> Counter:
    """Count how often each symbol occurs in ``symbols``.

    The returned mapping iterates in first-occurrence order, so the same
    input always yields the same enumeration order (and therefore the same
    tree shape when passed on to :meth:`huffman.HuffmanTree.build`).

    :param symbols: Any finite sequence of symbols, possibly empty.
    :type symbols: Iterable[Hashable]
    :returns: Mapping from each distinct symbol to its occurrence count.
        Symbols that never occur are absent; empty input gives an empty mapping.
    :rtype: Counter
    """
    freq_counter = Counter()
    for symbol in symbols:
        freq_counter[symbol] += 1
    return freq_counter
