import argparse
import sys

from typing import Callable, Hashable, List, Mapping, Optional

from codec import HuffmanCodec
from errors import HuffmanError

TABLE_WIDTH = 15  #: Column width of the printed tables


def get_parser():
    """Create and configure the CLI argument parser.

    :returns: Configured argument parser.
    :rtype: argparse.ArgumentParser
    """
    parser = argparse.ArgumentParser(
        description="Huffman coding of text: frequency table, codes, "
                    "encode/decode and size analysis"
    )
    subparsers = parser.add_subparsers(
        title="subcommands", dest="cmd", required=True
    )

    encode = subparsers.add_parser(
        "encode", aliases=["e"], help="Encode text and decode it back"
    )
    encode.add_argument("text", nargs="?", help="Text to encode")
    encode.add_argument(
        "-f", "--file", help="Read the text to encode from a UTF-8 file"
    )
    encode.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Only print the encoded bit string",
    )

    decode = subparsers.add_parser(
        "decode", aliases=["d"], help="Decode a bit string"
    )
    decode.add_argument("bits", help="Bit string made of 0 and 1")
    decode.add_argument(
        "-s",
        "--sample",
        help="Text the code was built from (same text gives the same tree)",
    )
    decode.add_argument(
        "-f", "--file", help="Read the sample text from a UTF-8 file"
    )

    subparsers.add_parser(
        "menu", aliases=["m"], help="Interactive menu"
    )

    return parser


def _read_text(text: Optional[str], path: Optional[str]) -> str:
    """Pick the input text from an argument or a file.

    :param text: Text given on the command line, if any.
    :type text: Optional[str]
    :param path: File to read instead, if any.
    :type path: Optional[str]
    :returns: The text to work on (``""`` if neither is given).
    :rtype: str
    :raises FileNotFoundError: If ``path`` does not exist.
    """
    if path is not None:
        with open(path, "r", encoding="utf-8") as f:
            return f.read()
    return text or ""


def _display_symbol(symbol: Hashable) -> str:
    """Render a symbol for a table cell; blanks and control chars use repr."""
    if isinstance(symbol, str) and symbol.isprintable() and not symbol.isspace():
        return symbol
    return repr(symbol)


def _render_frequency_table(frequencies: Mapping[Hashable, int]) -> List[str]:
    """Format the frequency table with a Total row.

    :param frequencies: Mapping from symbol to count.
    :type frequencies: Mapping[Hashable, int]
    :returns: Lines to print.
    :rtype: List[str]
    """
    w = TABLE_WIDTH
    lines = [f"{'Character':<{w}}{'Frequency':<{w}}", "-" * (2 * w)]
    for symbol, freq in frequencies.items():
        lines.append(f"{_display_symbol(symbol):<{w}}{freq:<{w}}")
    lines.append("-" * (2 * w))
    lines.append(f"{'Total':<{w}}{sum(frequencies.values()):<{w}}")
    return lines


def _render_code_table(codes: Mapping[Hashable, str]) -> List[str]:
    """Format the code table, shortest codewords first.

    :param codes: Mapping from symbol to codeword.
    :type codes: Mapping[Hashable, str]
    :returns: Lines to print.
    :rtype: List[str]
    """
    w = TABLE_WIDTH
    lines = [f"{'Character':<{w}}{'Huffman Code':<{w + 5}}", "-" * (2 * w + 5)]
    for symbol, code in sorted(codes.items(), key=lambda kv: (len(kv[1]), kv[1])):
        lines.append(f"{_display_symbol(symbol):<{w}}{code:<{w + 5}}")
    lines.append("-" * (2 * w + 5))
    return lines


def _fmt_ratio(ratio: float) -> str:
    """Format a compression ratio like ``37.50%``.

    :param ratio: Percentage value.
    :type ratio: float
    :returns: Percentage with two decimals.
    :rtype: str
    """
    return f"{ratio:.2f}%"


def run_encode(text: str, quiet: bool = False) -> int:
    """Walk through counting, building, encoding, decoding and size analysis.

    :param text: Text to encode.
    :type text: str
    :param quiet: Print only the encoded bit string.
    :type quiet: bool
    :returns: Exit status, ``0`` on success.
    :rtype: int
    """
    codec = HuffmanCodec()
    try:
        codebook, encoded, decoded = codec.roundtrip(text)
    except HuffmanError as e:
        print(f"[!] {e}")
        return 1

    if quiet:
        print(encoded)
        return 0

    print("\nStep 1: Create a Frequency Table\n")
    for line in _render_frequency_table(codebook.frequencies):
        print(line)

    print("\nStep 2: Build a Huffman Tree and Generate Huffman Codes\n")
    for line in _render_code_table(codebook.codes):
        print(line)

    print("\nStep 3: Encode the Input String\n")
    print("Encoded String:", encoded)

    print("\nStep 4: Decode the Encoded String\n")
    print("Decoded String:", decoded)
    if decoded == text:
        print("The decoded string matches the original!")
    else:
        print("[!] Decoded string does not match the original.")

    print("\nStep 5: Analyze and Compare the Sizes\n")
    original_bits = len(text) * codec.BITS_PER_SYMBOL
    print("Original Size (in bits):", original_bits)
    print("Encoded Size (in bits):", len(encoded))
    print("Packed Size (in bytes):", len(codec.pack(encoded)))
    print(f"Average code length: {codebook.average_length():.3f} bits/symbol")
    ratio = codec.compression_ratio(len(text), len(encoded))
    print("Compression Ratio:", _fmt_ratio(ratio))
    return 0 if decoded == text else 1


def run_decode(sample: str, bits: str) -> int:
    """Rebuild the code from ``sample`` and decode ``bits`` with it.

    :param sample: Text the code was originally built from.
    :type sample: str
    :param bits: Encoded bit string.
    :type bits: str
    :returns: Exit status, ``0`` on success.
    :rtype: int
    """
    codec = HuffmanCodec()
    try:
        codebook = codec.build(codec.count(sample))
        decoded = codec.decode(bits.strip(), codebook)
    except HuffmanError as e:
        print(f"[!] {e}")
        return 1
    print(decoded)
    return 0


def _print_menu() -> None:
    print("\n\n--------------Welcome to Huffman Coding --------------\n")
    print("1. Enter String and Encode/Decode")
    print("2. Exit")


def _is_valid_choice(choice: str) -> bool:
    """Accept exactly ``1`` or ``2``, ignoring surrounding whitespace."""
    return choice.strip() in ("1", "2")


def interactive(input_fn: Callable[[str], str] = input) -> int:
    """Run the menu loop until the user exits or input runs out.

    :param input_fn: Prompt function, replaced in tests.
    :type input_fn: Callable[[str], str]
    :returns: Exit status.
    :rtype: int
    """
    while True:
        _print_menu()
        try:
            choice = input_fn("\nEnter your choice: ")
        except EOFError:
            print()
            return 0

        if not _is_valid_choice(choice):
            print("\n[!] Invalid input. Please enter a valid numeric choice (1 or 2).")
            continue

        if choice.strip() == "2":
            print("\nExiting program. Goodbye!")
            return 0

        try:
            text = input_fn("\nEnter a String: ")
        except EOFError:
            print()
            return 0
        run_encode(text)


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the CLI tool.

    :param argv: Arguments to parse instead of ``sys.argv[1:]``.
    :type argv: Optional[List[str]]
    :returns: Process exit status.
    :rtype: int
    """
    parser = get_parser()
    args = parser.parse_args(argv)

    if args.cmd in ["encode", "e"]:
        try:
            text = _read_text(args.text, args.file)
        except FileNotFoundError:
            print(f"[!] Input file not found: {args.file}")
            return 1
        return run_encode(text, quiet=args.quiet)
    elif args.cmd in ["decode", "d"]:
        try:
            sample = _read_text(args.sample, args.file)
        except FileNotFoundError:
            print(f"[!] Sample file not found: {args.file}")
            return 1
        return run_decode(sample, args.bits)
    elif args.cmd in ["menu", "m"]:
        return interactive()
    return 2


if __name__ == "__main__":
    sys.exit(main())
