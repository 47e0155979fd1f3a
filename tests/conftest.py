import sys
from pathlib import Path
import importlib
import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


@pytest.fixture()
def m():
    """Lazily import the main module for tests to avoid module-level import."""
    return importlib.import_module("main")


@pytest.fixture()
def codec():
    """Provide a fresh codec facade."""
    from codec import HuffmanCodec
    return HuffmanCodec()


SAMPLE_TEXTS = [
    "a",
    "aaaa",
    "ab",
    "aaabbc",
    "abracadabra",
    "The quick brown fox jumps over the lazy dog.",
    "mississippi river\n\ttabs and spaces  ",
    "ünïcødé ✓ ✓ ✓",
    "".join(chr(c) for c in range(32, 127)) * 3,
]


@pytest.fixture(params=SAMPLE_TEXTS)
def sample_text(request):
    """Parametrized non-empty input strings of varied alphabets."""
    return request.param


@pytest.fixture()
def script_input():
    """Return a factory for an ``input``-like callable fed from a list.

    Raises ``EOFError`` once the scripted answers run out.
    """
    def factory(answers):
        prompts = []
        pending = list(answers)

        def _input(prompt=""):
            prompts.append(prompt)
            if not pending:
                raise EOFError
            return pending.pop(0)

        _input.prompts = prompts
        return _input

    return factory
