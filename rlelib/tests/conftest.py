from pathlib import Path
import pytest

from rlelib.service import CodecOptions

# Shared inputs.  E.g.
#
#   def test_something(text_file):
#       assert text_file.read_bytes().startswith(b"aaaa")
#
SAMPLE_TEXT = "aaaabbbcca\r\nxx\n"

@pytest.fixture
def sample_text() -> str:
    return SAMPLE_TEXT

@pytest.fixture
def bytes_options() -> CodecOptions:
    return CodecOptions(unit="bytes")

@pytest.fixture
def text_file(tmp_path: Path, sample_text: str) -> Path:
    p = tmp_path / "notes.txt"
    p.write_bytes(sample_text.encode("utf-8"))
    return p
