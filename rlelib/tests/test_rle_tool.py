import io
import json

import rle_tool


def test_compress_file_to_derived_name(text_file, capsys):
    assert rle_tool.main(["compress", str(text_file)]) == 0
    out = text_file.with_name("notes.txt.rle")
    assert out.read_bytes() == b"4a3b2c1a1\r1\n2x1\n"
    assert "compression ratio:" in capsys.readouterr().err

def test_decompress_stdin_to_stdout(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3a2b"))
    assert rle_tool.main(["decompress", "-"]) == 0
    captured = capsys.readouterr()
    assert captured.out == "aaabb"
    assert "expansion ratio: 25.00% (4 → 5 chars)" in captured.err

def test_json_output(text_file, capsys):
    assert rle_tool.main(["compress", str(text_file), "--json", "--unit", "bytes"]) == 0
    rec = json.loads(capsys.readouterr().out)
    assert list(rec) == ["original_size", "compressed_size", "compressed_content", "compression_ratio"]
    assert rec["compressed_content"] == "4a3b2c1a1\r1\n2x1\n"
    # --json does not write a file
    assert not text_file.with_name("notes.txt.rle").exists()

def test_explicit_output_path(tmp_path, capsys):
    src = tmp_path / "in.rle"
    src.write_text("5z", encoding="utf-8")
    dst = tmp_path / "out.txt"
    assert rle_tool.main(["-l", "DEBUG", "decompress", str(src), "-o", str(dst)]) == 0
    assert dst.read_text(encoding="utf-8") == "zzzzz"

def test_missing_input_exit_code(tmp_path, capsys):
    assert rle_tool.main(["compress", str(tmp_path / "nope.txt")]) == 2
    assert "error:" in capsys.readouterr().err

def test_strict_and_max_output_exit_codes(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3a b"))
    assert rle_tool.main(["decompress", "-", "--strict"]) == 1
    monkeypatch.setattr("sys.stdin", io.StringIO("3a b"))
    assert rle_tool.main(["decompress", "-"]) == 0
    assert capsys.readouterr().out == "aaa"
    monkeypatch.setattr("sys.stdin", io.StringIO("50a"))
    assert rle_tool.main(["decompress", "-", "--max-output", "10"]) == 1
    assert rle_tool.main(["decompress", "-", "--max-output", "-1"]) == 2

def _byte_stdin(data: bytes) -> io.TextIOWrapper:
    return io.TextIOWrapper(io.BytesIO(data), encoding="utf-8")

def test_stdin_stdout_keep_crlf(monkeypatch, capsysbinary):
    monkeypatch.setattr("sys.stdin", _byte_stdin(b"aa\r\nb"))
    assert rle_tool.main(["compress", "-"]) == 0
    captured = capsysbinary.readouterr()
    assert captured.out == b"2a1\r1\n1b"
    # same sizes as when compressing a file
    assert "(5 → 8 chars)" in captured.err.decode("utf-8")

    monkeypatch.setattr("sys.stdin", _byte_stdin(b"2a1\r1\n1b"))
    assert rle_tool.main(["decompress", "-", "-o", "-"]) == 0
    assert capsysbinary.readouterr().out == b"aa\r\nb"
