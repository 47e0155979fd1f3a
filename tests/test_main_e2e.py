def test_encode_command_prints_all_steps(m, capsys):
    assert m.main(["encode", "aaabbc"]) == 0
    out = capsys.readouterr().out
    assert "Encoded String: 000111110" in out
    assert "Decoded String: aaabbc" in out
    assert "matches the original" in out
    assert "Original Size (in bits): 48" in out
    assert "Encoded Size (in bits): 9" in out
    assert "Packed Size (in bytes): 2" in out
    assert "Compression Ratio: 18.75%" in out


def test_encode_quiet(m, capsys):
    assert m.main(["e", "ab", "-q"]) == 0
    assert capsys.readouterr().out.strip() == "01"


def test_encode_from_file(m, capsys, tmp_path):
    p = tmp_path / "text.txt"
    p.write_text("aaaa", encoding="utf-8")
    assert m.main(["encode", "-f", str(p), "--quiet"]) == 0
    assert capsys.readouterr().out.strip() == "0000"


def test_encode_missing_file(m, capsys, tmp_path):
    assert m.main(["encode", "-f", str(tmp_path / "nope.txt")]) == 1
    assert "[!]" in capsys.readouterr().out


def test_encode_empty_text_reports_error(m, capsys):
    assert m.main(["encode", ""]) == 1
    assert "[!]" in capsys.readouterr().out


def test_decode_command(m, capsys):
    assert m.main(["decode", "000111110", "-s", "aaabbc"]) == 0
    assert capsys.readouterr().out.strip() == "aaabbc"


def test_decode_command_malformed(m, capsys):
    assert m.main(["decode", "0", "-s", "abcd"]) == 1
    assert "[!]" in capsys.readouterr().out


def test_interactive_menu_flow(m, capsys, script_input):
    fake_input = script_input(["x", "1", "ab", "2"])
    assert m.interactive(fake_input) == 0
    out = capsys.readouterr().out
    assert "Invalid input" in out
    assert "Encoded String: 01" in out
    assert "Goodbye" in out
    assert fake_input.prompts.count("\nEnter a String: ") == 1


def test_interactive_stops_on_eof(m, capsys, script_input):
    assert m.interactive(script_input([])) == 0
    assert "Welcome to Huffman Coding" in capsys.readouterr().out
