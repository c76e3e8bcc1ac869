import subprocess

import pytest

import quickpatch.source as source
from quickpatch import DiffSourceError, cleanup_diff_text, parse_hunks, read_diff


def test_read_diff_keeps_text_verbatim(tmp_path):
    p = tmp_path / "fix.diff"
    p.write_bytes(b"@@\r\n-a\r\n+b\r\n")
    assert read_diff(str(p)) == "@@\r\n-a\r\n+b\r\n"


def test_read_diff_missing_file(tmp_path):
    with pytest.raises(DiffSourceError, match="not found"):
        read_diff(str(tmp_path / "nope.diff"))


def test_read_diff_bad_encoding(tmp_path):
    p = tmp_path / "bin.diff"
    p.write_bytes(b"-\xff\xfe\n")
    with pytest.raises(DiffSourceError, match="not valid utf-8"):
        read_diff(str(p))


def test_cleanup_strips_wrapping_fence():
    text = "```diff\n a\n-b\n+c\n```"
    assert cleanup_diff_text(text) == " a\n-b\n+c\n"


def test_cleanup_strips_think_blocks():
    text = "<think>which line?\n-maybe this</think>\n-old\n+new\n"
    cleaned = cleanup_diff_text(text)
    assert "maybe" not in cleaned
    (hunk,) = parse_hunks(cleaned)
    assert [ln.text for ln in hunk.before] == ["old"]


def test_cleanup_leaves_plain_diff_alone():
    assert cleanup_diff_text("-a\n+b\n") == "-a\n+b\n"
    assert cleanup_diff_text("") == ""


def test_paste_without_clipboard_tool(monkeypatch):
    monkeypatch.setattr(source, "_which", lambda cmd: False)
    assert source.paste_from_clipboard() is None


def test_paste_uses_first_available_tool(monkeypatch):
    seen = []

    def fake_run(argv, **kwargs):
        seen.append(argv)
        return subprocess.CompletedProcess(argv, 0, stdout=b"-a\n+b\n", stderr=b"")

    monkeypatch.setattr(source, "_which", lambda cmd: cmd == "xclip")
    monkeypatch.setattr(source.subprocess, "run", fake_run)
    assert source.paste_from_clipboard() == "-a\n+b\n"
    assert seen == [["xclip", "-selection", "clipboard", "-o"]]


def test_paste_tool_failure_returns_none(monkeypatch):
    monkeypatch.setattr(source, "_which", lambda cmd: cmd == "pbpaste")
    monkeypatch.setattr(
        source.subprocess,
        "run",
        lambda argv, **kw: subprocess.CompletedProcess(argv, 1, stdout=b"", stderr=b"boom"),
    )
    assert source.paste_from_clipboard() is None
