"""Tests for source discovery."""

import pytest

from spanmut.exceptions import ConfigError, SourceReadError
from spanmut.scanner import count_lines, is_within_line_limit, iter_source_files, read_source


def test_yields_matching_extensions_in_sorted_order(temp_dir):
    (temp_dir / "sub").mkdir()
    for name in ["b.rs", "a.rs", "sub/c.rs", "readme.md"]:
        (temp_dir / name).write_text("fn x() {}\n")

    found = [p.relative_to(temp_dir).as_posix() for p in iter_source_files(temp_dir, [".rs"])]
    assert found == ["a.rs", "b.rs", "sub/c.rs"]


def test_ignore_patterns_prune_directories_and_files(temp_dir):
    (temp_dir / "target").mkdir()
    (temp_dir / "target" / "gen.rs").write_text("")
    (temp_dir / "skip_me.rs").write_text("")
    (temp_dir / "keep.rs").write_text("")

    found = [p.name for p in iter_source_files(temp_dir, [".rs"], ["target/", "skip_*.rs"])]
    assert found == ["keep.rs"]


def test_invalid_extension_filter(temp_dir):
    with pytest.raises(ConfigError):
        list(iter_source_files(temp_dir, ["rs"]))


def test_read_source_keeps_line_endings(temp_dir):
    path = temp_dir / "crlf.rs"
    path.write_bytes(b"fn a() {}\r\nfn b() {}\r\n")
    assert read_source(path) == "fn a() {}\r\nfn b() {}\r\n"


def test_read_source_rejects_invalid_utf8(temp_dir):
    path = temp_dir / "bad.rs"
    path.write_bytes(b"fn \xff() {}")
    with pytest.raises(SourceReadError):
        read_source(path)


def test_read_source_missing_file(temp_dir):
    with pytest.raises(SourceReadError):
        read_source(temp_dir / "missing.rs")


def test_line_limit_is_exclusive():
    text = "a\nb\nc\n"
    assert count_lines(text) == 3
    assert is_within_line_limit(text, 4)
    assert not is_within_line_limit(text, 3)
