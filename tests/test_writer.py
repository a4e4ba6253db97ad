"""Tests for the mutant writer."""

import pytest

from spanmut.mutation import mutant_file_name, write_mutants
from spanmut.schemas import Mutant, SpanRecord


def _mutant(index, text):
    span = SpanRecord(kind="identifier", start_byte=0, end_byte=1, start_point=(0, 0), end_point=(0, 1))
    return Mutant(index=index, span=span, original="a", replacement="b", replacement_kind="identifier", text=text)


def test_file_name_keeps_original_name_and_extension():
    assert mutant_file_name("lib.rs", 3) == "mut_lib.rs_3.rs"
    assert mutant_file_name("main.py", 1) == "mut_main.py_1.py"


def test_file_name_index_is_one_based():
    with pytest.raises(ValueError):
        mutant_file_name("lib.rs", 0)


def test_writes_numbered_files_and_creates_directory(temp_dir):
    out = temp_dir / "nested" / "out"
    written = write_mutants(out, temp_dir / "lib.rs", [_mutant(1, "fn b() {}"), _mutant(2, "fn c() {}")])

    assert [p.name for p in written] == ["mut_lib.rs_1.rs", "mut_lib.rs_2.rs"]
    assert (out / "mut_lib.rs_2.rs").read_text() == "fn c() {}"


def test_existing_files_are_overwritten(temp_dir):
    (temp_dir / "mut_lib.rs_1.rs").write_text("stale")
    write_mutants(temp_dir, temp_dir / "lib.rs", [_mutant(1, "fresh")])
    assert (temp_dir / "mut_lib.rs_1.rs").read_text() == "fresh"


def test_no_mutants_writes_nothing(temp_dir):
    out = temp_dir / "never"
    assert write_mutants(out, temp_dir / "lib.rs", []) == []
    assert not out.exists()


def test_text_is_written_byte_exact(temp_dir):
    write_mutants(temp_dir, temp_dir / "lib.rs", [_mutant(1, "fn é() {}\r\n")])
    assert (temp_dir / "mut_lib.rs_1.rs").read_bytes() == "fn é() {}\r\n".encode("utf-8")
