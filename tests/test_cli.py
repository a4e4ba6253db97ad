import json
from pathlib import Path

from typer.testing import CliRunner

from spanmut.main import app

runner = CliRunner()
SEEDS_DIR = Path(__file__).parent / "test_files" / "seeds"


def test_version():
    result = runner.invoke(app, ["version"])
    assert result.exit_code == 0
    assert "spanmut v" in result.stdout


def test_mutate_json_summary(tmp_path):
    result = runner.invoke(
        app,
        ["mutate", "-i", str(SEEDS_DIR), "-o", str(tmp_path), "-m", "0", "--json"],
    )
    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["mode"] == 0
    assert payload["processed_files"] == 2
    assert payload["total_mutants"] == len(list(tmp_path.iterdir()))
    assert (tmp_path / "mut_geometry.rs_1.rs").exists()


def test_mutate_prints_diagnostics(tmp_path):
    result = runner.invoke(
        app,
        ["mutate", "-i", str(SEEDS_DIR), "-o", str(tmp_path), "-m", "1", "-c", "2", "--seed", "4", "--no-progress"],
    )
    assert result.exit_code == 0
    lines = result.stdout.splitlines()
    assert any(line.startswith("[1] (") and " -> " in line for line in lines)
    assert "Number of generated files of geometry.rs: 2" in lines
    assert "Number of generated files of shapes.rs: 2" in lines


def test_mutate_invalid_mode_exits_with_config_error(tmp_path):
    result = runner.invoke(app, ["mutate", "-i", str(SEEDS_DIR), "-o", str(tmp_path), "-m", "9", "--json"])
    assert result.exit_code == 2
    payload = json.loads(result.stdout)
    assert payload["error"] == "InvalidModeError"


def test_mutate_splice_without_count_is_rejected(tmp_path):
    result = runner.invoke(app, ["mutate", "-i", str(SEEDS_DIR), "-o", str(tmp_path), "-m", "2", "--json"])
    assert result.exit_code == 2
    assert json.loads(result.stdout)["error"] == "MutationCountError"
    assert list(tmp_path.iterdir()) == []


def test_harvest_json():
    result = runner.invoke(app, ["harvest", str(SEEDS_DIR / "geometry.rs"), "--json"])
    assert result.exit_code == 0
    spans = json.loads(result.stdout)
    assert spans[0]["kind"] == "struct_item"
    assert {"kind", "start_byte", "end_byte", "start_point", "end_point", "text"} <= set(spans[0])
    assert "line_comment" not in {s["kind"] for s in spans}


def test_corpus_json():
    result = runner.invoke(app, ["corpus", str(SEEDS_DIR), "--json"])
    assert result.exit_code == 0
    corpus = json.loads(result.stdout)
    assert corpus["identifier"][0] == ""
    assert "manhattan" in corpus["identifier"]
    assert "area" in corpus["identifier"]


def test_corpus_table():
    result = runner.invoke(app, ["corpus", str(SEEDS_DIR)])
    assert result.exit_code == 0
    assert "kinds" in result.stdout
