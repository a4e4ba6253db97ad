"""Tests for mutation settings and validation."""

import pytest

from spanmut.exceptions import ConfigError, InvalidModeError, MutationCountError, UnsupportedLanguageError
from spanmut.mutation import MutationMode, MutationSettings, validate_count, validate_mode


@pytest.mark.parametrize("raw", [4, -1, "x", True, None])
def test_invalid_modes(raw):
    with pytest.raises(InvalidModeError):
        validate_mode(raw)


def test_valid_modes():
    assert validate_mode(0) is MutationMode.DELETE_ONLY
    assert validate_mode(3) is MutationMode.SPLICE_RANDOM_KIND
    assert MutationMode.SPLICE.uses_shared_corpus
    assert not MutationMode.SELF_SPLICE.uses_shared_corpus


def test_zero_count_only_allowed_without_shared_corpus():
    assert validate_count(MutationMode.DELETE_ONLY, 0) == 0
    assert validate_count(MutationMode.SELF_SPLICE, 0) == 0
    for mode in (MutationMode.SPLICE, MutationMode.SPLICE_RANDOM_KIND):
        with pytest.raises(MutationCountError):
            validate_count(mode, 0)


def test_negative_count():
    with pytest.raises(MutationCountError):
        validate_count(MutationMode.DELETE_ONLY, -3)


def test_env_defaults(monkeypatch, temp_dir):
    monkeypatch.setenv("SPANMUT_MAX_LINES", "42")
    monkeypatch.setenv("SPANMUT_STALL_LIMIT", "7")
    monkeypatch.setenv("SPANMUT_SEED", "99")
    monkeypatch.setenv("SPANMUT_LANGUAGE", "python")
    settings = MutationSettings(input_dir=temp_dir)
    assert settings.max_lines == 42
    assert settings.stall_limit == 7
    assert settings.seed == 99
    assert settings.language == "python"


def test_env_garbage_falls_back_to_default(monkeypatch, temp_dir):
    monkeypatch.setenv("SPANMUT_MAX_LINES", "lots")
    monkeypatch.delenv("SPANMUT_SEED", raising=False)
    settings = MutationSettings(input_dir=temp_dir)
    assert settings.max_lines == 500
    assert settings.seed is None


def test_validate_normalises_mode(temp_dir):
    settings = MutationSettings(input_dir=temp_dir, mode=1).validate()
    assert settings.mode is MutationMode.SELF_SPLICE
    assert settings.to_dict()["mode"] == 1


def test_validate_rejects_missing_input_dir(temp_dir):
    with pytest.raises(ConfigError):
        MutationSettings(input_dir=temp_dir / "nope").validate()


def test_validate_rejects_unknown_language(temp_dir):
    with pytest.raises(UnsupportedLanguageError):
        MutationSettings(input_dir=temp_dir, language="cobol").validate()


def test_validate_rejects_negative_stall_limit(temp_dir):
    with pytest.raises(ConfigError):
        MutationSettings(input_dir=temp_dir, stall_limit=-1).validate()
