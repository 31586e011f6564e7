"""Tests for YAML config loading infrastructure."""

from pathlib import Path

import pytest

from quiz_match.config.infrastructure.errors import (
    ConfigLoadError,
    ConfigValidationError,
    MissingEnvVarsError,
)
from quiz_match.config.infrastructure.yaml_loader import YamlConfigLoader
from tests.config.fake_observer import FakeConfigObserver

_VALID_CONFIG = """\
name: friday-quiz
catalog:
  path: questions.yaml
answers:
  path: ${QUIZ_ANSWERS_PATH}
  subject_key: user
"""


def _write(tmp_path: Path, content: str) -> Path:
    path = tmp_path / "quiz.yaml"
    path.write_text(content, encoding="utf-8")
    return path


class TestValidConfigLoading:
    """A valid YAML config loads with interpolated, anchored paths."""

    def test_loads_name_and_answer_keys(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("QUIZ_ANSWERS_PATH", "/data/answers.jsonl")
        observer = FakeConfigObserver()

        cfg = YamlConfigLoader(observer=observer).load(_write(tmp_path, _VALID_CONFIG))

        assert cfg.name == "friday-quiz"
        assert cfg.answers.path == Path("/data/answers.jsonl")
        assert cfg.answers.subject_key == "user"
        assert cfg.answers.question_key == "question_id"
        assert cfg.answers.value_key == "value"
        assert observer.loaded == ["friday-quiz"]

    def test_relative_paths_resolve_against_config_directory(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("QUIZ_ANSWERS_PATH", "answers.jsonl")

        cfg = YamlConfigLoader(observer=FakeConfigObserver()).load(
            _write(tmp_path, _VALID_CONFIG)
        )

        assert cfg.answers.path == tmp_path / "answers.jsonl"
        assert cfg.catalog.path == tmp_path / "questions.yaml"

    def test_omitted_catalog_selects_builtin(self, tmp_path: Path) -> None:
        observer = FakeConfigObserver()

        cfg = YamlConfigLoader(observer=observer).load(
            _write(tmp_path, "name: q\nanswers:\n  path: a.jsonl\n")
        )

        assert cfg.catalog.path is None
        assert observer.builtin_catalog_selected == 1


class TestInvalidConfig:
    """Invalid configs raise QuizMatchError subclasses."""

    def test_missing_file_raises_config_load_error(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigLoadError):
            YamlConfigLoader(observer=FakeConfigObserver()).load(tmp_path / "none.yaml")

    def test_invalid_yaml_raises_config_load_error(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigLoadError, match="invalid YAML"):
            YamlConfigLoader(observer=FakeConfigObserver()).load(
                _write(tmp_path, "name: [unclosed\n")
            )

    def test_all_missing_env_vars_are_reported(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.delenv("QUIZ_A", raising=False)
        monkeypatch.delenv("QUIZ_B", raising=False)
        content = "name: ${QUIZ_A}\nanswers:\n  path: ${QUIZ_B}\n"

        with pytest.raises(MissingEnvVarsError) as exc_info:
            YamlConfigLoader(observer=FakeConfigObserver()).load(
                _write(tmp_path, content)
            )

        assert exc_info.value.missing_vars == ["QUIZ_A", "QUIZ_B"]

    def test_missing_answers_section_raises(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigValidationError):
            YamlConfigLoader(observer=FakeConfigObserver()).load(
                _write(tmp_path, "name: q\n")
            )

    def test_colliding_answer_keys_raise(self, tmp_path: Path) -> None:
        content = "name: q\nanswers:\n  path: a.jsonl\n  value_key: question_id\n"

        with pytest.raises(ConfigValidationError, match="distinct"):
            YamlConfigLoader(observer=FakeConfigObserver()).load(
                _write(tmp_path, content)
            )

    def test_non_mapping_document_raises(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigValidationError):
            YamlConfigLoader(observer=FakeConfigObserver()).load(
                _write(tmp_path, "- a\n- b\n")
            )
