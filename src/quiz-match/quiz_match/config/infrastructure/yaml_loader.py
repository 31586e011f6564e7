"""YAML config loader — parses, interpolates env vars, validates, and emits observer events."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from quiz_match.config.domain.config import QuizConfig
from quiz_match.config.domain.observer import ConfigObserver
from quiz_match.config.infrastructure.env_interpolation import (
    collect_missing_vars,
    interpolate,
)
from quiz_match.config.infrastructure.errors import (
    ConfigLoadError,
    ConfigValidationError,
    MissingEnvVarsError,
)


class YamlConfigLoader:
    """Loads, interpolates, validates, and returns a QuizConfig from a YAML file."""

    def __init__(self, observer: ConfigObserver) -> None:
        self._observer = observer

    def load(self, path: Path) -> QuizConfig:
        """
        Load, interpolate, validate, and return a QuizConfig from a YAML file.

        Relative catalog and answer paths are resolved against the config
        file's directory.

        Raises:
            ConfigLoadError: if the file is missing or is not valid YAML.
            MissingEnvVarsError: if any ${ENV_VAR} references are unset (all collected first).
            ConfigValidationError: if the schema is violated or answer keys collide.
        """
        raw = _parse_yaml(path=path)
        missing = collect_missing_vars(raw)
        if missing:
            raise MissingEnvVarsError(missing)
        cfg = _build_config(resolved=interpolate(raw))
        _check_distinct_answer_keys(cfg=cfg)
        cfg = _anchor_paths(cfg=cfg, base_dir=path.parent)
        if cfg.catalog.path is None:
            self._observer.config_builtin_catalog_selected()
        self._observer.config_loaded(name=cfg.name)
        return cfg


def _parse_yaml(path: Path) -> Any:
    try:
        with path.open("r", encoding="utf-8") as fh:
            return yaml.safe_load(fh)
    except FileNotFoundError as exc:
        raise ConfigLoadError(path=path) from exc
    except yaml.YAMLError as exc:
        raise ConfigLoadError(path=path, reason="invalid YAML") from exc


def _build_config(resolved: Any) -> QuizConfig:
    if not isinstance(resolved, dict):
        raise ConfigValidationError("top-level document must be a mapping")
    try:
        return QuizConfig.model_validate(resolved)
    except ValidationError as exc:
        raise ConfigValidationError(str(exc)) from exc


def _check_distinct_answer_keys(cfg: QuizConfig) -> None:
    answers = cfg.answers
    keys = [answers.subject_key, answers.question_key, answers.value_key]
    if len(set(keys)) != len(keys):
        raise ConfigValidationError(
            f"answers keys must be distinct, got subject_key={answers.subject_key!r},"
            f" question_key={answers.question_key!r}, value_key={answers.value_key!r}"
        )


def _anchor_paths(cfg: QuizConfig, base_dir: Path) -> QuizConfig:
    """Return cfg with relative file paths resolved against base_dir."""
    answers = cfg.answers.model_copy(
        update={"path": _anchor(path=cfg.answers.path, base_dir=base_dir)}
    )
    catalog = cfg.catalog
    if catalog.path is not None:
        catalog = catalog.model_copy(
            update={"path": _anchor(path=catalog.path, base_dir=base_dir)}
        )
    return cfg.model_copy(update={"answers": answers, "catalog": catalog})


def _anchor(path: Path, base_dir: Path) -> Path:
    return path if path.is_absolute() else base_dir / path
