"""Recursive ${ENV_VAR} interpolation for raw config data."""

import os
import re

_ENV_VAR_PATTERN = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*)\}")

type RawValue = (
    str | int | float | bool | None | list["RawValue"] | dict[str, "RawValue"]
)


def collect_missing_vars(data: RawValue) -> list[str]:
    """Return the names of every referenced env var that is not set, in first-seen order."""
    missing: list[str] = []
    for text in _strings(data):
        for name in _ENV_VAR_PATTERN.findall(text):
            if name not in os.environ and name not in missing:
                missing.append(name)
    return missing


def _strings(data: RawValue) -> list[str]:
    if isinstance(data, str):
        return [data]
    if isinstance(data, list):
        return [text for item in data for text in _strings(item)]
    if isinstance(data, dict):
        return [text for value in data.values() for text in _strings(value)]
    return []


def interpolate(data: RawValue) -> RawValue:
    """
    Return a copy of data with every ${ENV_VAR} replaced by its runtime value.

    Call `collect_missing_vars` first; an unset variable raises KeyError here.
    """
    if isinstance(data, str):
        return _ENV_VAR_PATTERN.sub(lambda m: os.environ[m.group(1)], data)
    if isinstance(data, list):
        return [interpolate(item) for item in data]
    if isinstance(data, dict):
        return {key: interpolate(value) for key, value in data.items()}
    return data
