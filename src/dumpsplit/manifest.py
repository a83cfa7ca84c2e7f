from __future__ import annotations

import pathlib
import typing as t

import yaml

try:
    import tomllib as _toml
except ModuleNotFoundError:  # Python < 3.11
    import tomli as _toml


def load_toml(p: pathlib.Path) -> dict[str, t.Any]:
    with p.open("rb") as f:
        return _toml.load(f)


def load_yaml(p: pathlib.Path) -> dict[str, t.Any]:
    with p.open("r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def load_manifest(p: pathlib.Path) -> dict[str, t.Any]:
    """Read a TOML or YAML settings file; the suffix decides which."""
    if not p.exists():
        raise FileNotFoundError(p)
    return (load_toml if p.suffix.lower() == ".toml" else load_yaml)(p)
