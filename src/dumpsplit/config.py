from __future__ import annotations

import codecs
import pathlib
import typing as t

import yaml

from dumpsplit.manifest import load_manifest
from dumpsplit.remarks import DEFAULT_MARKER
from dumpsplit.splitter import DEFAULT_DELIMITER

_DEFAULT_PATH = pathlib.Path("dumpsplit.config.yml")


class ConfigError(RuntimeError):
    """Raised for any user‑visible configuration problem."""


class Profile:
    """
    A thin value‑object holding how one family of dumps is cut up.
    Nothing here reads a dump.
    """

    def __init__(self, name: str, d: dict[str, t.Any] | None = None) -> None:
        d = d or {}
        self.name: str = name
        self.delimiter: str = str(d.get("delimiter", DEFAULT_DELIMITER))
        self.remark_marker: str = str(d.get("remark_marker", DEFAULT_MARKER))
        self.encoding: str = d.get("encoding", "utf-8")

        # Turn a dropped unterminated literal into a hard failure in the CLI
        self.strict: bool = bool(d.get("strict", False))

        if len(self.delimiter) != 1:
            raise ConfigError(
                f"Profile {name!r}: delimiter must be a single character, got {self.delimiter!r}"
            )
        if not self.remark_marker:
            raise ConfigError(f"Profile {name!r}: remark_marker must not be empty")
        try:
            codecs.lookup(self.encoding)
        except (LookupError, TypeError) as exc:
            raise ConfigError(f"Profile {name!r}: unknown encoding {self.encoding!r}") from exc

    def __repr__(self) -> str:
        return f"Profile({self.name!r}, delimiter={self.delimiter!r})"


def load(path: pathlib.Path | str | None = None, profile: str | None = None) -> Profile:
    """
    Parse *path* (or the default YAML) and return a :class:`Profile`.

    Without an explicit *path* a missing default file is not an error: the
    built‑in defaults are used.
    """
    cfg_file = pathlib.Path(path) if path else _DEFAULT_PATH
    if not cfg_file.exists():
        if path:
            raise ConfigError(f"Config file {cfg_file} not found.")
        if profile:
            raise ConfigError(f"Profile {profile!r} requested but no {cfg_file} present")
        return Profile("default")

    try:
        raw = load_manifest(cfg_file)
    except (yaml.YAMLError, ValueError) as exc:
        raise ConfigError(f"Cannot parse {cfg_file}: {exc}") from exc
    if not isinstance(raw, dict):
        raise ConfigError(f"{cfg_file} must contain a mapping at top level")

    profiles = raw.get("profiles") or {}
    if not isinstance(profiles, dict):
        raise ConfigError(f"`profiles` in {cfg_file} must be a mapping")
    name = profile or raw.get("default_profile")
    if not name:
        if profiles:
            raise ConfigError("No profile specified and no default_profile in config")
        return Profile("default")

    if not isinstance(name, str):
        raise ConfigError(f"Profile name must be a string, got {name!r}")
    if name not in profiles:
        raise ConfigError(f"Profile {name!r} not found in config")
    data = profiles[name]
    if data is not None and not isinstance(data, dict):
        raise ConfigError(f"Profile {name!r} must be a mapping")
    return Profile(name, data)
