"""Grammar configuration for the record scanner."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

from ..utils.logging_config import get_logger

logger = get_logger(__name__)

REQUIRED_KEYS: tuple[str, ...] = ("delimiter", "hasHeaders", "separator", "terminator")


class ConfigError(Exception):
    """Raised when a grammar configuration cannot be loaded or is inconsistent."""


@dataclass(frozen=True)
class GrammarConfig:
    """The three structural symbols of a record file plus the header flag."""

    delimiter: str
    separator: str
    terminator: str
    has_headers: bool = True

    def __post_init__(self) -> None:
        symbols = {
            "delimiter": self.delimiter,
            "separator": self.separator,
            "terminator": self.terminator,
        }
        for key, value in symbols.items():
            if not isinstance(value, str) or len(value) != 1:
                raise ConfigError(f"Grammar symbol '{key}' must be a single character, got {value!r}.")
            # Terminators are usually control characters such as "\n".
            if not value.isprintable() and not value.isspace():
                raise ConfigError(f"Grammar symbol '{key}' must be a printable character, got {value!r}.")

        seen: dict[str, str] = {}
        for key, value in symbols.items():
            if value in seen:
                raise ConfigError(
                    f"Grammar symbols '{seen[value]}' and '{key}' must differ, both are {value!r}."
                )
            seen[value] = key

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any], source: str | Path = "<memory>") -> GrammarConfig:
        """Build a config from a decoded configuration document.

        Keys are checked in a fixed order so the first missing one is reported.
        """
        for key in REQUIRED_KEYS:
            # An empty symbol counts as absent; `false` is a real hasHeaders value.
            if data.get(key) is None or data.get(key) == "":
                raise ConfigError(f"Configuration file '{source}' has no '{key}' parameter.")

        has_headers = data["hasHeaders"]
        if not isinstance(has_headers, bool):
            raise ConfigError(
                f"Configuration file '{source}' has an invalid 'hasHeaders' parameter: expected true or false."
            )

        return cls(
            delimiter=data["delimiter"],
            separator=data["separator"],
            terminator=data["terminator"],
            has_headers=has_headers,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "delimiter": self.delimiter,
            "hasHeaders": self.has_headers,
            "separator": self.separator,
            "terminator": self.terminator,
        }


DEFAULT_GRAMMAR = GrammarConfig(delimiter='"', separator=",", terminator="\n", has_headers=True)


def load_grammar_config(path: str | Path) -> GrammarConfig:
    """Read and shape-check a JSON grammar configuration file."""
    config_path = Path(path)
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError as exc:
        raise ConfigError(f"Configuration file '{config_path}' not found.") from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(str(exc)) from exc
    except UnicodeDecodeError as exc:
        raise ConfigError(f"Configuration file '{config_path}' is not valid UTF-8 text: {exc.reason}.") from exc

    if not isinstance(data, dict):
        raise ConfigError(f"Configuration file '{config_path}' must contain a JSON object.")

    config = GrammarConfig.from_mapping(data, source=config_path)
    logger.debug("grammar_loaded", path=str(config_path), **config.to_dict())
    return config
