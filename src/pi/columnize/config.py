"""Formatting configuration.

A :class:`Config` is immutable. Defaults are layered with
:func:`merge_config`, where every set field of the override replaces the
base field. A bare ``Config()`` has every field unset; :func:`default_config`
is the fully populated base that the formatting entry points merge over.
Configs can also be read from JSON-compatible dicts (camelCase keys) and from
the environment.
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Literal, Union

from pi.columnize.errors import ConfigError
from pi.columnize.width import Measure

AUTO = "auto"
UNCONSTRAINED = "unconstrained"

OutputWidth = Union[int, Literal["auto", "unconstrained"]]

OUTPUT_WIDTH_ENV = "PI_COLUMNIZE_OUTPUT_WIDTH"


@dataclass(frozen=True)
class Config:
    """Parameters that control how rows are split, sized and joined."""

    # None leaves a field unset so that merging keeps the base value.
    # String by which input lines are split into fields.
    delim: str | None = None
    # String inserted between output columns.
    glue: str | None = None
    # String prepended to every output line.
    prefix: str | None = None
    # Replacement for fields that are blank after trimming.
    empty: str | None = None
    # Per-column maximum widths; 0 = unconstrained, negative = total width.
    max_widths: tuple[int, ...] = ()
    # Positive int, "auto" (terminal width) or "unconstrained"; 0 = unset.
    output_width: OutputWidth = 0
    # Visible-length strategy; None = visible_width.
    measure: Measure | None = None

    def __post_init__(self) -> None:
        # Accept lists for convenience while keeping the dataclass hashable.
        if not isinstance(self.max_widths, tuple):
            object.__setattr__(self, "max_widths", tuple(self.max_widths))

    @property
    def has_output_cap(self) -> bool:
        """True if an explicit or terminal-derived output width applies."""
        if self.output_width == AUTO:
            return True
        return isinstance(self.output_width, int) and self.output_width > 0


def default_config() -> Config:
    """Return a new config with every field set to its default."""
    return Config(delim="|", glue="  ", prefix="", empty="")


def resolve_config(config: Config | None) -> Config:
    """Fill the unset fields of *config* from :func:`default_config`."""
    return merge_config(default_config(), config)


def merge_config(a: Config | None, b: Config | None) -> Config:
    """Merge *b* over *a* and return the result.

    Values from *b* take precedence when they are set: not ``None`` (strings
    and ``measure``), non-empty (``max_widths``) or non-zero
    (``output_width``). An explicit empty string is a set value, so
    ``Config(delim="")`` turns splitting off.
    """
    if a is None:
        a = default_config()
    if b is None:
        return replace(a)

    changes: dict[str, Any] = {}
    if b.delim is not None:
        changes["delim"] = b.delim
    if b.glue is not None:
        changes["glue"] = b.glue
    if b.prefix is not None:
        changes["prefix"] = b.prefix
    if b.empty is not None:
        changes["empty"] = b.empty
    if b.max_widths:
        changes["max_widths"] = b.max_widths
    if b.output_width:
        changes["output_width"] = b.output_width
    if b.measure is not None:
        changes["measure"] = b.measure
    return replace(a, **changes)


# ---------------------------------------------------------------------------
# Serialization
# ---------------------------------------------------------------------------


def parse_output_width(value: Any) -> OutputWidth:
    """Validate an output width given as an int or one of the keywords."""
    if isinstance(value, bool):
        raise ConfigError(f"invalid output width: {value!r}")
    if isinstance(value, int):
        if value < 0:
            raise ConfigError(f"output width must not be negative: {value}")
        return value
    if isinstance(value, str):
        text = value.strip().lower()
        if text in (AUTO, UNCONSTRAINED):
            return text  # type: ignore[return-value]
        if text.isdigit():
            return int(text)
    raise ConfigError(f"invalid output width: {value!r}")


def _str_field(data: dict[str, Any], key: str) -> str | None:
    value = data.get(key)
    if value is not None and not isinstance(value, str):
        raise ConfigError(f"{key} must be a string, got {type(value).__name__}")
    return value


def config_from_dict(data: dict[str, Any]) -> Config:
    """Deserialize a Config from a JSON-compatible dict."""
    if not isinstance(data, dict):
        raise ConfigError(f"config must be an object, got {type(data).__name__}")

    max_widths = data.get("maxWidths", [])
    if not isinstance(max_widths, list) or not all(
        isinstance(w, int) and not isinstance(w, bool) for w in max_widths
    ):
        raise ConfigError("maxWidths must be a list of integers")

    return Config(
        delim=_str_field(data, "delim"),
        glue=_str_field(data, "glue"),
        prefix=_str_field(data, "prefix"),
        empty=_str_field(data, "empty"),
        max_widths=tuple(max_widths),
        output_width=parse_output_width(data.get("outputWidth", 0)),
    )


def config_to_dict(config: Config) -> dict[str, Any]:
    """Serialize a Config to a JSON-compatible dict, omitting unset strings."""
    data: dict[str, Any] = {
        key: value
        for key, value in (
            ("delim", config.delim),
            ("glue", config.glue),
            ("prefix", config.prefix),
            ("empty", config.empty),
        )
        if value is not None
    }
    data["maxWidths"] = list(config.max_widths)
    data["outputWidth"] = config.output_width
    return data


def load_config(path: str | Path) -> Config:
    """Read a Config from a JSON file.

    The result is an override: fields missing from the file stay unset, and
    a missing file yields ``Config()`` with every field unset. The formatting
    entry points merge it over :func:`default_config`.
    """
    config_path = Path(path)
    if not config_path.exists():
        return Config()
    try:
        data = json.loads(config_path.read_text())
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigError(f"Error reading config {config_path}: {e}") from e
    return config_from_dict(data)


def config_from_env(environ: dict[str, str] | None = None) -> Config:
    """Build an override config from ``PI_COLUMNIZE_OUTPUT_WIDTH``."""
    env = os.environ if environ is None else environ
    value = env.get(OUTPUT_WIDTH_ENV, "")
    if not value:
        return Config()
    return config_from_dict({"outputWidth": value})
