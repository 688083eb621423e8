from __future__ import annotations

import os
import pathlib
import warnings
from functools import reduce
from importlib import import_module
from typing import Any, Dict, Iterable, Mapping, cast

from pydantic import BaseModel, ConfigDict, Field, model_validator

yaml = cast(Any, import_module("yaml"))

ENV_PREFIX = "SUBTITLE_SEGMENTER__"


class SegmenterSettings(BaseModel):
    """Thresholds driving the segmentation tiers and the quality gate."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    short_circuit_chars: int = Field(50, ge=0)
    word_wrap_min_chars: int = Field(80, ge=0)
    max_line_chars: int = Field(40, gt=0)
    min_phrase_chars: int = Field(15, ge=0)
    short_segment_chars: int = Field(8, ge=0)
    short_segment_ratio: float = Field(0.3, ge=0.0, le=1.0)
    balance_min_ratio: float = Field(0.3, ge=0.0)
    balance_max_ratio: float = Field(2.0, gt=0.0)
    protect_links: bool = True

    @model_validator(mode="after")
    def _check_balance_window(self) -> "SegmenterSettings":
        if self.balance_min_ratio > self.balance_max_ratio:
            raise ValueError("balance_min_ratio must not exceed balance_max_ratio")
        return self


DEFAULT_SETTINGS = SegmenterSettings()


def _read_yaml(path: str | os.PathLike | None) -> Dict[str, Any]:
    """Return a dict from YAML or {} if path is None/missing/empty."""
    if not path:
        return {}
    p = pathlib.Path(path)
    if not p.exists():
        return {}
    data = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise TypeError("segmenter config must contain a top-level mapping")
    nested = data.get("segmenter")
    return dict(nested) if isinstance(nested, dict) else data


def _env_overrides(environ: Mapping[str, str] | None = None) -> Dict[str, Any]:
    """
    Map SUBTITLE_SEGMENTER__FIELD=value → {field: value} (field lower-cased).
    Values are YAML-coerced (so 'true', '42' etc. become bool/int).
    """
    env = os.environ if environ is None else environ
    out: Dict[str, Any] = {}
    for k, v in env.items():
        if not k.startswith(ENV_PREFIX):
            continue
        key = k[len(ENV_PREFIX) :].lower()
        try:
            val = yaml.safe_load(v)
        except yaml.YAMLError:
            val = v
        out[key] = val
    return out


def _warn_unknown_keys(keys: Iterable[str]) -> None:
    """Emit a warning when options name fields the settings model lacks."""

    unknown = [k for k in keys if k not in SegmenterSettings.model_fields]
    if unknown:
        warnings.warn(
            f"Unknown segmenter options: {', '.join(sorted(unknown))}",
            stacklevel=3,
        )


def load_settings(
    path: str | os.PathLike | None = None,
    overrides: Mapping[str, Any] | None = None,
) -> SegmenterSettings:
    """Load YAML + env/CLI overrides into validated :class:`SegmenterSettings`."""
    sources = (d for d in (_read_yaml(path), _env_overrides(), overrides) if d)
    merged: Dict[str, Any] = reduce(lambda acc, d: {**acc, **d}, sources, {})
    _warn_unknown_keys(merged)
    known = {k: v for k, v in merged.items() if k in SegmenterSettings.model_fields}
    return SegmenterSettings.model_validate(known)
