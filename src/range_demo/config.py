"""Demo settings, read from ``RANGE_DEMO_*`` environment variables."""

from __future__ import annotations

import dataclasses
import logging
import os
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Tuple

ENV_PREFIX = "RANGE_DEMO_"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def _parse_int(name: str, raw: str) -> int:
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{ENV_PREFIX}{name} must be an integer, got {raw!r}") from exc


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ValueError(f"{ENV_PREFIX}{name} must be a boolean, got {raw!r}")


def normalize_level(level: str | int) -> int:
    """Return the numeric logging level for a name such as ``"debug"``."""
    if isinstance(level, int):
        return level
    candidate = logging.getLevelName(str(level).upper())
    if isinstance(candidate, int):
        return candidate
    raise ValueError(f"Unknown logging level: {level!r}")


@dataclass(frozen=True)
class DemoConfig:
    batch: int = 2
    height: int = 4
    width: int = 5
    depth: int = 3
    colorful: bool = False
    log_level: str = "WARNING"

    @property
    def shape(self) -> Tuple[int, int, int, int]:
        return (self.batch, self.height, self.width, self.depth)

    def validate(self) -> "DemoConfig":
        for name, extent in zip(("batch", "height", "width", "depth"), self.shape):
            if extent < 1:
                raise ValueError(f"{name} must be at least 1, got {extent}")
        normalize_level(self.log_level)
        return self

    def with_overrides(self, **overrides: Any) -> "DemoConfig":
        """Return a copy with every non-``None`` override applied."""
        changes = {key: value for key, value in overrides.items() if value is not None}
        return dataclasses.replace(self, **changes).validate()

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "DemoConfig":
        env = os.environ if environ is None else environ
        values: dict[str, Any] = {}
        for field in ("batch", "height", "width", "depth"):
            raw = env.get(f"{ENV_PREFIX}{field.upper()}")
            if raw and raw.strip():
                values[field] = _parse_int(field.upper(), raw.strip())
        raw = env.get(f"{ENV_PREFIX}COLOR")
        if raw and raw.strip():
            values["colorful"] = _parse_bool("COLOR", raw)
        raw = env.get(f"{ENV_PREFIX}LOG_LEVEL")
        if raw and raw.strip():
            values["log_level"] = raw.strip().upper()
        return cls(**values).validate()


__all__ = ["DemoConfig", "ENV_PREFIX", "normalize_level"]
