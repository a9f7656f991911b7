"""
Runtime configuration for the matlite calculator.

A single dataclass holds every tunable knob. Defaults mirror the limits of
the interactive calculator; environment variables prefixed with ``MATLITE_``
override them, and command line flags override both.
"""

import os
from dataclasses import dataclass, fields, replace
from typing import Any, Dict, Mapping, Optional

ENV_PREFIX = "MATLITE_"


@dataclass
class CalculatorConfig:
    """Configuration for the lexer, variable table and REPL"""
    prompt: str = ">>"
    # A REPL line keeps at most max_input_length - 1 characters, newline included
    max_input_length: int = 500
    comment_marker: str = "\\\\"  # Two backslashes start a line comment
    max_variables: int = 255
    use_color: bool = True
    log_level: str = "WARNING"

    def __post_init__(self):
        if len(self.comment_marker) != 2:
            raise ValueError("comment_marker must be exactly two characters")
        if self.max_input_length < 2:
            raise ValueError("max_input_length must be at least 2")
        if self.max_variables < 1:
            raise ValueError("max_variables must be positive")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "CalculatorConfig":
        """Build a configuration from ``MATLITE_*`` environment variables."""
        environ = os.environ if environ is None else environ
        overrides: Dict[str, Any] = {}

        for f in fields(cls):
            raw = environ.get(ENV_PREFIX + f.name.upper())
            if raw is None:
                continue
            overrides[f.name] = _coerce(raw, f.type, f.name)

        return cls(**overrides)

    def with_overrides(self, **changes: Any) -> "CalculatorConfig":
        """Return a copy with the non-None entries of ``changes`` applied."""
        return replace(self, **{k: v for k, v in changes.items() if v is not None})


def _coerce(raw: str, annotation: Any, name: str) -> Any:
    if annotation in (bool, "bool"):
        lowered = raw.strip().lower()
        if lowered in ("1", "true", "yes", "on"):
            return True
        if lowered in ("0", "false", "no", "off"):
            return False
        raise ValueError(f"Invalid boolean for {ENV_PREFIX}{name.upper()}: {raw!r}")
    if annotation in (int, "int"):
        try:
            return int(raw)
        except ValueError:
            raise ValueError(f"Invalid integer for {ENV_PREFIX}{name.upper()}: {raw!r}")
    return raw
