from __future__ import annotations

import os
from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional

from .errors import ConfigError

# Interpreter settings. Environment variables mirror the CLI flags so
# scripts can tune runs without touching arguments.

ENV_EOF_POLICY = "BF_EOF_POLICY"
ENV_STEP_LIMIT = "BF_STEP_LIMIT"
ENV_TAPE_SIZE = "BF_TAPE_SIZE"

DEFAULT_TAPE_SIZE = 30000
# Upper bound on the initial allocation (4 GiB of cells)
MAX_TAPE_SIZE = 2 ** 32


class EofPolicy(str, Enum):
    """What ',' stores when the input stream is exhausted."""

    ZERO = "zero"
    UNCHANGED = "unchanged"
    MAX = "max"

    @classmethod
    def parse(cls, value: str) -> "EofPolicy":
        try:
            return cls(value.strip().lower())
        except ValueError:
            choices = ", ".join(p.value for p in cls)
            raise ConfigError(f"Unknown EOF policy {value!r} (expected one of: {choices})") from None


@dataclass(frozen=True)
class InterpreterConfig:
    eof_policy: EofPolicy = EofPolicy.ZERO
    step_limit: Optional[int] = None
    tape_size: int = DEFAULT_TAPE_SIZE

    def __post_init__(self):
        if self.step_limit is not None and self.step_limit < 0:
            raise ConfigError(f"step_limit must be non-negative, got {self.step_limit}")
        if self.tape_size < 1:
            raise ConfigError(f"tape_size must be at least 1, got {self.tape_size}")
        if self.tape_size > MAX_TAPE_SIZE:
            raise ConfigError(f"tape_size must be at most {MAX_TAPE_SIZE}, got {self.tape_size}")

    @classmethod
    def from_env(cls, environ=None) -> "InterpreterConfig":
        """Build a config from BF_* environment variables, falling back to defaults."""
        environ = os.environ if environ is None else environ

        eof_policy = EofPolicy.ZERO
        if environ.get(ENV_EOF_POLICY):
            eof_policy = EofPolicy.parse(environ[ENV_EOF_POLICY])

        step_limit = None
        if environ.get(ENV_STEP_LIMIT):
            step_limit = parse_int(ENV_STEP_LIMIT, environ[ENV_STEP_LIMIT])

        tape_size = DEFAULT_TAPE_SIZE
        if environ.get(ENV_TAPE_SIZE):
            tape_size = parse_int(ENV_TAPE_SIZE, environ[ENV_TAPE_SIZE])

        return cls(eof_policy=eof_policy, step_limit=step_limit, tape_size=tape_size)

    def with_overrides(self, **changes) -> "InterpreterConfig":
        """Return a copy with every non-None keyword applied."""
        changes = {k: v for k, v in changes.items() if v is not None}
        if isinstance(changes.get("eof_policy"), str):
            changes["eof_policy"] = EofPolicy.parse(changes["eof_policy"])
        return replace(self, **changes)


def parse_int(name: str, raw: str) -> int:
    try:
        return int(raw)
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from None
