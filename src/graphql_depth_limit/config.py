"""Configuration via environment variables with DEPTH_LIMIT_ prefix."""

from __future__ import annotations

from typing import Optional

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings

from graphql_depth_limit.ignore import NO_IGNORE, ExactMatch, IgnoreRule, PatternMatch


class Settings(BaseSettings):
    model_config = {"env_prefix": "DEPTH_LIMIT_"}

    # Inclusive; 0 allows only the root fields of an operation
    max_depth: int = Field(default=5, ge=0)

    # Field exclusions, at most one of the two
    ignore_exact: Optional[str] = None
    ignore_pattern: Optional[str] = None

    # Logging
    log_level: str = "INFO"

    @model_validator(mode="after")
    def _single_ignore_rule(self) -> "Settings":
        if self.ignore_exact is not None and self.ignore_pattern is not None:
            raise ValueError("Set only one of ignore_exact and ignore_pattern")
        return self

    def ignore_rule(self) -> IgnoreRule:
        if self.ignore_exact is not None:
            return ExactMatch(self.ignore_exact)
        if self.ignore_pattern is not None:
            return PatternMatch(self.ignore_pattern)
        return NO_IGNORE
