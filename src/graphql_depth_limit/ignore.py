"""Field exclusion rules for depth accounting.

A rule decides whether a field is left out of the depth count. Excluded
fields are not descended into at all, so nothing below them counts either.
Introspection fields (``__schema``, ``__type``, ``__typename``) are always
excluded, whatever rule is configured.
"""

from __future__ import annotations

import functools
import logging
import re
from dataclasses import dataclass
from typing import Callable, Union

logger = logging.getLogger(__name__)

_INTROSPECTION_PREFIX = "__"


@dataclass(frozen=True)
class ExactMatch:
    """Ignore the field whose name is exactly ``name``."""

    name: str


@dataclass(frozen=True)
class PatternMatch:
    """Ignore fields whose name contains a match for ``pattern``."""

    pattern: str


@dataclass(frozen=True)
class Predicate:
    """Ignore fields for which ``func(field_name)`` is truthy.

    A ``func`` that raises is treated as no match.
    """

    func: Callable[[str], bool]


@dataclass(frozen=True)
class NoIgnore:
    """Count every non-introspection field."""


IgnoreRule = Union[ExactMatch, PatternMatch, Predicate, NoIgnore]

NO_IGNORE = NoIgnore()


@functools.lru_cache(maxsize=128)
def _compile(pattern: str) -> re.Pattern[str] | None:
    try:
        return re.compile(pattern)
    except re.error as exc:
        logger.warning("Invalid ignore pattern %r, it will never match: %s", pattern, exc)
        return None


def is_introspection(field_name: str) -> bool:
    return field_name.startswith(_INTROSPECTION_PREFIX)


def should_ignore(field_name: str, rule: IgnoreRule = NO_IGNORE) -> bool:
    """Return True when ``field_name`` must not contribute to depth."""
    if is_introspection(field_name):
        return True
    if isinstance(rule, ExactMatch):
        return field_name == rule.name
    if isinstance(rule, PatternMatch):
        compiled = _compile(rule.pattern)
        return compiled is not None and compiled.search(field_name) is not None
    if isinstance(rule, Predicate):
        try:
            return bool(rule.func(field_name))
        except Exception as exc:
            logger.warning("Ignore predicate failed for %r, counting the field: %s", field_name, exc)
            return False
    return False
