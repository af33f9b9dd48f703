# File: spiderseek/matchers.py
"""
Exclusion rules for URL paths.

A matcher is either a segment-aware path prefix (:class:`PrefixMatch`) or a
regular expression tested against the path (:class:`PatternMatch`).
Config entries are turned into matchers once by :func:`parse_matcher`.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Optional, Sequence, Union

from spiderseek.errors import ConfigurationError

__all__: Sequence[str] = (
    "PrefixMatch",
    "PatternMatch",
    "Matcher",
    "parse_matcher",
    "parse_matchers",
    "first_match",
)

_PATTERN_KEYS = ("regex", "pattern")


@dataclass(frozen=True, slots=True)
class PrefixMatch:
    """Exact path or path-segment prefix: ``/admin`` covers ``/admin/x`` but not ``/administration``."""

    text: str

    def matches(self, url_path: str) -> bool:
        prefix = self.text if self.text.endswith("/") else self.text + "/"
        return url_path == self.text or url_path.startswith(prefix)

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True, slots=True)
class PatternMatch:
    """Regular expression searched anywhere in the URL path."""

    pattern: re.Pattern

    def matches(self, url_path: str) -> bool:
        return self.pattern.search(url_path) is not None

    def __str__(self) -> str:
        return f"/{self.pattern.pattern}/"


Matcher = Union[PrefixMatch, PatternMatch]


def _compile(source: Any) -> re.Pattern:
    if not isinstance(source, str):
        raise ConfigurationError(f"exclude pattern must be a string, got {type(source).__name__}")
    try:
        return re.compile(source)
    except re.error as exc:
        raise ConfigurationError(f"invalid exclude pattern {source!r}: {exc}") from exc


def parse_matcher(entry: Any) -> Matcher:
    """Turn one ``exclude`` entry into a matcher.

    Accepted forms: a prefix string, a compiled pattern, a mapping
    ``{"regex": "..."}`` (as written in YAML/JSON) or a ready matcher.
    Anything else raises :class:`ConfigurationError`.
    """
    if isinstance(entry, (PrefixMatch, PatternMatch)):
        return entry
    if isinstance(entry, str):
        return PrefixMatch(entry)
    if isinstance(entry, re.Pattern):
        if not isinstance(entry.pattern, str):
            raise ConfigurationError(f"exclude pattern must match text, got bytes pattern {entry.pattern!r}")
        return PatternMatch(entry)
    if isinstance(entry, Mapping) and len(entry) == 1:
        key, value = next(iter(entry.items()))
        if key in _PATTERN_KEYS:
            return PatternMatch(_compile(value))
    raise ConfigurationError(
        f"exclude items must be a path prefix string or a regex, got {entry!r}"
    )


def parse_matchers(entries: Optional[Iterable[Any]]) -> tuple[Matcher, ...]:
    if entries is None:
        return ()
    if isinstance(entries, (str, bytes, Mapping)):
        raise ConfigurationError("exclude must be a list of matchers")
    return tuple(parse_matcher(e) for e in entries)


def first_match(matchers: Iterable[Matcher], url_path: str) -> Optional[Matcher]:
    """Return the first matcher that covers *url_path*, or None."""
    for matcher in matchers:
        if matcher.matches(url_path):
            return matcher
    return None
