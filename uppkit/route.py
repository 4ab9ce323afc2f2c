"""Matching URL paths against patterns with ``{name}`` parameters."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto


class Method(Enum):
    """HTTP request methods."""

    GET = auto()
    POST = auto()
    PUT = auto()
    DELETE = auto()
    HEAD = auto()


@dataclass(frozen=True)
class Route:
    """A matched path and the parameters taken from it."""

    path: str = ""
    params: dict[str, str] = field(default_factory=dict)


def valid_route_pattern(pattern: str) -> bool:
    """Whether braces in ``pattern`` never nest and never close unopened."""
    in_braces = False
    for char in pattern:
        if char == "{":
            if in_braces:
                return False
            in_braces = True
        elif char == "}":
            if not in_braces:
                return False
            in_braces = False
    return True


def _segments(text: str) -> list[str]:
    return text.split("/") if text else []


def parse_route_params(pattern: str, path: str) -> dict[str, str] | None:
    """Match ``path`` against ``pattern`` segment by segment.

    Returns the parameters, sorted by name, or None when the path does not match.
    """
    pattern_parts = _segments(pattern)
    path_parts = _segments(path)
    if len(pattern_parts) != len(path_parts):
        return None
    params: dict[str, str] = {}
    for expected, actual in zip(pattern_parts, path_parts):
        if len(expected) >= 2 and expected.startswith("{") and expected.endswith("}"):
            params[expected[1:-1]] = actual
        elif expected != actual:
            return None
    return dict(sorted(params.items()))


class RoutePattern:
    """A validated route pattern."""

    __slots__ = ("_pattern",)

    def __init__(self, pattern: str) -> None:
        if not valid_route_pattern(pattern):
            raise ValueError("invalid route pattern")
        self._pattern = pattern

    def parse(self, path: str) -> Route | None:
        params = parse_route_params(self._pattern, path)
        if params is None:
            return None
        return Route(path, params)

    def __repr__(self) -> str:
        return f"RoutePattern({self._pattern!r})"


def parse_route(pattern: str, path: str) -> Route | None:
    """Match ``path`` against ``pattern``; ValueError if the pattern is malformed."""
    return RoutePattern(pattern).parse(path)