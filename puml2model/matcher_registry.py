from __future__ import annotations
from typing import Any, Callable, Dict, List, Optional, Tuple

# Matcher protocol (duck-typed): plain function
#   match(line: str) -> fragment | None
Matcher = Callable[[str], Optional[Any]]

BODY = "body"   # tried only while an entity body is open
TOP = "top"     # tried in every state, after body matchers decline

_REGISTRY: Dict[str, List[Tuple[int, Matcher]]] = {}


def register(scope: str, priority: int) -> Callable[[Matcher], Matcher]:
    def deco(fn: Matcher) -> Matcher:
        entries = _REGISTRY.setdefault(scope.strip().lower(), [])
        entries.append((priority, fn))
        entries.sort(key=lambda e: e[0])
        return fn
    return deco


def resolve(scope: str) -> List[Matcher]:
    key = (scope or "").strip().lower()
    try:
        return [m for _, m in _REGISTRY[key]]
    except KeyError:
        raise KeyError(f"No matchers registered for scope: {scope!r}")
