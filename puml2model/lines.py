from __future__ import annotations
from dataclasses import dataclass
from enum import Enum

SKIP_PREFIXES = ("@", "'")   # directives (@startuml ...) and comments
SCOPE_CLOSE = "}"


class LineKind(Enum):
    SKIP = "skip"
    SCOPE_CLOSE = "scope_close"
    CONTENT = "content"


@dataclass(frozen=True)
class ClassifiedLine:
    kind: LineKind
    text: str = ""   # trimmed line, only meaningful for CONTENT


def classify_line(line: str) -> ClassifiedLine:
    """Trim one raw input line and decide how the parser should treat it."""
    text = line.strip()
    if not text or text.startswith(SKIP_PREFIXES):
        return ClassifiedLine(LineKind.SKIP)
    if text == SCOPE_CLOSE:
        return ClassifiedLine(LineKind.SCOPE_CLOSE)
    return ClassifiedLine(LineKind.CONTENT, text)
