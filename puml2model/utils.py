# puml2model/utils.py
from __future__ import annotations
import re

_SANITIZE = re.compile(r"[^A-Za-z0-9._-]+")


def strip_quotes(text: str) -> str:
    """'"0..*"' -> '0..*'. Missing groups (None) become ""."""
    if not text:
        return ""
    return text.strip('"')


def sanitize_filename(name: str) -> str:
    name = (name or "").strip()
    name = _SANITIZE.sub("_", name)
    return name or "model"


def puml_escape_inline(text: str) -> str:
    if text is None:
        return ""
    return str(text).replace("\\", "\\\\").replace('"', r"\"")
