from __future__ import annotations
import re
from typing import Optional

from ..matcher_registry import TOP, register
from ..models import EntityHeader

ENTITY_RE = re.compile(r"^(class|entity|object)\s+(\w+)\s*\{?$", re.ASCII)


@register(TOP, 10)
def match_entity_header(line: str) -> Optional[EntityHeader]:
    m = ENTITY_RE.match(line)
    if m is None:
        return None
    return EntityHeader(name=m.group(2))
