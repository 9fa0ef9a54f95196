from __future__ import annotations
import re
from typing import Optional

from ..matcher_registry import TOP, register
from ..models import Relationship
from ..utils import strip_quotes

# A "1" -- "0..*" B : label
# The connector is any run of - . o * < | and is kept exactly as written.
# Multiplicity groups own their leading whitespace; one \s+ spans each gap.
RELATIONSHIP_RE = re.compile(
    r'^(\w+)(?:\s*("[^"]+"))?\s+([-.o*<|]+)(?:\s*("[^"]+"))?\s+(\w+)(\s*:\s*(.+))?$',
    re.ASCII,
)


@register(TOP, 20)
def match_relationship(line: str) -> Optional[Relationship]:
    m = RELATIONSHIP_RE.match(line)
    if m is None:
        return None
    return Relationship(
        source=m.group(1),
        source_multiplicity=strip_quotes(m.group(2)),
        kind=m.group(3),
        target_multiplicity=strip_quotes(m.group(4)),
        target=m.group(5),
        label=m.group(7) or "",
    )
