from __future__ import annotations
import re
from typing import Optional

from ..matcher_registry import TOP, register
from ..models import Constraint

CONSTRAINT_RE = re.compile(r"^constraint\s+(\w+)\s+on\s+(\w+)\s*:\s*(.+)$", re.ASCII)


@register(TOP, 30)
def match_constraint(line: str) -> Optional[Constraint]:
    m = CONSTRAINT_RE.match(line)
    if m is None:
        return None
    return Constraint(kind=m.group(1), target=m.group(2), expression=m.group(3))
