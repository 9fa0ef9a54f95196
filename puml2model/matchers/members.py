from __future__ import annotations
import re
from typing import Optional

from ..matcher_registry import BODY, register
from ..models import Attribute, Method

ATTRIBUTE_RE = re.compile(r"^(\w+)\s*:\s*(\w+)$", re.ASCII)
# parameter text inside (...) is accepted but thrown away
METHOD_RE = re.compile(r"^(\w+)\(.*\)\s*:\s*(\w+)$", re.ASCII)


@register(BODY, 10)
def match_attribute(line: str) -> Optional[Attribute]:
    m = ATTRIBUTE_RE.match(line)
    if m is None:
        return None
    return Attribute(name=m.group(1), type=m.group(2))


@register(BODY, 20)
def match_method(line: str) -> Optional[Method]:
    m = METHOD_RE.match(line)
    if m is None:
        return None
    return Method(name=m.group(1), return_type=m.group(2))
