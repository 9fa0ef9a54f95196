from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional, Tuple


@dataclass(frozen=True)
class Attribute:
    name: str
    type: str


@dataclass(frozen=True)
class Method:
    name: str
    return_type: str              # parameter text is matched but not kept


@dataclass(frozen=True)
class EntityHeader:
    name: str                     # fragment only; becomes an Entity in the model


@dataclass(frozen=True)
class Relationship:
    source: str                   # "from" as written, not checked against entities
    target: str                   # "to"
    kind: str                     # connector tokens verbatim, e.g. "--", "<|--", "*--"
    source_multiplicity: str = ""
    target_multiplicity: str = ""
    label: str = ""


@dataclass(frozen=True)
class Constraint:
    kind: str                     # unique, mandatory, subset, ...
    target: str                   # entity or role
    expression: str               # opaque text


@dataclass
class Entity:
    name: str
    attributes: List[Attribute] = field(default_factory=list)
    methods: List[Method] = field(default_factory=list)


@dataclass
class StructuralModel:
    """
    Parse result. Immutable by convention: the parser stops touching it once
    parse() returns, but the containers are plain dicts and lists.
    """
    entities: Dict[str, Entity] = field(default_factory=dict)
    relationships: List[Relationship] = field(default_factory=list)
    constraints: List[Constraint] = field(default_factory=list)
    # (line number, text) of dropped lines; only filled in strict mode
    unmatched: List[Tuple[int, str]] = field(default_factory=list)

    def get_entity(self, name: str) -> Optional[Entity]:
        return self.entities.get(name)

    def has_entity(self, name: str) -> bool:
        return name in self.entities

    def __contains__(self, name: object) -> bool:
        return name in self.entities

    def iter_relationships(self) -> Iterator[Relationship]:
        return iter(self.relationships)

    def iter_constraints(self) -> Iterator[Constraint]:
        return iter(self.constraints)

    def dangling_references(self) -> List[str]:
        """
        Names used by relationships or constraints that no entity declares.
        The parser never calls this; it is a post-parse check for callers
        that want referential integrity.
        """
        seen: List[str] = []
        refs: List[str] = []
        for r in self.relationships:
            refs.extend((r.source, r.target))
        refs.extend(c.target for c in self.constraints)
        for name in refs:
            if name not in self.entities and name not in seen:
                seen.append(name)
        return seen

    def dump(self) -> str:
        from .renderer import dump_model
        return dump_model(self)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "entities": [
                {
                    "name": e.name,
                    "attributes": [{"name": a.name, "type": a.type} for a in e.attributes],
                    "methods": [{"name": m.name, "return_type": m.return_type} for m in e.methods],
                }
                for e in self.entities.values()
            ],
            "relationships": [
                {
                    "from": r.source,
                    "to": r.target,
                    "kind": r.kind,
                    "from_multiplicity": r.source_multiplicity,
                    "to_multiplicity": r.target_multiplicity,
                    "label": r.label,
                }
                for r in self.relationships
            ],
            "constraints": [
                {"kind": c.kind, "target": c.target, "expression": c.expression}
                for c in self.constraints
            ],
        }
