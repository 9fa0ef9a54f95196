from __future__ import annotations
from pathlib import Path
from typing import Iterable, Optional

from .models import Relationship, StructuralModel


class PlantUMLWriter:
    """
    Pure string builder. Only `save()` touches the filesystem.
    Used both for the inspection dump and for re-emitting a model as PlantUML.
    """
    def __init__(self, suffix: str = ".puml"):
        self._buf: list[str] = []
        self._suffix = suffix
        self._started = False
        self._ended = False

    def start(self, title: Optional[str] = None) -> None:
        if self._started:
            return
        self._started = True
        self._buf.append("@startuml")
        if title:
            from .utils import puml_escape_inline
            self._buf.append(f'title "{puml_escape_inline(title)}"')

    def writeln(self, line: str = "") -> None:
        self._buf.append(line)

    def extend(self, lines: Iterable[str]) -> None:
        self._buf.extend(lines)

    def end(self) -> None:
        if self._ended:
            return
        self._ended = True
        self._buf.append("@enduml")

    def text(self) -> str:
        return "\n".join(self._buf) + ("\n" if self._buf else "")

    def save(self, outdir: Path, filename: str) -> Path:
        outdir.mkdir(parents=True, exist_ok=True)
        path = outdir / f"{filename}{self._suffix}"
        with path.open("w", encoding="utf-8") as f:
            f.write(self.text())
        return path


def dump_writer(model: StructuralModel) -> PlantUMLWriter:
    """Debug listing of a model. Entities come out in insertion order."""
    out = PlantUMLWriter(suffix=".txt")
    out.writeln("Entities:")
    for e in model.entities.values():
        out.writeln(f" - {e.name}")
        for a in e.attributes:
            out.writeln(f"    attr {a.name} : {a.type}")
        for m in e.methods:
            out.writeln(f"    method {m.name}() : {m.return_type}")

    out.writeln("Relationships:")
    for r in model.iter_relationships():
        out.writeln(
            f' - {r.source} "{r.source_multiplicity}" {r.kind} '
            f'"{r.target_multiplicity}" {r.target} : {r.label}'
        )

    out.writeln("Constraints:")
    for c in model.iter_constraints():
        out.writeln(f" - {c.kind} on {c.target} : {c.expression}")
    return out


def dump_model(model: StructuralModel) -> str:
    return dump_writer(model).text()


def _relationship_line(r: Relationship) -> str:
    parts = [r.source]
    if r.source_multiplicity:
        parts.append(f'"{r.source_multiplicity}"')
    parts.append(r.kind)
    if r.target_multiplicity:
        parts.append(f'"{r.target_multiplicity}"')
    parts.append(r.target)
    line = " ".join(parts)
    return f"{line} : {r.label}" if r.label else line


def render_plantuml(model: StructuralModel, title: Optional[str] = None) -> PlantUMLWriter:
    """Re-emit a parsed model in the same dialect."""
    out = PlantUMLWriter()
    out.start(title)

    for e in model.entities.values():
        out.writeln(f"class {e.name} {{")
        out.extend(f"  {a.name} : {a.type}" for a in e.attributes)
        out.extend(f"  {m.name}() : {m.return_type}" for m in e.methods)
        out.writeln("}")

    for r in model.iter_relationships():
        out.writeln(_relationship_line(r))

    for c in model.iter_constraints():
        out.writeln(f"constraint {c.kind} on {c.target} : {c.expression}")

    out.end()
    return out
