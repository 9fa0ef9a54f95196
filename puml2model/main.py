# puml2model/main.py
from __future__ import annotations
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional, TextIO

from .config import Config
from .models import StructuralModel
from .parser import parse, parse_file
from .renderer import PlantUMLWriter, dump_writer, render_plantuml
from .utils import sanitize_filename

log = logging.getLogger(__name__)

_SUFFIXES = {"dump": ".txt", "json": ".json", "puml": ".puml"}


def render(model: StructuralModel, output_format: str, title: Optional[str] = None) -> PlantUMLWriter:
    if output_format == "dump":
        return dump_writer(model)
    if output_format == "puml":
        return render_plantuml(model, title=title)
    if output_format == "json":
        out = PlantUMLWriter(suffix=_SUFFIXES["json"])
        out.writeln(json.dumps(model.to_dict(), indent=2))
        return out
    raise ValueError(f"Unknown output format: {output_format!r}")


def _report_references(model: StructuralModel, name: str) -> None:
    for ref in model.dangling_references():
        log.warning("%s: %r is referenced but never declared as an entity", name, ref)


def run(cfg: Config, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> List[Path]:
    """Parse every input and emit one rendering per input. Returns written paths."""
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    written: List[Path] = []

    sources = list(cfg.inputs) or [None]
    for src in sources:
        if src is None:
            name = "stdin"
            model = parse(stdin, strict=cfg.strict)
        else:
            name = src.stem
            model = parse_file(src, encoding=cfg.encoding, strict=cfg.strict)

        if cfg.check_references:
            _report_references(model, name)

        out = render(model, cfg.output_format, title=name)
        if cfg.outdir is None:
            stdout.write(out.text())
        else:
            path = out.save(cfg.outdir, sanitize_filename(name))
            log.info("Wrote %s", path)
            written.append(path)
    return written
