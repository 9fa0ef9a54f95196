from __future__ import annotations
import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .config import OUTPUT_FORMATS, Config
from .main import run
from .parser import ModelInputError

_LEVELS = {0: logging.WARNING, 1: logging.INFO, 2: logging.DEBUG}


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="puml2model",
        description="Parse structural PlantUML (classes, relationships, constraints) into a model.",
    )
    p.add_argument("inputs", nargs="*", type=Path, metavar="FILE",
                   help="Input .puml files. Reads stdin when omitted.")
    p.add_argument("-o", "--outdir", type=Path, default=None,
                   help="Output directory. Results go to stdout when omitted.")
    p.add_argument("--format", dest="output_format", choices=OUTPUT_FORMATS, default="dump",
                   help="Output format: dump (inspection listing, default), json, or puml.")
    p.add_argument("--strict", action="store_true",
                   help="Warn about every line that no grammar rule recognises.")
    p.add_argument("--check-references", action="store_true",
                   help="Warn about relationship/constraint names with no declared entity.")
    p.add_argument("--encoding", type=str, default="utf-8",
                   help="Encoding of the input files (default: utf-8).")
    p.add_argument("--reporting", type=int, choices=sorted(_LEVELS), default=1,
                   help="Reporting level: 0 warnings and errors only, 1 basic progress (default), 2 detailed.")
    return p


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    ns = parser.parse_args(argv)
    logging.basicConfig(level=_LEVELS[ns.reporting], format="%(levelname)s: %(message)s")
    cfg = Config(
        inputs=ns.inputs,
        outdir=ns.outdir,
        output_format=ns.output_format,
        strict=ns.strict,
        check_references=ns.check_references,
        encoding=ns.encoding,
        reporting=ns.reporting,
    )
    try:
        run(cfg)
    except ModelInputError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1
    return 0
