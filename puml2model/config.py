from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional
from pathlib import Path

OUTPUT_FORMATS = ("dump", "json", "puml")


@dataclass
class Config:
    inputs: List[Path] = field(default_factory=list)   # positional FILE ...; empty = stdin
    outdir: Optional[Path] = None                      # -o / --outdir; None = stdout
    output_format: str = "dump"                        # --format (dump|json|puml)
    strict: bool = False                               # --strict
    check_references: bool = False                     # --check-references
    encoding: str = "utf-8"                            # --encoding
    reporting: int = 1                                 # --reporting (0 errors, 1 basic, 2 detailed)
