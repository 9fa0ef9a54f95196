"""
Line-by-line parser for the structural PlantUML dialect.

One forward pass, no backtracking. The only nesting state is whether an
entity body is open; it lives on the ``Parser`` instance so independent
parsers never share it.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, Optional, Tuple, Union

from . import matchers  # noqa: F401  (registers the grammar matchers)
from .lines import LineKind, classify_line
from .matcher_registry import BODY, TOP, resolve
from .models import (
    Attribute,
    Constraint,
    Entity,
    EntityHeader,
    Method,
    Relationship,
    StructuralModel,
)

log = logging.getLogger(__name__)


class ModelInputError(Exception):
    """Reading the text source failed. The partially built model is discarded."""

    def __init__(self, message: str, line_number: int = 0) -> None:
        super().__init__(message)
        self.line_number = line_number  # last line read successfully


@dataclass(frozen=True)
class TopLevel:
    pass


@dataclass(frozen=True)
class InBody:
    entity: Entity


ParserState = Union[TopLevel, InBody]

Source = Union[str, Iterable[str]]


class Parser:
    def __init__(self, source: Source, strict: bool = False) -> None:
        if isinstance(source, str):
            # only "\n" ends a line; "\r" is removed by the trim
            source = source.split("\n")
        self._source = source
        self._strict = strict
        self._model = StructuralModel()
        self._state: ParserState = TopLevel()
        self._consumed = False

    @property
    def state(self) -> ParserState:
        return self._state

    def parse(self) -> StructuralModel:
        if self._consumed:
            raise RuntimeError("Parser instances parse their source only once.")
        self._consumed = True

        for lineno, raw in self._read_lines():
            self._feed(lineno, raw)

        # end of input closes any open body
        self._state = TopLevel()
        return self._model

    # ---------- helpers ----------
    def _read_lines(self) -> Iterator[Tuple[int, str]]:
        lineno = 0
        it = None
        while True:
            try:
                if it is None:
                    it = iter(self._source)
                raw = next(it)
            except StopIteration:
                return
            except (OSError, ValueError) as exc:
                # ValueError covers decode failures and reads from a closed file
                raise ModelInputError(
                    f"Failed to read input after line {lineno}: {exc}", lineno
                ) from exc
            lineno += 1
            yield lineno, raw

    def _feed(self, lineno: int, raw: str) -> None:
        classified = classify_line(raw)

        if classified.kind is LineKind.SKIP:
            return
        if classified.kind is LineKind.SCOPE_CLOSE:
            self._state = TopLevel()
            return

        line = classified.text
        if isinstance(self._state, InBody):
            fragment = self._first_match(BODY, line)
            if fragment is not None:
                self._fold_member(self._state.entity, fragment)
                return

        # also reached from an open body: a new header may appear without "}"
        fragment = self._first_match(TOP, line)
        if fragment is None:
            self._drop(lineno, line)
            return
        self._fold_top(fragment)

    def _first_match(self, scope: str, line: str) -> Optional[object]:
        for match in resolve(scope):
            fragment = match(line)
            if fragment is not None:
                return fragment
        return None

    def _fold_member(self, entity: Entity, fragment: object) -> None:
        if isinstance(fragment, Attribute):
            entity.attributes.append(fragment)
        elif isinstance(fragment, Method):
            entity.methods.append(fragment)
        else:
            raise TypeError(f"Unexpected body fragment: {fragment!r}")

    def _fold_top(self, fragment: object) -> None:
        if isinstance(fragment, EntityHeader):
            entity = Entity(name=fragment.name)
            if fragment.name in self._model.entities:
                log.debug("Entity %r declared again; earlier members are discarded", fragment.name)
            self._model.entities[fragment.name] = entity
            self._state = InBody(entity)
        elif isinstance(fragment, Relationship):
            self._model.relationships.append(fragment)
        elif isinstance(fragment, Constraint):
            self._model.constraints.append(fragment)
        else:
            raise TypeError(f"Unexpected top-level fragment: {fragment!r}")

    def _drop(self, lineno: int, line: str) -> None:
        if self._strict:
            log.warning("Line %d not recognised, ignored: %s", lineno, line)
            self._model.unmatched.append((lineno, line))
        else:
            log.debug("Line %d not recognised, ignored: %s", lineno, line)


def parse(source: Source, strict: bool = False) -> StructuralModel:
    """Parse a string or any iterable of lines into a StructuralModel."""
    return Parser(source, strict=strict).parse()


def parse_file(path: Union[str, Path], encoding: str = "utf-8", strict: bool = False) -> StructuralModel:
    path = Path(path)
    try:
        f = path.open("r", encoding=encoding)
    except OSError as exc:
        raise ModelInputError(f"Cannot open {path}: {exc}") from exc
    with f:
        model = Parser(f, strict=strict).parse()
    log.info(
        "Parsed %s: %d entities, %d relationships, %d constraints",
        path, len(model.entities), len(model.relationships), len(model.constraints),
    )
    return model
