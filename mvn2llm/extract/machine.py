"""Line-driven association of doc comments with the declarations they precede."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple, Union

from ..models import DocRecord
from .classifier import (
    closes_block_doc,
    closes_on_same_line,
    end_of_signature,
    opens_block_doc,
    opens_line_doc,
)


@dataclass(frozen=True)
class Idle:
    """Waiting for a doc comment opener."""


@dataclass(frozen=True)
class InDocBlock:
    """Accumulating doc comment lines."""

    doc: Tuple[str, ...]
    line_style: bool = False


@dataclass(frozen=True)
class InSignature:
    """Doc comment complete; accumulating the declaration that follows."""

    doc: Tuple[str, ...]
    signature: Tuple[str, ...] = ()


ScanState = Union[Idle, InDocBlock, InSignature]

IDLE = Idle()


def step(
    state: ScanState, line: str, origin: str = ""
) -> Tuple[ScanState, Optional[DocRecord]]:
    """Advance the scanner by one line, returning the new state and any record."""
    if isinstance(state, Idle):
        if opens_block_doc(line):
            if closes_on_same_line(line):
                return InSignature(doc=(line,)), None
            return InDocBlock(doc=(line,)), None
        if opens_line_doc(line):
            return InDocBlock(doc=(line,), line_style=True), None
        return state, None

    if isinstance(state, InDocBlock):
        if state.line_style:
            if opens_line_doc(line):
                return InDocBlock(doc=state.doc + (line,), line_style=True), None
            # The first non `///` line ends the doc and starts the signature.
            return _signature_step(InSignature(doc=state.doc), line, origin)
        doc = state.doc + (line,)
        if closes_block_doc(line):
            return InSignature(doc=doc), None
        return InDocBlock(doc=doc), None

    return _signature_step(state, line, origin)


def _signature_step(
    state: InSignature, line: str, origin: str
) -> Tuple[ScanState, Optional[DocRecord]]:
    trimmed = line.strip()
    if not trimmed and not state.signature:
        return state, None
    signature = state.signature + (trimmed,)
    text = " ".join(signature)
    if not end_of_signature(text):
        return InSignature(doc=state.doc, signature=signature), None
    documentation = "\n".join(state.doc).strip()
    text = text.strip()
    if not documentation or not text:
        return IDLE, None
    return IDLE, DocRecord(origin=origin, documentation=documentation, signature=text)


class LineScanner:
    """Push-style wrapper that feeds lines through `step` and keeps the records."""

    def __init__(self, origin: str) -> None:
        self.origin = origin
        self.state: ScanState = IDLE
        self.records: List[DocRecord] = []

    def push(self, line: str) -> Optional[DocRecord]:
        self.state, record = step(self.state, line, self.origin)
        if record is not None:
            self.records.append(record)
        return record

    def feed(self, lines: Iterable[str]) -> List[DocRecord]:
        for line in lines:
            self.push(line)
        return self.records


def scan_lines(origin: str, lines: Iterable[str]) -> List[DocRecord]:
    """Return every doc/declaration pair found in one source unit.

    Anything still buffered when the lines run out is dropped.
    """
    return LineScanner(origin).feed(lines)


_LINE_BREAK = re.compile(r"\r\n|\r|\n")


def split_lines(text: str) -> List[str]:
    """Split on `\\n`, `\\r` and `\\r\\n` only.

    Form feeds, U+2028 and other characters `str.splitlines` treats as
    boundaries stay inside their line.
    """
    lines = _LINE_BREAK.split(text)
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def scan_text(origin: str, text: str) -> List[DocRecord]:
    return scan_lines(origin, split_lines(text))


__all__ = [
    "IDLE",
    "Idle",
    "InDocBlock",
    "InSignature",
    "LineScanner",
    "ScanState",
    "scan_lines",
    "scan_text",
    "split_lines",
    "step",
]
