"""Character-level scanner that turns delimited record text into rows of fields.

The grammar is strict: every field is wrapped in the delimiter, fields are
joined by the separator and rows end with the terminator. Anything outside an
open field that is not one of those symbols is a structural error.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Optional

from ..utils.logging_config import get_logger
from .grammar import GrammarConfig

logger = get_logger(__name__)

Row = tuple[str, ...]
Document = tuple[Row, ...]


class ScanState(str, Enum):
    """States of the scanning automaton."""

    START = "start"
    START_DELIMITER = "startDelimiter"
    INSIDE_DELIMITER = "insideDelimiter"
    END_DELIMITER = "endDelimiter"
    AT_SEPARATOR = "atSeparator"
    AT_TERMINATOR = "atTerminator"
    ERROR = "error"


@dataclass(frozen=True)
class StructuralError:
    """A grammar violation at an absolute character offset of the scanned text."""

    position: int
    char: str
    reason: str = "unexpected character"

    @property
    def message(self) -> str:
        return f"Character at position {self.position} is invalid: {self.char!r} ({self.reason})."

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": "structural",
            "position": self.position,
            "char": self.char,
            "reason": self.reason,
            "message": self.message,
        }


@dataclass(frozen=True)
class ScanResult:
    """Outcome of a scan: either a document of rows or the first structural error."""

    document: Document = field(default_factory=tuple)
    error: Optional[StructuralError] = None

    @property
    def is_valid(self) -> bool:
        return self.error is None

    @property
    def rows(self) -> int:
        return len(self.document)

    def to_dict(self) -> dict[str, Any]:
        return {
            "is_valid": self.is_valid,
            "rows": self.rows,
            "error": self.error.to_dict() if self.error else None,
        }


def next_state(
    state: ScanState,
    char: str,
    lookahead: Optional[str],
    config: GrammarConfig,
) -> ScanState:
    """Return the state reached by consuming ``char`` from ``state``.

    ``lookahead`` is the character following ``char`` or ``None`` at the end
    of input.
    """
    # Inside an open field every non-delimiter character is literal data.
    if state is ScanState.INSIDE_DELIMITER and char != config.delimiter:
        return ScanState.INSIDE_DELIMITER

    if char == config.delimiter:
        if state is ScanState.INSIDE_DELIMITER:
            return ScanState.END_DELIMITER
        return ScanState.START_DELIMITER

    if char == config.separator:
        if lookahead != config.delimiter and lookahead != config.terminator:
            return ScanState.ERROR
        return ScanState.AT_SEPARATOR

    if char == config.terminator:
        if lookahead is not None and lookahead != config.delimiter:
            return ScanState.ERROR
        return ScanState.AT_TERMINATOR

    if state in (ScanState.START_DELIMITER, ScanState.INSIDE_DELIMITER):
        return ScanState.INSIDE_DELIMITER
    return ScanState.ERROR


def _error_reason(char: str, config: GrammarConfig) -> str:
    if char == config.separator:
        return "a separator must be followed by a delimiter or a terminator"
    if char == config.terminator:
        return "a terminator must be followed by a delimiter or the end of input"
    return "character outside a delimited field"


def scan(text: str, config: GrammarConfig) -> ScanResult:
    """Scan ``text`` into rows of fields according to ``config``.

    Scanning stops at the first structural error. A trailing row without a
    terminator is kept as the last row; text that ends inside an open field
    is reported as an error at the delimiter that opened it.
    """
    document: list[Row] = []
    row: list[str] = []
    buffer: list[str] = []
    field_start = 0
    state = ScanState.START

    for position, char in enumerate(text):
        lookahead = text[position + 1] if position + 1 < len(text) else None
        state = next_state(state, char, lookahead, config)

        if state is ScanState.START_DELIMITER:
            buffer = []
            field_start = position
        elif state is ScanState.INSIDE_DELIMITER:
            buffer.append(char)
        elif state is ScanState.END_DELIMITER:
            row.append("".join(buffer))
            buffer = []
        elif state is ScanState.AT_TERMINATOR:
            document.append(tuple(row))
            logger.debug("row_scanned", row=len(document), fields=len(row), position=position)
            row = []
        elif state is ScanState.ERROR:
            error = StructuralError(position=position, char=char, reason=_error_reason(char, config))
            logger.info("structural_error", position=position, char=char, reason=error.reason)
            return ScanResult(error=error)

    if state in (ScanState.START_DELIMITER, ScanState.INSIDE_DELIMITER):
        error = StructuralError(
            position=field_start,
            char=config.delimiter,
            reason="field is not closed before the end of input",
        )
        logger.info("structural_error", position=field_start, char=config.delimiter, reason=error.reason)
        return ScanResult(error=error)

    if row:
        document.append(tuple(row))
        logger.debug("trailing_row_finalized", row=len(document), fields=len(row))

    logger.debug("scan_completed", rows=len(document), characters=len(text))
    return ScanResult(document=tuple(document))


def normalize_newlines(text: str) -> str:
    """Collapse CR+LF pairs into a single LF."""
    return text.replace("\r\n", "\n")


def scan_file(path: str | Path, config: GrammarConfig) -> ScanResult:
    """Read a record file and scan it; only CR+LF sequences are rewritten."""
    with open(path, "r", encoding="utf-8", newline="") as f:
        text = f.read()
    return scan(normalize_newlines(text), config)
