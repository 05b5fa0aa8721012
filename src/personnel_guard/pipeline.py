"""End-to-end check of a record file: load grammar, scan, validate."""

from __future__ import annotations

from pathlib import Path

from .backends import ValidationBackend
from .core.grammar import GrammarConfig, load_grammar_config
from .core.scanner import scan_file
from .core.validator import validate
from .utils.logging_config import get_logger
from .utils.reporting import ValidationReport

logger = get_logger(__name__)


def check_file(
    data_path: str | Path,
    grammar: GrammarConfig | str | Path,
    backend: str | ValidationBackend = "native",
) -> ValidationReport:
    """Scan and validate ``data_path``.

    ``grammar`` is either a loaded config or the path of a JSON grammar file;
    loading failures propagate as :class:`ConfigError`. Structural and schema
    failures are reported in the returned report.
    """
    config = grammar if isinstance(grammar, GrammarConfig) else load_grammar_config(grammar)
    logger.info("check_started", data_path=str(data_path))

    scanned = scan_file(data_path, config)
    if not scanned.is_valid:
        return ValidationReport(data_path=str(data_path), grammar=config, scan=scanned)

    result = validate(scanned.document, backend=backend)
    report = ValidationReport(data_path=str(data_path), grammar=config, scan=scanned, validation=result)
    logger.info("check_completed", data_path=str(data_path), is_valid=report.is_valid, rows=scanned.rows)
    return report
