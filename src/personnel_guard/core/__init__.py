"""Core validation primitives for personnel_guard."""

from .grammar import DEFAULT_GRAMMAR, ConfigError, GrammarConfig, load_grammar_config
from .scanner import (
    Document,
    Row,
    ScanResult,
    ScanState,
    StructuralError,
    next_state,
    normalize_newlines,
    scan,
    scan_file,
)
from .schema import PERSONNEL_SCHEMA, ColumnKind, ColumnRule, SchemaColumn, SchemaError
from .validator import ValidationResult, validate

__all__ = [
    "ColumnKind",
    "ColumnRule",
    "ConfigError",
    "DEFAULT_GRAMMAR",
    "Document",
    "GrammarConfig",
    "PERSONNEL_SCHEMA",
    "Row",
    "ScanResult",
    "ScanState",
    "SchemaColumn",
    "SchemaError",
    "StructuralError",
    "ValidationResult",
    "load_grammar_config",
    "next_state",
    "normalize_newlines",
    "scan",
    "scan_file",
    "validate",
]
