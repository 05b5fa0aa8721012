"""personnel-guard: strict pre-import validation of delimited personnel records."""

# core loads first: core.validator pulls in backends, which import core.schema.
from .core import (
    DEFAULT_GRAMMAR,
    PERSONNEL_SCHEMA,
    ConfigError,
    GrammarConfig,
    ScanResult,
    SchemaError,
    StructuralError,
    ValidationResult,
    load_grammar_config,
    scan,
    scan_file,
    validate,
)
from .backends import BackendFactory, NativeBackend, PandasBackend
from .pipeline import check_file
from .utils import configure_logging, get_logger
from .utils.reporting import ValidationReport

__version__ = "0.1.0"

__all__ = [
    "BackendFactory",
    "ConfigError",
    "DEFAULT_GRAMMAR",
    "GrammarConfig",
    "NativeBackend",
    "PERSONNEL_SCHEMA",
    "PandasBackend",
    "ScanResult",
    "SchemaError",
    "StructuralError",
    "ValidationReport",
    "ValidationResult",
    "__version__",
    "check_file",
    "configure_logging",
    "get_logger",
    "load_grammar_config",
    "scan",
    "scan_file",
    "validate",
]
