"""Schema validation of scanned personnel documents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Sequence

from ..backends import BackendFactory, ValidationBackend
from ..utils.logging_config import get_logger
from .schema import PERSONNEL_SCHEMA, SchemaColumn, SchemaError, column_count_error

logger = get_logger(__name__)

# Display index of the first data row: row 0 is the header and rows are 1-based.
FIRST_DATA_ROW = 2


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of schema validation: success or the first violation found."""

    error: Optional[SchemaError] = None
    rows_checked: int = 0
    backend: str = "native"

    @property
    def is_valid(self) -> bool:
        return self.error is None

    def to_dict(self) -> dict[str, Any]:
        return {
            "is_valid": self.is_valid,
            "rows_checked": self.rows_checked,
            "backend": self.backend,
            "error": self.error.to_dict() if self.error else None,
        }


def validate(
    document: Sequence[Sequence[str]],
    backend: str | ValidationBackend = "native",
    schema: Sequence[SchemaColumn] = PERSONNEL_SCHEMA,
) -> ValidationResult:
    """Validate every row after the header against ``schema``.

    Row 0 is always treated as the header and skipped. Rows are checked in
    order; within a row the column count is checked first, then each column's
    rules left to right. The first failure is returned.
    """
    engine = BackendFactory.get_backend_by_name(backend) if isinstance(backend, str) else backend
    schema = tuple(schema)
    data_rows = list(document)[1:]

    # Cells are only examined in rows that precede the first malformed one.
    malformed: Optional[int] = None
    for offset, row in enumerate(data_rows):
        if len(row) != len(schema):
            malformed = offset
            break

    checked_rows = data_rows if malformed is None else data_rows[:malformed]
    error = engine.first_failure(checked_rows, schema, FIRST_DATA_ROW)
    if error is None and malformed is not None:
        error = column_count_error(FIRST_DATA_ROW + malformed, len(data_rows[malformed]), schema)

    if error is None:
        logger.debug("validation_passed", rows=len(data_rows), backend=engine.name)
        return ValidationResult(rows_checked=len(data_rows), backend=engine.name)

    logger.info("schema_violation", row=error.row, column=error.column, field=error.field, reason=error.reason)
    return ValidationResult(
        error=error,
        rows_checked=error.row - FIRST_DATA_ROW + 1,
        backend=engine.name,
    )
