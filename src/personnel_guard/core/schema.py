"""Fixed personnel schema and the rules each column is checked against."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Optional

LETTERS_PATTERN = re.compile(r"[a-zA-Z\s,]+")
DIGITS_PATTERN = re.compile(r"[0-9]+")

TEXT_MAX_LENGTH = 50
AGE_MIN = 18
AGE_MAX = 125
AGE_MAX_DIGITS = 3
ALLOWED_GENDERS: tuple[str, ...] = ("Male", "Female", "male", "female")


class ColumnKind(str, Enum):
    TEXT = "text"
    INTEGER = "integer"


@dataclass(frozen=True)
class ColumnRule:
    """A single predicate over a cell value with the reason reported on failure.

    ``reason`` may reference the offending cell as ``{value}``.
    """

    code: str
    predicate: Callable[[Any], bool]
    reason: str

    def check(self, value: Any) -> bool:
        return bool(self.predicate(value))

    def describe(self, value: Any) -> str:
        return self.reason.format(value=value)


@dataclass(frozen=True)
class SchemaColumn:
    name: str
    kind: ColumnKind
    rules: tuple[ColumnRule, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class SchemaError:
    """A schema violation addressed by 1-based row and column.

    Column-count violations carry ``column=None`` together with the expected
    and found counts.
    """

    row: int
    reason: str
    column: Optional[int] = None
    field: Optional[str] = None
    expected: Optional[int] = None
    found: Optional[int] = None

    @property
    def message(self) -> str:
        if self.column is None:
            return f"Row {self.row} {self.reason}"
        return f"Row {self.row}, Column {self.column} ({self.field}): {self.reason}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": "schema",
            "row": self.row,
            "column": self.column,
            "field": self.field,
            "reason": self.reason,
            "expected": self.expected,
            "found": self.found,
            "message": self.message,
        }


def _is_letters(value: Any) -> bool:
    return isinstance(value, str) and LETTERS_PATTERN.fullmatch(value) is not None


def _is_digits(value: Any) -> bool:
    return isinstance(value, str) and DIGITS_PATTERN.fullmatch(value) is not None


def _age_in_range(value: Any) -> bool:
    # Non-numeric cells already fail the integer rule, which runs first.
    if not _is_digits(value):
        return False
    significant = value.lstrip("0")
    # Anything longer than AGE_MAX is out of range without converting it.
    if len(significant) > len(str(AGE_MAX)):
        return False
    return AGE_MIN <= int(significant or "0") <= AGE_MAX


LETTERS_ONLY = ColumnRule("letters_only", _is_letters, "Expected letters only.")
TEXT_LENGTH = ColumnRule(
    "text_length",
    lambda value: isinstance(value, str) and len(value) <= TEXT_MAX_LENGTH,
    f"Exceeds {TEXT_MAX_LENGTH} character limit.",
)
GENDER_VALUE = ColumnRule(
    "gender_value",
    lambda value: value in ALLOWED_GENDERS,
    'Expected "Male" or "Female", but found "{value}".',
)
INTEGER_ONLY = ColumnRule("integer_only", _is_digits, "Expected an integer.")
# The reported lower bound is kept as "0" to match existing diagnostics; the check uses AGE_MIN.
AGE_RANGE = ColumnRule("age_range", _age_in_range, f"Age must be between 0 and {AGE_MAX}.")
AGE_DIGITS = ColumnRule(
    "age_digits",
    lambda value: isinstance(value, str) and len(value) <= AGE_MAX_DIGITS,
    "Age must not exceed three digits.",
)

TEXT_RULES: tuple[ColumnRule, ...] = (LETTERS_ONLY, TEXT_LENGTH)

PERSONNEL_SCHEMA: tuple[SchemaColumn, ...] = (
    SchemaColumn("name", ColumnKind.TEXT, TEXT_RULES),
    SchemaColumn("age", ColumnKind.INTEGER, (INTEGER_ONLY, AGE_RANGE, AGE_DIGITS)),
    SchemaColumn("profession", ColumnKind.TEXT, TEXT_RULES),
    SchemaColumn("gender", ColumnKind.TEXT, TEXT_RULES + (GENDER_VALUE,)),
)


def column_count_error(row: int, found: int, schema: tuple[SchemaColumn, ...] = PERSONNEL_SCHEMA) -> SchemaError:
    expected = len(schema)
    comparison = "more" if found > expected else "fewer"
    return SchemaError(
        row=row,
        reason=(
            f"has {comparison} columns than expected. "
            f"Expected {expected} columns but found {found}."
        ),
        expected=expected,
        found=found,
    )


def cell_error(row: int, column_index: int, rule: ColumnRule, value: Any,
               schema: tuple[SchemaColumn, ...] = PERSONNEL_SCHEMA) -> SchemaError:
    """Build the error for ``rule`` failing at 0-based ``column_index`` of display row ``row``."""
    return SchemaError(
        row=row,
        column=column_index + 1,
        field=schema[column_index].name,
        reason=rule.describe(value),
    )
