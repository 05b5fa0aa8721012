from __future__ import annotations

from typing import Optional, Sequence

from ..core.schema import SchemaColumn, SchemaError, cell_error
from . import ValidationBackend


class NativeBackend(ValidationBackend):
    """Validation backend evaluating column rules cell by cell."""

    name = "native"

    def first_failure(
        self,
        rows: Sequence[Sequence[str]],
        schema: Sequence[SchemaColumn],
        first_row: int,
    ) -> Optional[SchemaError]:
        schema = tuple(schema)
        for offset, row in enumerate(rows):
            for index, (column, value) in enumerate(zip(schema, row)):
                for rule in column.rules:
                    if not rule.check(value):
                        return cell_error(first_row + offset, index, rule, value, schema)
        return None
