from __future__ import annotations

from typing import Optional, Sequence

import pandas as pd
from pandera import Check, Column, DataFrameSchema
from pandera.errors import SchemaError as PanderaSchemaError
from pandera.errors import SchemaErrors

from ..core.schema import SchemaColumn, SchemaError, cell_error
from . import ColumnValidationError, ValidationBackend


class PandasBackend(ValidationBackend):
    """Validation backend powered by pandas + Pandera.

    Every column rule becomes an element-wise Pandera check; the whole frame is
    validated lazily and the earliest failure case is reported.
    """

    name = "pandas"

    def build_schema(self, schema: Sequence[SchemaColumn]) -> DataFrameSchema:
        columns = {
            column.name: Column(
                checks=[
                    Check(rule.check, element_wise=True, name=rule.code, error=rule.code)
                    for rule in column.rules
                ],
                nullable=False,
            )
            for column in schema
        }
        return DataFrameSchema(columns, strict=True, ordered=True)

    def to_frame(
        self,
        rows: Sequence[Sequence[str]],
        schema: Sequence[SchemaColumn],
        first_row: int,
    ) -> pd.DataFrame:
        return pd.DataFrame(
            [list(row) for row in rows],
            columns=[column.name for column in schema],
            index=pd.RangeIndex(first_row, first_row + len(rows)),
            dtype=object,
        )

    def first_failure(
        self,
        rows: Sequence[Sequence[str]],
        schema: Sequence[SchemaColumn],
        first_row: int,
    ) -> Optional[SchemaError]:
        schema = tuple(schema)
        if not rows:
            return None

        frame = self.to_frame(rows, schema, first_row)
        try:
            self.build_schema(schema).validate(frame, lazy=True)
        except SchemaErrors as exc:
            errors = self._errors_from_failure_cases(exc.failure_cases, schema)
        except PanderaSchemaError as exc:  # pragma: no cover - only raised when not lazy
            raise RuntimeError(f"Unexpected eager schema failure: {exc}") from exc
        else:
            return None

        return self._earliest(errors, schema)

    def _errors_from_failure_cases(
        self,
        failure_cases: pd.DataFrame,
        schema: Sequence[SchemaColumn],
    ) -> list[ColumnValidationError]:
        rules = {
            (column.name, rule.code): rule
            for column in schema
            for rule in column.rules
        }
        positions = {column.name: index for index, column in enumerate(schema)}
        errors: list[ColumnValidationError] = []
        for _, row in failure_cases.iterrows():
            column = str(row.get("column"))
            check = str(row.get("check"))
            rule = rules.get((column, check))
            if rule is None and column in positions and pd.notna(row.get("check_number")):
                # Fall back to the check position when the reported identifier is not a rule code.
                rule = schema[positions[column]].rules[int(row.get("check_number"))]
                check = rule.code
            if rule is None:
                raise RuntimeError(f"Unexpected Pandera failure on column '{column}': {check}")
            index_value = row.get("index")
            indices: tuple[int, ...]
            if pd.notna(index_value):
                indices = (int(index_value),)
            else:
                indices = tuple()
            value = row.get("failure_case")
            errors.append(
                ColumnValidationError(
                    column=column,
                    message=rule.describe(value),
                    rows=indices,
                    check=check,
                    value=value,
                )
            )
        return errors

    def _earliest(
        self,
        errors: Sequence[ColumnValidationError],
        schema: tuple[SchemaColumn, ...],
    ) -> SchemaError:
        positions = {column.name: index for index, column in enumerate(schema)}
        best: tuple[int, int, int] | None = None
        chosen: ColumnValidationError | None = None
        for error in errors:
            if not error.rows:
                continue
            column_index = positions[error.column]
            codes = [rule.code for rule in schema[column_index].rules]
            key = (error.rows[0], column_index, codes.index(error.check))
            if best is None or key < best:
                best, chosen = key, error
        if chosen is None or best is None:
            raise RuntimeError("Pandera reported failures without row indices")

        row, column_index, rule_index = best
        rule = schema[column_index].rules[rule_index]
        return cell_error(row, column_index, rule, chosen.value, schema)
