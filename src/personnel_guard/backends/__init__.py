"""Backend implementations for locating the first schema violation in a set of rows."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional, Protocol, Sequence, runtime_checkable

from ..core.schema import SchemaColumn, SchemaError


@dataclass(frozen=True)
class ColumnValidationError:
    """Represents a validation failure for a specific column."""

    column: str
    message: str
    rows: Sequence[int] = field(default_factory=tuple)
    check: str | None = None
    value: Any = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "column": self.column,
            "message": self.message,
            "rows": list(self.rows),
            "check": self.check,
            "value": self.value,
        }


@runtime_checkable
class ValidationBackend(Protocol):
    """Protocol describing row validation backends."""

    name: str

    def first_failure(
        self,
        rows: Sequence[Sequence[str]],
        schema: Sequence[SchemaColumn],
        first_row: int,
    ) -> Optional[SchemaError]:
        """Return the earliest failing cell of ``rows`` in row-major, rule order.

        Every row must already have one value per schema column; ``first_row``
        is the 1-based display index of ``rows[0]``.
        """


class BackendFactory:
    """Factory for retrieving validation backends by name."""

    @staticmethod
    def get_backend_by_name(name: str) -> ValidationBackend:
        name_normalized = name.lower()
        from .native_backend import NativeBackend  # Local import to avoid cycles
        from .pandas_backend import PandasBackend

        if name_normalized == "native":
            return NativeBackend()
        if name_normalized == "pandas":
            return PandasBackend()
        raise ValueError(f"Unknown backend '{name}'")

    @staticmethod
    def available() -> tuple[str, ...]:
        return ("native", "pandas")


from .native_backend import NativeBackend
from .pandas_backend import PandasBackend

__all__ = [
    "BackendFactory",
    "ColumnValidationError",
    "NativeBackend",
    "PandasBackend",
    "ValidationBackend",
]
