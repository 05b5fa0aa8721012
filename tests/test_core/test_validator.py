from __future__ import annotations

import pytest

from personnel_guard.backends import PandasBackend
from personnel_guard.core.schema import PERSONNEL_SCHEMA, ColumnKind, SchemaError
from personnel_guard.core.validator import ValidationResult, validate

HEADER = ("name", "age", "profession", "gender")


@pytest.fixture(params=["native", "pandas"])
def backend(request: pytest.FixtureRequest) -> str:
    return request.param


def person(name: str = "Alice", age: str = "30", profession: str = "Nurse", gender: str = "Female") -> tuple[str, ...]:
    return (name, age, profession, gender)


def test_schema_is_fixed_four_columns() -> None:
    assert [(column.name, column.kind) for column in PERSONNEL_SCHEMA] == [
        ("name", ColumnKind.TEXT),
        ("age", ColumnKind.INTEGER),
        ("profession", ColumnKind.TEXT),
        ("gender", ColumnKind.TEXT),
    ]


class TestValidRows:
    def test_valid_document(self, backend: str) -> None:
        result = validate([HEADER, person(), person("Smith, John", "125", "Data Analyst", "male")], backend=backend)

        assert result == ValidationResult(rows_checked=2, backend=backend)
        assert result.is_valid

    def test_header_only_document_is_valid(self, backend: str) -> None:
        assert validate([HEADER], backend=backend).is_valid

    def test_empty_document_is_valid(self, backend: str) -> None:
        result = validate([], backend=backend)

        assert result.is_valid
        assert result.rows_checked == 0

    def test_header_row_is_never_checked(self, backend: str) -> None:
        assert validate([("1", "2"), person()], backend=backend).is_valid

    @pytest.mark.parametrize("age", ["18", "125", "099"])
    def test_age_bounds_inclusive(self, backend: str, age: str) -> None:
        assert validate([HEADER, person(age=age)], backend=backend).is_valid

    def test_text_at_length_limit(self, backend: str) -> None:
        assert validate([HEADER, person(name="A" * 50)], backend=backend).is_valid

    def test_validation_is_idempotent(self, backend: str) -> None:
        document = [HEADER, person(), person(age="17")]

        assert validate(document, backend=backend) == validate(document, backend=backend)


class TestSchemaErrors:
    def test_underage(self, backend: str) -> None:
        result = validate([HEADER, ("Bob", "17", "Clerk", "Male")], backend=backend)

        assert result.error == SchemaError(row=2, column=2, field="age", reason="Age must be between 0 and 125.")
        assert result.error.message == "Row 2, Column 2 (age): Age must be between 0 and 125."

    def test_digit_in_profession(self, backend: str) -> None:
        result = validate([HEADER, ("Cara", "40", "Chef3", "Female")], backend=backend)

        assert result.error.message == "Row 2, Column 3 (profession): Expected letters only."

    @pytest.mark.parametrize("age", ["200", "1000", "99999999999999999999", "9" * 5000])
    def test_range_is_reported_before_digit_count(self, backend: str, age: str) -> None:
        result = validate([HEADER, ("Dee", age, "Pilot", "Female")], backend=backend)

        assert result.error.reason == "Age must be between 0 and 125."

    def test_digit_count_with_leading_zeros(self, backend: str) -> None:
        result = validate([HEADER, person(age="0030")], backend=backend)

        assert result.error.message == "Row 2, Column 2 (age): Age must not exceed three digits."

    @pytest.mark.parametrize("age", ["", " 30", "30 ", "-20", "+20", "3.5", "thirty", "３０", "30\n"])
    def test_age_must_be_ascii_digits(self, backend: str, age: str) -> None:
        result = validate([HEADER, person(age=age)], backend=backend)

        assert result.error.message == "Row 2, Column 2 (age): Expected an integer."

    @pytest.mark.parametrize("name", ["", "O'Brien", "Anne-Marie", "R2D2", "José"])
    def test_name_letters_only(self, backend: str, name: str) -> None:
        result = validate([HEADER, person(name=name)], backend=backend)

        assert result.error.message == "Row 2, Column 1 (name): Expected letters only."

    def test_text_over_length_limit(self, backend: str) -> None:
        result = validate([HEADER, person(profession="a" * 51)], backend=backend)

        assert result.error.message == "Row 2, Column 3 (profession): Exceeds 50 character limit."

    @pytest.mark.parametrize("gender", ["Other", "MALE", "fEmale", "Male ", "male,female"])
    def test_gender_exact_values(self, backend: str, gender: str) -> None:
        result = validate([HEADER, person(gender=gender)], backend=backend)

        assert result.error.message == (
            f'Row 2, Column 4 (gender): Expected "Male" or "Female", but found "{gender}".'
        )

    def test_gender_letters_checked_first(self, backend: str) -> None:
        result = validate([HEADER, person(gender="F3")], backend=backend)

        assert result.error.reason == "Expected letters only."

    def test_fewer_columns(self, backend: str) -> None:
        result = validate([HEADER, ("Eve", "33", "Baker")], backend=backend)

        assert result.error == SchemaError(
            row=2,
            reason="has fewer columns than expected. Expected 4 columns but found 3.",
            expected=4,
            found=3,
        )
        assert result.error.message == "Row 2 has fewer columns than expected. Expected 4 columns but found 3."

    def test_more_columns(self, backend: str) -> None:
        result = validate([HEADER, person() + ("extra",)], backend=backend)

        assert result.error.message == "Row 2 has more columns than expected. Expected 4 columns but found 5."

    def test_empty_row(self, backend: str) -> None:
        result = validate([HEADER, ()], backend=backend)

        assert result.error.found == 0


class TestFirstFailureWins:
    def test_leftmost_column_in_row(self, backend: str) -> None:
        result = validate([HEADER, ("Z9", "7", "Chef", "x")], backend=backend)

        assert (result.error.row, result.error.column) == (2, 1)

    def test_earliest_row(self, backend: str) -> None:
        document = [HEADER, person(), person(gender="x"), person(name="1"), ("short",)]

        result = validate(document, backend=backend)

        assert (result.error.row, result.error.column) == (3, 4)
        assert result.rows_checked == 2

    def test_column_count_before_later_cell_errors(self, backend: str) -> None:
        document = [HEADER, person(), ("short",), person(age="5")]

        result = validate(document, backend=backend)

        assert result.error.row == 3
        assert result.error.column is None

    def test_cell_error_before_later_column_count(self, backend: str) -> None:
        document = [HEADER, person(age="5"), ("short",)]

        result = validate(document, backend=backend)

        assert result.error.row == 2
        assert result.error.field == "age"


def test_accepts_backend_instance() -> None:
    result = validate([HEADER, person(age="17")], backend=PandasBackend())

    assert result.backend == "pandas"
    assert result.error.field == "age"


def test_unknown_backend() -> None:
    with pytest.raises(ValueError, match="Unknown backend"):
        validate([HEADER], backend="spark")


def test_result_to_dict() -> None:
    payload = validate([HEADER, person(age="17")]).to_dict()

    assert payload["is_valid"] is False
    assert payload["rows_checked"] == 1
    assert payload["error"]["kind"] == "schema"
    assert payload["error"]["row"] == 2
    assert payload["error"]["column"] == 2
    assert payload["error"]["field"] == "age"
