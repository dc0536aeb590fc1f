import pytest

from gorgias._utils._validation import (
    validate_id,
    validate_non_empty_list,
    validate_non_empty_string,
    validate_subdomain,
)
from gorgias.models.errors import ValidationError


class TestValidateSubdomain:
    @pytest.mark.parametrize("value", ["acme", "acme-support", "a", "ACME1", " acme "])
    def test_valid(self, value: str) -> None:
        validate_subdomain(value)

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_required(self, value: object) -> None:
        with pytest.raises(ValidationError) as exc_info:
            validate_subdomain(value)

        assert exc_info.value.field == "subdomain"
        assert exc_info.value.constraint == "required"

    @pytest.mark.parametrize(
        "value", ["-acme", "acme-", "acme.com", "ac me", "a" * 64, "acme_1"]
    )
    def test_format(self, value: str) -> None:
        with pytest.raises(ValidationError) as exc_info:
            validate_subdomain(value)

        assert exc_info.value.constraint == "format"

    def test_max_length(self) -> None:
        validate_subdomain("a" * 63)


class TestValidateId:
    @pytest.mark.parametrize("value", [1, 42, 10**12, 5.0])
    def test_valid(self, value: object) -> None:
        validate_id(value, "ticket_id")

    @pytest.mark.parametrize("value", ["1", None, True, False, [1]])
    def test_type(self, value: object) -> None:
        with pytest.raises(ValidationError) as exc_info:
            validate_id(value, "ticket_id")

        assert exc_info.value.field == "ticket_id"
        assert exc_info.value.constraint == "type"

    @pytest.mark.parametrize("value", [1.5, float("nan"), float("inf")])
    def test_integer(self, value: float) -> None:
        with pytest.raises(ValidationError) as exc_info:
            validate_id(value, "ticket_id")

        assert exc_info.value.constraint == "integer"

    @pytest.mark.parametrize("value", [0, -1, -3.0])
    def test_positive(self, value: object) -> None:
        with pytest.raises(ValidationError) as exc_info:
            validate_id(value, "ticket_id")

        assert exc_info.value.constraint == "positive"


class TestValidateCollections:
    def test_non_empty_string(self) -> None:
        validate_non_empty_string("x", "email")

        with pytest.raises(ValidationError) as exc_info:
            validate_non_empty_string("  ", "email")
        assert exc_info.value.constraint == "nonEmpty"

        with pytest.raises(ValidationError) as exc_info:
            validate_non_empty_string(3, "email")
        assert exc_info.value.constraint == "type"

    def test_non_empty_list(self) -> None:
        validate_non_empty_list(["vip"], "tags")

        with pytest.raises(ValidationError) as exc_info:
            validate_non_empty_list([], "tags")
        assert exc_info.value.constraint == "nonEmpty"

        with pytest.raises(ValidationError) as exc_info:
            validate_non_empty_list("vip", "tags")
        assert exc_info.value.constraint == "type"
