"""Unit tests for the validation chain primitives and the input gate.

Covers:
- Predicates: is_int, not_empty, is_positive_number, is_boolean.
- FieldError serialisation (value omitted when absent).
- ValidationChain: ordering, accumulation, non-object bodies.
- handle_input_errors: 400 short circuit, DTO hand-off, pydantic failures.
"""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest
from pydantic import BaseModel, field_validator
from rest_framework.parsers import JSONParser
from rest_framework.request import Request
from rest_framework.test import APIRequestFactory

from modules.core.validation import (
    MISSING,
    FieldError,
    ValidationChain,
    body,
    handle_input_errors,
    is_boolean,
    is_int,
    is_positive_number,
    not_empty,
    param,
)

pytestmark = pytest.mark.unit


# ===========================================================================
# Predicates
# ===========================================================================


class TestIsInt:
    @pytest.mark.parametrize("value", ["1", "0", "-5", "+7", "12345"])
    def test_accepts_integer_literals(self, value):
        assert is_int(value) is True

    @pytest.mark.parametrize("value", ["not-valid-url", "1.5", "", "01", " 1", MISSING])
    def test_rejects_everything_else(self, value):
        assert is_int(value) is False


class TestNotEmpty:
    @pytest.mark.parametrize("value", ["a", " ", 0, False, 350, ["x"]])
    def test_present_values(self, value):
        assert not_empty(value) is True

    @pytest.mark.parametrize("value", [MISSING, None, "", []])
    def test_empty_values(self, value):
        assert not_empty(value) is False


class TestIsPositiveNumber:
    @pytest.mark.parametrize("value", [350, 0.5, "350", " 12.5 ", "1e3"])
    def test_positive_numbers(self, value):
        assert is_positive_number(value) is True

    @pytest.mark.parametrize(
        "value",
        [0, -1, "0", "-3", "Hola", "", MISSING, None, True, float("nan"), float("inf"), "Infinity", [5]],
    )
    def test_rejects_non_positive_or_non_numeric(self, value):
        assert is_positive_number(value) is False


class TestIsBoolean:
    @pytest.mark.parametrize("value", [True, False, "true", "false", "1", "0", 1, 0])
    def test_boolean_forms(self, value):
        assert is_boolean(value) is True

    @pytest.mark.parametrize("value", [MISSING, None, "yes", "True", 2, "", "si"])
    def test_non_booleans(self, value):
        assert is_boolean(value) is False


# ===========================================================================
# FieldError
# ===========================================================================


class TestFieldError:
    def test_as_dict_with_value(self):
        error = FieldError(msg="Id no válido", path="id", location="params", value="abc")
        assert error.as_dict() == {
            "type": "field",
            "value": "abc",
            "msg": "Id no válido",
            "path": "id",
            "location": "params",
        }

    def test_as_dict_omits_missing_value(self):
        error = FieldError(msg="required", path="name", location="body")
        assert "value" not in error.as_dict()


# ===========================================================================
# ValidationChain
# ===========================================================================


@pytest.fixture()
def chain():
    return ValidationChain(
        param("id", is_int, "bad id"),
        body("name", not_empty, "name required"),
        body("price", is_positive_number, "price positive"),
        body("price", not_empty, "price required"),
    )


class TestValidationChain:
    def test_no_errors_for_valid_input(self, chain):
        assert chain.run({"id": "3"}, {"name": "Mouse", "price": 10}) == []

    def test_accumulates_in_declaration_order(self, chain):
        errors = chain.run({"id": "x"}, {})
        assert [e.msg for e in errors] == [
            "bad id",
            "name required",
            "price positive",
            "price required",
        ]

    def test_present_invalid_price_fails_once(self, chain):
        errors = chain.run({"id": "1"}, {"name": "Mouse", "price": "Hola"})
        assert [e.msg for e in errors] == ["price positive"]
        assert errors[0].value == "Hola"

    def test_non_object_body_is_treated_as_empty(self, chain):
        errors = chain.run({"id": "1"}, ["name", "price"])
        assert len(errors) == 3


# ===========================================================================
# handle_input_errors
# ===========================================================================


class _ItemDTO(BaseModel):
    id: int
    name: str

    @field_validator("name")
    @classmethod
    def name_not_reserved(cls, v: str) -> str:
        if v == "reserved":
            raise ValueError("Nombre reservado")
        return v


class _View:
    def __init__(self):
        self.calls = MagicMock()

    @handle_input_errors(
        ValidationChain(param("id", is_int, "bad id"), body("name", not_empty, "name required")),
        _ItemDTO,
    )
    def update(self, request, dto, pk=None):
        self.calls(dto=dto, pk=pk)
        return "handled"


def _request(data):
    factory = APIRequestFactory()
    return Request(factory.put("/items/1", data, format="json"), parsers=[JSONParser()])


class TestHandleInputErrors:
    def test_rejects_with_400_and_skips_handler(self):
        view = _View()
        response = view.update(_request({}), pk="abc")
        assert response.status_code == 400
        assert [e["msg"] for e in response.data["errors"]] == ["bad id", "name required"]
        view.calls.assert_not_called()

    def test_passes_dto_built_from_params_and_body(self):
        view = _View()
        result = view.update(_request({"name": "Mouse", "id": 99}), pk="7")
        assert result == "handled"
        dto = view.calls.call_args.kwargs["dto"]
        assert dto.id == 7
        assert dto.name == "Mouse"
        assert view.calls.call_args.kwargs["pk"] == "7"

    def test_dto_failure_becomes_400(self):
        view = _View()
        response = view.update(_request({"name": "reserved"}), pk="7")
        assert response.status_code == 400
        assert response.data["errors"] == [
            {
                "type": "field",
                "value": "reserved",
                "msg": "Nombre reservado",
                "path": "name",
                "location": "body",
            }
        ]
        view.calls.assert_not_called()
