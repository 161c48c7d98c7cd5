"""Request validation chain and input gate.

A route declares an ordered ``ValidationChain`` of field rules.  Every
rule is evaluated against the request's path parameters and body; the
failures are accumulated in declaration order (no short circuit).

``handle_input_errors`` is the gate placed in front of a view action:
any failure ends the request with ``400 {"errors": [...]}`` before the
action runs; otherwise the action receives the route's DTO built from
the same parameters and body.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from functools import wraps
from typing import Any, Callable, Dict, List, Mapping, Optional, Type

import structlog
from django.http import QueryDict
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response

logger = structlog.get_logger(__name__)

PARAMS = "params"
BODY = "body"


class _Missing:
    """Marker for a field absent from the request."""

    def __repr__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()

_INT_RE = re.compile(r"^[-+]?(?:0|[1-9][0-9]*)$")
_NUMBER_RE = re.compile(r"^[-+]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][-+]?[0-9]+)?$")
_BOOLEAN_STRINGS = frozenset({"true", "false", "1", "0"})


# ---------------------------------------------------------------------------
# Predicates
# ---------------------------------------------------------------------------


def is_int(value: Any) -> bool:
    """Integer literal: optional sign, no leading zeros."""
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, str) and bool(_INT_RE.match(value))


def not_empty(value: Any) -> bool:
    if value is MISSING or value is None:
        return False
    if isinstance(value, (str, list, tuple)):
        return len(value) > 0
    return True


def is_positive_number(value: Any) -> bool:
    """Number, or numeric string, that is finite and strictly positive."""
    if isinstance(value, bool):
        return False
    if isinstance(value, (int, float)):
        return math.isfinite(value) and value > 0
    if isinstance(value, str):
        text = value.strip()
        if not _NUMBER_RE.match(text):
            return False
        try:
            number = Decimal(text)
        except InvalidOperation:
            return False
        return number.is_finite() and number > 0
    return False


def is_boolean(value: Any) -> bool:
    """``true``/``false`` or their string forms ``"true"``, ``"false"``, ``"1"``, ``"0"``."""
    if isinstance(value, bool):
        return True
    if isinstance(value, (int, float)):
        return value in (0, 1)
    return isinstance(value, str) and value in _BOOLEAN_STRINGS


# ---------------------------------------------------------------------------
# Chain
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class FieldError:
    msg: str
    path: str
    location: str
    value: Any = MISSING

    def as_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"type": "field"}
        if self.value is not MISSING:
            data["value"] = self.value
        data["msg"] = self.msg
        data["path"] = self.path
        data["location"] = self.location
        return data


@dataclass(frozen=True)
class Rule:
    location: str
    field: str
    check: Callable[[Any], bool]
    message: str

    def evaluate(self, sources: Mapping[str, Mapping[str, Any]]) -> Optional[FieldError]:
        value = sources[self.location].get(self.field, MISSING)
        if self.check(value):
            return None
        return FieldError(
            msg=self.message, path=self.field, location=self.location, value=value
        )


def param(field: str, check: Callable[[Any], bool], message: str) -> Rule:
    return Rule(PARAMS, field, check, message)


def body(field: str, check: Callable[[Any], bool], message: str) -> Rule:
    return Rule(BODY, field, check, message)


def as_body_mapping(data: Any) -> Dict[str, Any]:
    """Request body as a plain dict; anything but a JSON object is empty."""
    if isinstance(data, QueryDict):
        return data.dict()
    if isinstance(data, Mapping):
        return dict(data)
    return {}


class ValidationChain:
    """Ordered rules for one route."""

    def __init__(self, *rules: Rule) -> None:
        self.rules = rules

    def run(self, params: Mapping[str, Any], data: Any) -> List[FieldError]:
        sources = {PARAMS: dict(params), BODY: as_body_mapping(data)}
        errors: List[FieldError] = []
        for rule in self.rules:
            error = rule.evaluate(sources)
            if error is not None:
                errors.append(error)
        return errors


# ---------------------------------------------------------------------------
# Input gate
# ---------------------------------------------------------------------------


def _errors_response(errors: List[FieldError]) -> Response:
    return Response(
        {"errors": [error.as_dict() for error in errors]},
        status=status.HTTP_400_BAD_REQUEST,
    )


def _from_pydantic(exc: PydanticValidationError, params: Mapping[str, Any]) -> List[FieldError]:
    errors = []
    for item in exc.errors():
        path = str(item["loc"][0]) if item["loc"] else ""
        # Custom validators raise ValueError; report their own message.
        if item["type"] == "value_error":
            msg = str(item["ctx"]["error"])
        else:
            msg = item["msg"]
        errors.append(
            FieldError(
                msg=msg,
                path=path,
                location=PARAMS if path in params else BODY,
                value=item.get("input", MISSING),
            )
        )
    return errors


def handle_input_errors(chain: ValidationChain, dto_class: Type[BaseModel]):
    """Gate a view action behind ``chain``.

    The decorated action is called as ``action(self, request, dto, ...)``.
    The ``pk`` URL kwarg is exposed to the rules as the ``id`` parameter.
    """

    def decorator(action):
        @wraps(action)
        def wrapper(view, request: Request, *args, **kwargs):
            pk = kwargs.get("pk")
            params = {"id": pk} if pk is not None else {}
            data = as_body_mapping(request.data)

            errors = chain.run(params, data)
            if not errors:
                try:
                    dto = dto_class.model_validate({**data, **params})
                except PydanticValidationError as exc:
                    errors = _from_pydantic(exc, params)

            if errors:
                logger.info(
                    "request.rejected",
                    view=type(view).__name__,
                    action=action.__name__,
                    fields=[error.path for error in errors],
                )
                return _errors_response(errors)

            return action(view, request, dto, *args, **kwargs)

        return wrapper

    return decorator
