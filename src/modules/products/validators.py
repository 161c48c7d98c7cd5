"""Validation chains of the product routes.

Order matters: errors are reported in the order the rules are declared.
``price`` carries two rules, so a missing price reports both the
positivity and the presence failure, while a present non-numeric price
(e.g. ``"Hola"``) only fails positivity.
"""

from __future__ import annotations

from modules.core.validation import (
    ValidationChain,
    body,
    is_boolean,
    is_int,
    is_positive_number,
    not_empty,
    param,
)
from modules.products.dtos import NAME_REQUIRED_MESSAGE, PRICE_POSITIVE_MESSAGE

INVALID_ID_MESSAGE = "Id no válido"
BOOLEAN_EXPECTED_MESSAGE = "Se espera un valor booleano"
# The price presence rule reports the same text as the name rule.
PRICE_REQUIRED_MESSAGE = NAME_REQUIRED_MESSAGE

_ID_RULE = param("id", is_int, INVALID_ID_MESSAGE)

_NAME_AND_PRICE_RULES = (
    body("name", not_empty, NAME_REQUIRED_MESSAGE),
    body("price", is_positive_number, PRICE_POSITIVE_MESSAGE),
    body("price", not_empty, PRICE_REQUIRED_MESSAGE),
)

PRODUCT_ID_RULES = ValidationChain(_ID_RULE)

CREATE_PRODUCT_RULES = ValidationChain(*_NAME_AND_PRICE_RULES)

UPDATE_PRODUCT_RULES = ValidationChain(
    _ID_RULE,
    *_NAME_AND_PRICE_RULES,
    body("available", is_boolean, BOOLEAN_EXPECTED_MESSAGE),
)
