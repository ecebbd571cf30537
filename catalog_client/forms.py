"""
Product form handling for the catalog client.

The form holds raw text exactly as typed. parse_form turns it into a
request payload or raises FormValidationError; nothing is sent to the
server until parsing succeeds.
"""

import math
import re
from dataclasses import dataclass

from .exceptions import FormValidationError

FORM_FIELDS = ('name', 'weight', 'price')

INVALID_FORM_MESSAGE = 'Please provide valid name, weight and price'

NUMBER_PATTERN = re.compile(r'[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?')


@dataclass(frozen=True)
class ProductForm:
    name: str = ''
    weight: str = ''
    price: str = ''


@dataclass(frozen=True)
class ProductPayload:
    name: str
    weight: float
    price: float

    def to_json(self):
        return {'name': self.name, 'weight': self.weight, 'price': self.price}


def number_to_text(value):
    """Render a number for editing: 1.0 -> '1', 2.5 -> '2.5'"""
    if value is None:
        return ''
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def form_from_record(record):
    return ProductForm(
        name=record.name,
        weight=number_to_text(record.weight),
        price=number_to_text(record.price),
    )


def _parse_number(text):
    text = text.strip()
    # Plain ASCII decimal or exponent notation, no digit separators
    if not NUMBER_PATTERN.fullmatch(text):
        raise ValueError(f"Not a decimal number: {text!r}")
    value = float(text)
    if not math.isfinite(value):
        raise ValueError(f"Not a finite number: {text!r}")
    return value


def parse_form(form):
    """
    Validate the form and build the payload.

    Raises FormValidationError if the trimmed name is empty or weight or
    price is not a finite number. Range checks are left to the server.
    """
    name = form.name.strip()
    try:
        weight = _parse_number(form.weight)
        price = _parse_number(form.price)
    except (TypeError, ValueError, AttributeError):
        raise FormValidationError(INVALID_FORM_MESSAGE)
    if not name:
        raise FormValidationError(INVALID_FORM_MESSAGE)
    return ProductPayload(name=name, weight=weight, price=price)
