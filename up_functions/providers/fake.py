"""
up_functions.providers.fake

Purpose:
    Synthetic record data (people, internet, address, text, commerce) backed by Faker.

Notes:
    - Every request builds its own Faker instance; nothing is shared between runs.
    - An integer `seed` param on any request makes the output reproducible.
"""

from __future__ import annotations

from typing import Callable

from faker import Faker

from up_functions.config.default_config import DEFAULT_CONFIG
from up_functions.contracts.enums import TypeTag
from up_functions.contracts.protocol import OperationResult
from up_functions.contracts.values import Params
from up_functions.dispatch import Operation, OperationTable
from up_functions.errors import InvalidParameter
from up_functions.params import get_float, get_int, get_string

_CFG = DEFAULT_CONFIG["fake"]

# Template-facing card names -> Faker card types.
_CARD_TYPES = {
    "visa": "visa16",
    "mastercard": "mastercard",
    "amex": "amex",
    "discover": "discover",
}


def make_faker(params: Params) -> Faker:
    fake = Faker(_CFG["locale"])
    seed = get_int(params, "seed", None)
    if seed is not None:
        fake.seed_instance(seed)
    return fake


def _string_op(method: Callable[[Faker], object], name: str) -> Operation:
    def op(params: Params, context: Params) -> OperationResult:
        return OperationResult(value=str(method(make_faker(params))), type=TypeTag.STRING)

    op.__name__ = name
    return op


def _coordinate_op(method: Callable[[Faker], object], name: str) -> Operation:
    def op(params: Params, context: Params) -> OperationResult:
        # Faker returns Decimal coordinates.
        return OperationResult(value=float(method(make_faker(params))), type=TypeTag.FLOAT)

    op.__name__ = name
    return op


def sentence(params: Params, context: Params) -> OperationResult:
    words = get_int(params, "words", _CFG["sentence_words"])
    if words < 1:
        raise InvalidParameter("words must be positive")
    text = make_faker(params).sentence(nb_words=words, variable_nb_words=False)
    return OperationResult(value=text, type=TypeTag.STRING)


def paragraph(params: Params, context: Params) -> OperationResult:
    sentences = get_int(params, "sentences", _CFG["paragraph_sentences"])
    if sentences < 1:
        raise InvalidParameter("sentences must be positive")
    text = make_faker(params).paragraph(nb_sentences=sentences, variable_nb_sentences=False)
    return OperationResult(value=text, type=TypeTag.STRING)


def lorem(params: Params, context: Params) -> OperationResult:
    words = get_int(params, "words", _CFG["lorem_words"])
    if words < 1:
        raise InvalidParameter("words must be positive")
    return OperationResult(value=" ".join(make_faker(params).words(nb=words)), type=TypeTag.STRING)


def price(params: Params, context: Params) -> OperationResult:
    lo = get_float(params, "min", _CFG["price_min"])
    hi = get_float(params, "max", _CFG["price_max"])
    if lo >= hi:
        raise InvalidParameter("min must be less than max")
    value = round(make_faker(params).random.uniform(lo, hi), 2)
    return OperationResult(value=value, type=TypeTag.FLOAT)


def credit_card(params: Params, context: Params) -> OperationResult:
    card_type = _CARD_TYPES.get(get_string(params, "type", ""))
    number = make_faker(params).credit_card_number(card_type=card_type)
    return OperationResult(value=number, type=TypeTag.STRING)


OPERATIONS: OperationTable = {
    # Person
    "name": _string_op(lambda f: f.name(), "name"),
    "firstName": _string_op(lambda f: f.first_name(), "first_name"),
    "lastName": _string_op(lambda f: f.last_name(), "last_name"),
    "email": _string_op(lambda f: f.email(), "email"),
    "phone": _string_op(lambda f: f.phone_number(), "phone_number"),
    "username": _string_op(lambda f: f.user_name(), "user_name"),
    # Internet
    "url": _string_op(lambda f: f.url(), "url"),
    "domain": _string_op(lambda f: f.domain_name(), "domain_name"),
    "ipv4": _string_op(lambda f: f.ipv4(), "ipv4"),
    "ipv6": _string_op(lambda f: f.ipv6(), "ipv6"),
    "userAgent": _string_op(lambda f: f.user_agent(), "user_agent"),
    # Company
    "company": _string_op(lambda f: f.company(), "company"),
    "jobTitle": _string_op(lambda f: f.job(), "job"),
    # Address
    "address": _string_op(lambda f: f.address(), "address"),
    "city": _string_op(lambda f: f.city(), "city"),
    "state": _string_op(lambda f: f.state(), "state"),
    "country": _string_op(lambda f: f.country(), "country"),
    "zipCode": _string_op(lambda f: f.postcode(), "postcode"),
    "latitude": _coordinate_op(lambda f: f.latitude(), "latitude"),
    "longitude": _coordinate_op(lambda f: f.longitude(), "longitude"),
    # Text
    "word": _string_op(lambda f: f.word(), "word"),
    "sentence": sentence,
    "paragraph": paragraph,
    "lorem": lorem,
    # Commerce
    "product": _string_op(lambda f: f.catch_phrase(), "catch_phrase"),
    "price": price,
    "currency": _string_op(lambda f: f.currency_name(), "currency_name"),
    # Color
    "color": _string_op(lambda f: f.color_name(), "color_name"),
    "hexColor": _string_op(lambda f: f.hex_color(), "hex_color"),
    # Payment
    "creditCard": credit_card,
}
