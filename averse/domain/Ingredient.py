"""Ingredient domain entity: amount, unit (closed vocabulary) and name, plus the free-text line parser."""
import math
from enum import Enum
from typing import Any, Dict

from averse.domain.errors import InvalidAmountError, InvalidUnitError, MissingFieldsError
from averse.utilities.constants import UNITS


class Unit(Enum):
    CAN = "Can"
    CUP = "Cup"
    GALLON = "Gallon"
    GRAM = "Gram"
    ITEM = "Item"
    KG = "Kg"
    LB = "Lb"
    OZ = "Oz"
    TBSP = "Tbsp"
    TSP = "Tsp"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, text: str) -> "Unit":
        '''Case-insensitive lookup against the unit vocabulary.'''
        lowered = text.lower() if isinstance(text, str) else ""
        for unit in cls:
            if unit.value.lower() == lowered:
                return unit
        raise InvalidUnitError(str(text), UNITS)


def format_amount(amount: float) -> str:
    return f"{amount:g}"


class Ingredient:
    def __init__(self, name: str, amount: float, unit: Unit):
        self.name = name
        self.amount = float(amount)
        self.unit = unit

    @property
    def key(self) -> str:
        '''Identity used when merging ingredients into a grocery list.'''
        return f"{self.name}_{self.unit}"

    def __eq__(self, other) -> bool:
        if not isinstance(other, Ingredient):
            return NotImplemented
        return (self.name, self.amount, self.unit) == (other.name, other.amount, other.unit)

    def __str__(self) -> str:
        return f"{format_amount(self.amount)} {self.unit} {self.name}"

    def __repr__(self) -> str:
        return f"Ingredient(name={self.name!r}, amount={self.amount!r}, unit={self.unit.name})"

    @staticmethod
    def from_str(line: str) -> "Ingredient":
        '''
        Parses "<AMOUNT> <UNIT> <INGREDIENT...>" (e.g. "2 lb beef chuck").
        Raises a ParseError subclass on malformed input.
        '''
        tokens = line.split()
        if len(tokens) < 3:
            raise MissingFieldsError(line)
        amount_text, unit_text = tokens[0], tokens[1]
        try:
            amount = float(amount_text)
        except ValueError:
            raise InvalidAmountError(amount_text) from None
        if math.copysign(1.0, amount) < 0 or not math.isfinite(amount):
            raise InvalidAmountError(amount_text)
        unit = Unit.parse(unit_text)
        return Ingredient(" ".join(tokens[2:]), amount, unit)

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "Ingredient":
        '''Builds an Ingredient from a stored mapping; the unit may be in any case.'''
        unit = data["unit"]
        if not isinstance(unit, Unit):
            unit = Unit.parse(unit)
        return Ingredient(data["name"], data["amount"], unit)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "amount": self.amount,
            "unit": self.unit.value,
        }


def parse_ingredient(line: str) -> Ingredient:
    return Ingredient.from_str(line)


__all__ = ['Unit', 'Ingredient', 'parse_ingredient', 'format_amount']
