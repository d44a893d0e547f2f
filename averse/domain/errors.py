"""Error taxonomy shared by the domain, storage and CLI layers.

ParseError subclasses come from free-text ingredient lines and are recovered
by re-prompting. RecipeError subclasses come from the recipe and plan stores
and abort the running command.
"""
from pathlib import Path
from typing import Iterable, Optional, Union

from averse.utilities.constants import UNITS


class AverseError(Exception):
    """Base class for every error raised by the meal planner."""


# --- Ingredient parsing ---------------------------------------------------

class ParseError(AverseError, ValueError):
    pass


class MissingFieldsError(ParseError):
    def __init__(self, text: str = ""):
        self.text = text
        super().__init__("Expected <AMOUNT> <UNIT> <INGREDIENT> (e.g. 1 lb beef)")


class InvalidAmountError(ParseError):
    def __init__(self, text: str):
        self.text = text
        super().__init__(f"AMOUNT must be a valid non-negative number, got '{text}'")


class InvalidUnitError(ParseError):
    def __init__(self, text: str, allowed: Iterable[str] = UNITS):
        self.text = text
        self.allowed = tuple(allowed)
        super().__init__(f"'{text}' is not a valid UNIT - must be one of: {', '.join(self.allowed)}")


# --- Storage --------------------------------------------------------------

class RecipeError(AverseError):
    """Failure reading, writing or decoding a stored recipe or plan."""


class StorageError(RecipeError):
    def __init__(self, path: Union[str, Path], cause: Optional[BaseException] = None):
        self.path = Path(path)
        self.cause = cause
        detail = f": {cause}" if cause else ""
        super().__init__(f"Failed to read/write {self.path}{detail}")


class NotFoundError(RecipeError):
    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        super().__init__(f"No such file: {self.path}")


class DeserializeError(RecipeError):
    def __init__(self, path: Union[str, Path], detail: str = ""):
        self.path = Path(path)
        self.detail = detail
        suffix = f" ({detail})" if detail else ""
        super().__init__(f"Failed to deserialize {self.path}{suffix}")


__all__ = [
    'AverseError', 'ParseError', 'MissingFieldsError', 'InvalidAmountError', 'InvalidUnitError',
    'RecipeError', 'StorageError', 'NotFoundError', 'DeserializeError',
]
