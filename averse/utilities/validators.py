"""
Schemas for stored recipe and plan documents, using Pydantic for data integrity.
The repositories validate every loaded YAML document against these before
building domain objects.
"""
import math
from datetime import date
from typing import Dict, List

from pydantic import BaseModel, Field, field_validator

from averse.domain.Ingredient import Unit
from averse.utilities.constants import WEEK


class IngredientDocument(BaseModel):
    """Schema for a stored ingredient."""
    name: str
    amount: float = Field(..., ge=0)
    unit: str

    @field_validator('amount')
    @classmethod
    def validate_amount(cls, v):
        if not math.isfinite(v):
            raise ValueError('amount must be a finite number')
        return abs(v)

    @field_validator('unit')
    @classmethod
    def validate_unit(cls, v):
        """Normalise to the unit display form; unknown units are rejected."""
        return Unit.parse(v).value


class RecipeDocument(BaseModel):
    """Schema for a stored recipe."""
    name: str = Field(..., min_length=1)
    tags: List[str] = Field(default_factory=list)
    ingredients: List[IngredientDocument] = Field(default_factory=list)
    steps: List[str] = Field(default_factory=list)

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        if not v.strip():
            raise ValueError('Recipe name cannot be empty')
        return v


class PlanDocument(BaseModel):
    """Schema for a stored plan: its date-name and day -> recipe names."""
    name: str = Field(..., min_length=1)
    recipes: Dict[str, List[str]] = Field(default_factory=dict)

    @field_validator('name', mode='before')
    @classmethod
    def date_to_str(cls, v):
        """An unquoted YYYY-MM-DD in a hand-edited file loads as a date."""
        if isinstance(v, (date, int)):
            return str(v)
        return v

    @field_validator('recipes', mode='before')
    @classmethod
    def empty_days(cls, v):
        if isinstance(v, dict):
            return {day: names if names is not None else [] for day, names in v.items()}
        return v

    @field_validator('recipes')
    @classmethod
    def validate_days(cls, v):
        unknown = [day for day in v if day not in WEEK]
        if unknown:
            raise ValueError(f"unknown day(s): {', '.join(unknown)}")
        return v
