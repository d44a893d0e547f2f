"""Plan domain entity: a date-named week of day -> recipe-name assignments plus its derived grocery list."""
from typing import Any, Dict, Iterator, List, Optional, Tuple

from averse.domain.Ingredient import Ingredient
from averse.utilities.constants import WEEK


class Plan:
    def __init__(self, name: str, recipes: Optional[Dict[str, List[str]]] = None):
        if not isinstance(name, str) or not name.strip():
            raise ValueError("Plan name cannot be empty")
        if "/" in name or "\\" in name or name.startswith("."):
            raise ValueError(f"Plan name cannot contain a path separator or start with '.': {name!r}")
        self.name = name
        self.recipes: Dict[str, List[str]] = {}
        for day, names in (recipes or {}).items():
            for recipe_name in names:
                self.add_recipe(day, recipe_name)
        # Derived from the assignments, never persisted
        self.groceries: List[Ingredient] = []

    def add_recipe(self, day: str, recipe_name: str) -> "Plan":
        if day not in WEEK:
            raise ValueError(f"Unknown day '{day}' - must be one of: {', '.join(WEEK)}")
        self.recipes.setdefault(day, []).append(recipe_name)
        return self

    def recipes_for(self, day: str) -> List[str]:
        return list(self.recipes.get(day, []))

    def days(self) -> List[str]:
        '''Days holding at least one recipe, in week order.'''
        return [day for day in WEEK if self.recipes.get(day)]

    def iter_assignments(self) -> Iterator[Tuple[str, str]]:
        '''Yields (day, recipe name) pairs: Sunday first, list order within a day.'''
        for day in WEEK:
            for recipe_name in self.recipes.get(day, []):
                yield day, recipe_name

    def compile_groceries(self, recipe_repository) -> "Plan":
        from averse.logic.shopping.list_builder import compile_groceries
        self.groceries = compile_groceries(self, recipe_repository)
        return self

    def __eq__(self, other) -> bool:
        if not isinstance(other, Plan):
            return NotImplemented
        return self.name == other.name and self.to_dict() == other.to_dict()

    def __str__(self) -> str:
        parts = [f"{day}: {', '.join(self.recipes[day])}" for day in self.days()]
        return f"Plan {self.name} - " + ("; ".join(parts) if parts else "empty")

    __repr__ = __str__

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "Plan":
        return Plan(data["name"], {day: list(names or []) for day, names in (data.get("recipes") or {}).items()})

    def to_dict(self) -> Dict[str, Any]:
        '''Only the assignments are stored; the grocery list is always recomputed.'''
        return {
            "name": self.name,
            "recipes": {day: list(self.recipes[day]) for day in WEEK if day in self.recipes},
        }
