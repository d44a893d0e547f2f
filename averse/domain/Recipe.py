"""Recipe domain entity: name, tags, ingredients, steps."""
from typing import Any, Dict, List, Optional

from averse.domain.Ingredient import Ingredient
from averse.utilities.constants import SUMMARY_SEPARATOR


class Recipe:
    def __init__(self, name: str, tags: Optional[List[str]] = None,
                 ingredients: Optional[List[Ingredient]] = None, steps: Optional[List[str]] = None):
        if not isinstance(name, str) or not name.strip():
            raise ValueError("Recipe name cannot be empty")
        if "/" in name or "\\" in name or name.startswith("."):
            raise ValueError(f"Recipe name cannot contain a path separator or start with '.': {name!r}")
        self.name = name
        self.tags = tags[:] if tags else []
        self.ingredients = ingredients[:] if ingredients else []
        self.steps = steps[:] if steps else []

    def __eq__(self, other) -> bool:
        if not isinstance(other, Recipe):
            return NotImplemented
        return (self.name == other.name and self.tags == other.tags
                and self.ingredients == other.ingredients and self.steps == other.steps)

    def summary(self) -> str:
        '''One-line description used for fuzzy searching: padded name, then tags.'''
        return f"{self.name:30}{SUMMARY_SEPARATOR}{', '.join(self.tags)}"

    def __str__(self) -> str:
        lines = [self.name, f"\t→ Tags: {', '.join(self.tags)}", ""]
        lines.extend(f"⇒ {ingredient}" for ingredient in self.ingredients)
        lines.append("")
        lines.extend(f"{i}. {step}" for i, step in enumerate(self.steps, start=1))
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"Recipe(name={self.name!r}, tags={self.tags!r}, ingredients={len(self.ingredients)}, steps={len(self.steps)})"

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "Recipe":
        return Recipe(
            name=data["name"],
            tags=list(data.get("tags") or []),
            ingredients=[Ingredient.from_dict(ing) for ing in data.get("ingredients") or []],
            steps=list(data.get("steps") or []),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "tags": self.tags,
            "ingredients": [ing.to_dict() for ing in self.ingredients],
            "steps": self.steps,
        }
