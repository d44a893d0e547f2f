"""Grocery list builder.

Provides compile_groceries(plan, recipe_repository): resolves every recipe a
plan references and merges their ingredients into one grocery list.
"""
import logging
from typing import Dict, Iterator, List

from averse.domain.Ingredient import Ingredient
from averse.domain.Plan import Plan
from averse.domain.Recipe import Recipe

logger = logging.getLogger(__name__)


def resolve_recipes(plan: Plan, recipe_repository) -> Iterator[Recipe]:
    """Yield the recipe behind every assignment, Sunday to Saturday.

    A name assigned twice is yielded twice. Any lookup failure propagates.
    """
    cache: Dict[str, Recipe] = {}
    for day, name in plan.iter_assignments():
        if name not in cache:
            cache[name] = recipe_repository.load(name)
        yield cache[name]


def compile_groceries(plan: Plan, recipe_repository) -> List[Ingredient]:
    """Merge the ingredients of every recipe in a plan into a grocery list.

    Ingredients are identified by name and unit. The first occurrence of a
    name/unit pair wins: later occurrences are dropped and their amounts are
    NOT added to it. The list keeps first-seen order.

    Raises:
        RecipeError: a referenced recipe is missing or unreadable. No list is
            produced in that case.
    """
    recipes = list(resolve_recipes(plan, recipe_repository))

    groceries: Dict[str, Ingredient] = {}
    for recipe in recipes:
        for ingredient in recipe.ingredients:
            if ingredient.key in groceries:
                logger.debug(f"Dropping '{ingredient}' from '{recipe.name}': '{ingredient.key}' already listed")
                continue
            groceries[ingredient.key] = ingredient

    logger.info(f"Compiled {len(groceries)} groceries from {len(recipes)} planned recipes for {plan.name}")
    return list(groceries.values())


__all__ = ['compile_groceries', 'resolve_recipes']
