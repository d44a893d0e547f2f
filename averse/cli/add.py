"""Interactively build a recipe and save it to the recipe directory."""
import logging
from pathlib import Path
from typing import List

from averse.cli.prompts import input_msg, title
from averse.cli.tables import INGREDIENT_HEADERS, STEP_HEADERS, ingredient_rows, print_table, step_rows
from averse.domain.Ingredient import Ingredient, parse_ingredient
from averse.domain.Recipe import Recipe
from averse.domain.errors import ParseError
from averse.infra.Recipe_Repository import RecipeRepository

logger = logging.getLogger(__name__)

NAME_TITLE = "\t⇸ Recipe Name\n"
TAGS_TITLE = "\t⇸ Tags\n"
INGREDIENTS_TITLE = "\t⇸ Ingredients\n\n<AMOUNT> <UNIT> <INGREDIENT> (Ex: 1 lb beef)"
STEPS_TITLE = "\t⇸ Steps\n"


def parse_tags(text: str) -> List[str]:
    return [tag.strip() for tag in text.split(",") if tag.strip()]


def ask_name(repository: RecipeRepository) -> str:
    title(NAME_TITLE)
    while True:
        name = input_msg("Enter recipe name", allow_empty=False)
        try:
            Recipe(name)
        except ValueError as e:
            print(f"{e}\n...Please try again.\n")
            continue
        if not repository.exists(name):
            return name
        print(f"A recipe named '{name}' already exists; recipes cannot be overwritten.")


def ask_tags() -> List[str]:
    title(TAGS_TITLE)
    return parse_tags(input_msg("Enter associated tags (e.g. soup, mealprep)"))


def ask_ingredients() -> List[Ingredient]:
    ingredients: List[Ingredient] = []
    title(INGREDIENTS_TITLE)
    while True:
        if ingredients:
            print_table(ingredient_rows(ingredients), INGREDIENT_HEADERS)
        line = input_msg("Enter ingredient (or ENTER to continue)")
        if not line:
            return ingredients
        try:
            ingredients.append(parse_ingredient(line))
        except ParseError as e:
            logger.debug(f"Rejected ingredient line {line!r}: {e}")
            print(f"{e}\n...Please try again.\n")


def ask_steps() -> List[str]:
    steps: List[str] = []
    title(STEPS_TITLE)
    while True:
        if steps:
            print_table(step_rows(steps), STEP_HEADERS)
        step = input_msg("Enter step (or ENTER to quit)")
        if not step:
            return steps
        steps.append(step)


def add_recipe(repository: RecipeRepository) -> Path:
    """Prompt for name, tags, ingredients and steps; save the recipe and return its path."""
    name = ask_name(repository)
    recipe = Recipe(name, tags=ask_tags(), ingredients=ask_ingredients(), steps=ask_steps())
    path = repository.save(recipe)
    print(f"Recipe saved to {path}")
    return path
