"""Table rendering for recipes, ingredients, steps, plans and grocery lists."""
from typing import Iterable, List, Sequence

from tabulate import tabulate

from averse.domain.Ingredient import Ingredient, format_amount
from averse.domain.Plan import Plan
from averse.domain.Recipe import Recipe
from averse.utilities.constants import WEEK

TABLE_FORMAT = "psql"


def render(rows: Iterable[Sequence], headers: Sequence[str]) -> str:
    return tabulate(list(rows), headers=list(headers), tablefmt=TABLE_FORMAT, disable_numparse=True)


def print_table(rows: Iterable[Sequence], headers: Sequence[str]):
    print(render(rows, headers))


def recipe_rows(recipes: List[Recipe]):
    return [(i, r.name, ", ".join(r.tags)) for i, r in enumerate(recipes)]


def ingredient_rows(ingredients: List[Ingredient]):
    return [(ing.name, format_amount(ing.amount), str(ing.unit)) for ing in ingredients]


def step_rows(steps: List[str]):
    return [(i, step) for i, step in enumerate(steps, start=1)]


def plan_rows(plans: List[Plan]):
    return [[plan.name] + ["\n".join(plan.recipes_for(day)) for day in WEEK] for plan in plans]


def grocery_rows(groceries: List[Ingredient]):
    return [(i, format_amount(ing.amount), str(ing.unit), ing.name) for i, ing in enumerate(groceries)]


RECIPE_HEADERS = ("ID", "Name", "Tags")
INGREDIENT_HEADERS = ("Name", "Amount", "Unit")
STEP_HEADERS = ("Step", "Details")
PLAN_HEADERS = ("Date",) + WEEK
GROCERY_HEADERS = ("Id", "Amount", "Unit", "Ingredient")
