"""Plan a week: assign recipes to days, compile the grocery list, save the plan."""
import logging
from pathlib import Path
from typing import Optional, Union

from averse.cli.prompts import confirm, fuzzy_select, select, title
from averse.cli.tables import GROCERY_HEADERS, PLAN_HEADERS, grocery_rows, plan_rows, print_table
from averse.domain.Plan import Plan
from averse.domain.errors import StorageError
from averse.infra.Plan_Repository import PlanRepository
from averse.infra.Recipe_Repository import RecipeRepository
from averse.infra.pdf_utils import generate_pdf_for_plan
from averse.utilities.constants import WEEK

logger = logging.getLogger(__name__)

PLAN_TITLE = "\t⇸ Plan\n"


def assign_recipes(plan: Plan, recipe_repository: RecipeRepository) -> Plan:
    """Ask for day/recipe pairs until the user declines to add another."""
    recipes = recipe_repository.list_all()
    summaries = [recipe.summary() for recipe in recipes]
    while True:
        title(PLAN_TITLE + "\nSelect Day")
        print_table(plan_rows([plan]), PLAN_HEADERS)
        day_idx = select(WEEK, "Select day", allow_cancel=False)
        recipe_idx = fuzzy_select(summaries, "Search recipes")
        if recipe_idx is not None:
            plan.add_recipe(WEEK[day_idx], recipes[recipe_idx].name)
        if not confirm("Add another recipe?"):
            return plan


def finish_plan(plan: Plan, recipe_repository: RecipeRepository, plan_repository: PlanRepository,
                pdf_path: Optional[Union[str, Path]] = None) -> Path:
    """Compile groceries, print them, write the optional PDF, then persist the plan.

    Nothing is written when a planned recipe cannot be resolved; the plan is
    not saved when the PDF cannot be written.
    """
    plan.compile_groceries(recipe_repository)
    print_table(grocery_rows(plan.groceries), GROCERY_HEADERS)
    if pdf_path:
        pdf_path = Path(pdf_path)
        try:
            pdf_path.write_bytes(generate_pdf_for_plan(plan))
        except OSError as e:
            raise StorageError(pdf_path, e) from e
        logger.info(f"Plan PDF written to {pdf_path}")
        print(f"PDF saved to {pdf_path}")
    path = plan_repository.save(plan)
    print(f"Plan saved to {path}")
    return path


def plan_week(recipe_repository: RecipeRepository, plan_repository: PlanRepository, date: str,
              pdf_path: Optional[Union[str, Path]] = None) -> Optional[Plan]:
    title(PLAN_TITLE)
    if not recipe_repository.list_all():
        print(f"No recipes found in {recipe_repository.recipe_dir}; add some first.")
        return None
    plan = assign_recipes(Plan(date), recipe_repository)
    finish_plan(plan, recipe_repository, plan_repository, pdf_path)
    return plan
