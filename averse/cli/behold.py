"""Behold recent plans and drill into a day's recipe."""
from typing import Optional

from averse.cli.prompts import select, title
from averse.cli.tables import PLAN_HEADERS, plan_rows, print_table
from averse.domain.Recipe import Recipe
from averse.infra.Plan_Repository import PlanRepository
from averse.infra.Recipe_Repository import RecipeRepository


def display_plans(recipe_repository: RecipeRepository, plan_repository: PlanRepository,
                  n_plans: int) -> Optional[Recipe]:
    """Show the n most recent plans, then let the user pick plan, day and recipe to print."""
    title("\t⇸ Behold\n")
    plans = plan_repository.list_recent(n_plans)
    if not plans:
        print(f"No plans found in {plan_repository.plan_dir}.")
        return None
    print_table(plan_rows(plans), PLAN_HEADERS)

    plan_idx = select([plan.name for plan in plans], "Select plan")
    if plan_idx is None:
        return None
    plan = plans[plan_idx]

    days = plan.days()
    if not days:
        print(f"Nothing is planned for {plan.name}.")
        return None
    day_idx = select(days, "Select day")
    if day_idx is None:
        return None

    names = plan.recipes_for(days[day_idx])
    name_idx = select(names, "Select recipe")
    if name_idx is None:
        return None
    recipe = recipe_repository.load(names[name_idx])
    print(recipe)
    return recipe
