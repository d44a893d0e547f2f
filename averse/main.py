"""Averse command line: add, view, plan and behold meals for the week."""
import argparse
import logging
import re
import sys
from typing import List, Optional

from averse.cli.add import add_recipe
from averse.cli.behold import display_plans
from averse.cli.plan import plan_week
from averse.cli.view import display_recipes
from averse.domain.errors import AverseError
from averse.infra.Plan_Repository import PlanRepository
from averse.infra.Recipe_Repository import RecipeRepository
from averse.utilities.config import LOG_LEVEL, N_PLANS, PLAN_DIR, RECIPE_DIR
from averse.utilities.constants import DATE_PATTERN, VERSION

logger = logging.getLogger(__name__)


def plan_date(value: str) -> str:
    """Plan names become file names: reject blanks and path separators; warn on non-dates."""
    value = value.strip()
    if not value or "/" in value or "\\" in value or value.startswith("."):
        raise argparse.ArgumentTypeError(f"invalid plan date: {value!r}")
    if not re.match(DATE_PATTERN, value):
        logger.warning(f"Plan date '{value}' is not in YEAR-MONTH-DAY form")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='averse', description='A meal planner: store, search, view and plan meals for the week')
    parser.add_argument('-r', '--recipe-dir', default=RECIPE_DIR, help='Path to recipe directory')
    parser.add_argument('-p', '--plan-dir', default=PLAN_DIR, help='Path to plans directory')
    parser.add_argument('--log-level', default=LOG_LEVEL,
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'], type=str.upper,
                        help='Logging verbosity')
    parser.add_argument('--version', action='version', version=f'%(prog)s {VERSION}')

    subparsers = parser.add_subparsers(dest='command', required=True)
    subparsers.add_parser('add', help='Add recipe interactively')
    subparsers.add_parser('view', help='View & filter recipes')
    plan_parser = subparsers.add_parser('plan', help='Plan meals + grocery list for the week')
    plan_parser.add_argument('-d', '--date', required=True, type=plan_date,
                             help='Date in the form (YEAR-MONTH-DAY) e.g. 2022-05-15')
    plan_parser.add_argument('--pdf', help='Also export the plan and grocery list to this PDF file')
    behold_parser = subparsers.add_parser('behold', help='Display weekly plans, select a day to show recipe details')
    behold_parser.add_argument('-n', '--n-plans', type=int, default=N_PLANS, help='Number of plans to display')
    return parser


def run(args: argparse.Namespace) -> None:
    recipes = RecipeRepository(args.recipe_dir)
    plans = PlanRepository(args.plan_dir)
    if args.command == 'add':
        add_recipe(recipes)
    elif args.command == 'view':
        display_recipes(recipes)
    elif args.command == 'plan':
        plan_week(recipes, plans, args.date, pdf_path=args.pdf)
    elif args.command == 'behold':
        display_plans(recipes, plans, args.n_plans)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, format='%(levelname)s %(name)s: %(message)s')
    try:
        run(args)
    except (KeyboardInterrupt, EOFError):
        print("\nAborted.", file=sys.stderr)
        return 130
    except (AverseError, OSError) as e:
        logger.debug("Command failed", exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
