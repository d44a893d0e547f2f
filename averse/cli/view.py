"""Browse stored recipes with fuzzy search."""
from averse.cli.prompts import fuzzy_select, input_msg, title
from averse.infra.Recipe_Repository import RecipeRepository

VIEW_TITLE = "\t⇸ View Recipes\n\nType to search recipes then hit ENTER\n"


def display_recipes(repository: RecipeRepository) -> int:
    """Search loop over every stored recipe. Returns how many recipes were shown."""
    recipes = repository.list_all()
    if not recipes:
        print(f"No recipes found in {repository.recipe_dir}.")
        return 0
    summaries = [recipe.summary() for recipe in recipes]
    shown = 0
    while True:
        title(VIEW_TITLE)
        idx = fuzzy_select(summaries)
        if idx is None:
            return shown
        print(recipes[idx])
        shown += 1
        input_msg("Hit ENTER to search for another recipe")
