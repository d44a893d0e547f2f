import pytest
from averse.domain.Ingredient import Ingredient, Unit
from averse.domain.Recipe import Recipe
from averse.infra.Plan_Repository import PlanRepository
from averse.infra.Recipe_Repository import RecipeRepository


@pytest.fixture
def recipe_repo(tmp_path):
    return RecipeRepository(tmp_path / "recipes")


@pytest.fixture
def plan_repo(tmp_path):
    return PlanRepository(tmp_path / "plans")


@pytest.fixture
def stocked_recipe_repo(recipe_repo):
    recipe_repo.save(Recipe("Beef Chili", tags=["soup", "mealprep"], ingredients=[
        Ingredient("beef chuck", 2, Unit.LB),
        Ingredient("kidney beans", 2, Unit.CAN),
        Ingredient("onion", 1, Unit.ITEM),
    ], steps=["Brown the beef", "Simmer everything for 2 hours"]))
    recipe_repo.save(Recipe("Pancakes", tags=["breakfast"], ingredients=[
        Ingredient("flour", 2, Unit.CUP),
        Ingredient("milk", 1, Unit.CUP),
    ], steps=["Mix", "Fry"]))
    return recipe_repo


@pytest.fixture
def scripted_input(monkeypatch):
    """Feed a fixed list of answers to input(); running out raises EOFError like a closed stdin."""
    def _script(*answers):
        remaining = list(answers)

        def fake_input(prompt=""):
            if not remaining:
                raise EOFError
            return remaining.pop(0)
        monkeypatch.setattr("builtins.input", fake_input)
        return remaining
    return _script
