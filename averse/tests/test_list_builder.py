import unittest
import tempfile
from pathlib import Path

from averse.domain.Ingredient import Ingredient, Unit
from averse.domain.Plan import Plan
from averse.domain.Recipe import Recipe
from averse.domain.errors import NotFoundError, RecipeError
from averse.infra.Recipe_Repository import RecipeRepository
from averse.logic.shopping.list_builder import compile_groceries, resolve_recipes


class TestCompileGroceries(unittest.TestCase):

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.repo = RecipeRepository(Path(self._tmp.name))
        self.repo.save(Recipe("Bread", ingredients=[
            Ingredient("flour", 1, Unit.CUP),
            Ingredient("yeast", 1, Unit.TSP),
        ]))
        self.repo.save(Recipe("Cake", ingredients=[
            Ingredient("flour", 2, Unit.CUP),
            Ingredient("sugar", 1, Unit.CUP),
            Ingredient("flour", 100, Unit.GRAM),
        ]))
        self.repo.save(Recipe("Beef Chili", ingredients=[
            Ingredient("beef chuck", 2, Unit.LB),
            Ingredient("beef chuck", 5, Unit.LB),
        ]))

    def tearDown(self):
        self._tmp.cleanup()

    def test_first_seen_amount_wins_and_is_not_summed(self):
        plan = Plan("2022-07-31", {"Monday": ["Bread"], "Tuesday": ["Cake"]})
        groceries = compile_groceries(plan, self.repo)
        flour_cups = [g for g in groceries if g.name == "flour" and g.unit == Unit.CUP]
        self.assertEqual(len(flour_cups), 1)
        self.assertEqual(flour_cups[0].amount, 1.0)  # not 3

    def test_same_name_different_unit_kept_separately(self):
        plan = Plan("2022-07-31", {"Tuesday": ["Cake"]})
        groceries = compile_groceries(plan, self.repo)
        self.assertIn(Ingredient("flour", 2, Unit.CUP), groceries)
        self.assertIn(Ingredient("flour", 100, Unit.GRAM), groceries)

    def test_duplicates_within_one_recipe_collapse(self):
        plan = Plan("2022-07-31", {"Friday": ["Beef Chili"]})
        self.assertEqual(compile_groceries(plan, self.repo), [Ingredient("beef chuck", 2, Unit.LB)])

    def test_repeated_recipe_does_not_multiply(self):
        plan = Plan("2022-07-31", {"Monday": ["Bread", "Bread"], "Friday": ["Bread"]})
        self.assertEqual(compile_groceries(plan, self.repo),
                         [Ingredient("flour", 1, Unit.CUP), Ingredient("yeast", 1, Unit.TSP)])

    def test_order_follows_week_then_first_seen(self):
        # Cake on Sunday comes before Bread on Monday, whatever order the days were assigned in
        plan = Plan("2022-07-31")
        plan.add_recipe("Monday", "Bread")
        plan.add_recipe("Sunday", "Cake")
        groceries = compile_groceries(plan, self.repo)
        self.assertEqual([(g.name, str(g.unit), g.amount) for g in groceries], [
            ("flour", "Cup", 2.0),
            ("sugar", "Cup", 1.0),
            ("flour", "Gram", 100.0),
            ("yeast", "Tsp", 1.0),
        ])

    def test_name_is_case_sensitive(self):
        self.repo.save(Recipe("Rolls", ingredients=[Ingredient("Flour", 4, Unit.CUP)]))
        plan = Plan("2022-07-31", {"Monday": ["Bread", "Rolls"]})
        names = [g.name for g in compile_groceries(plan, self.repo)]
        self.assertEqual(names, ["flour", "yeast", "Flour"])

    def test_empty_plan(self):
        self.assertEqual(compile_groceries(Plan("2022-07-31"), self.repo), [])

    def test_missing_recipe_fails_whole_aggregation(self):
        plan = Plan("2022-07-31", {"Monday": ["Bread"], "Tuesday": ["Gone Recipe"]})
        with self.assertRaises(NotFoundError):
            compile_groceries(plan, self.repo)
        with self.assertRaises(RecipeError):
            plan.compile_groceries(self.repo)
        self.assertEqual(plan.groceries, [])

    def test_recipe_named_like_a_file_resolves_by_name(self):
        self.repo.save(Recipe("Notes.yaml", ingredients=[Ingredient("paper", 1, Unit.ITEM)]))
        plan = Plan("2022-07-31", {"Monday": ["Notes.yaml"]})
        self.assertEqual(compile_groceries(plan, self.repo), [Ingredient("paper", 1, Unit.ITEM)])

    def test_plan_compile_groceries_sets_attribute(self):
        plan = Plan("2022-07-31", {"Monday": ["Bread"]}).compile_groceries(self.repo)
        self.assertEqual(len(plan.groceries), 2)

    def test_resolve_recipes_loads_each_name_once(self):
        calls = []
        repo = self.repo

        class CountingRepository:
            def load(self, name):
                calls.append(name)
                return repo.load(name)

        plan = Plan("2022-07-31", {"Monday": ["Bread", "Cake"], "Friday": ["Bread"]})
        resolved = list(resolve_recipes(plan, CountingRepository()))
        self.assertEqual([r.name for r in resolved], ["Bread", "Cake", "Bread"])
        self.assertEqual(calls, ["Bread", "Cake"])


if __name__ == '__main__':
    unittest.main()
