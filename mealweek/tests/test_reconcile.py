import unittest

from mealweek.domain.MealInstance import MealInstance
from mealweek.domain.Recipe import Recipe
from mealweek.logic.sync.reconcile import missing_recipes, reconcile


class TestReconcile(unittest.TestCase):

    def setUp(self):
        self.meals = [
            MealInstance(id="1", name="Menemen", type="breakfast", date="2024-06-03", recipe="yumurta"),
            MealInstance(id="2", name="Tavuk Sote", type="main", date="2024-06-03"),
            MealInstance(id="3", name="Menemen", type="breakfast", date="2024-06-04"),
        ]

    def test_creates_one_recipe_per_missing_name(self):
        recipes = [Recipe(id="r1", name="Tavuk Sote", type="main")]
        drafts = missing_recipes(self.meals, recipes)
        self.assertEqual(len(drafts), 1)
        self.assertEqual(drafts[0].name, "Menemen")
        self.assertEqual(drafts[0].type.value, "breakfast")
        self.assertEqual(drafts[0].recipe, "yumurta")
        self.assertFalse(drafts[0].favorite)
        self.assertIsNone(drafts[0].id)

    def test_reconcile_keeps_existing_recipes(self):
        existing = Recipe(id="r1", name="Tavuk Sote", type="main", favorite=True)
        result = reconcile(self.meals, [existing])
        self.assertIs(result[0], existing)
        self.assertEqual(sorted(r.name for r in result), ["Menemen", "Tavuk Sote"])

    def test_idempotent(self):
        once = reconcile(self.meals, [])
        twice = reconcile(self.meals, once)
        self.assertEqual(len(once), len(twice))
        self.assertEqual(missing_recipes(self.meals, once), [])

    def test_name_match_is_exact(self):
        drafts = missing_recipes(self.meals, [Recipe(name="menemen", type="breakfast"),
                                              Recipe(name="Tavuk Sote", type="main")])
        self.assertEqual([d.name for d in drafts], ["Menemen"])
