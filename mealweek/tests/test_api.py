import unittest
import tempfile

from fastapi.testclient import TestClient

from mealweek.api.api_run import app
from mealweek.api.dependencies import get_planner
from mealweek.events import web_observers
from mealweek.infra.Document_Store import DocumentStore
from mealweek.logic.planner import Planner


class TestPlannerApi(unittest.TestCase):

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        store = DocumentStore(self._tmp.name)
        app.dependency_overrides[get_planner] = lambda: Planner(store)
        self.client = TestClient(app)

    def tearDown(self):
        app.dependency_overrides.clear()
        self._tmp.cleanup()

    def _create_meal(self, **form):
        resp = self.client.post("/api/meals", json=form)
        self.assertEqual(resp.status_code, 200, resp.text)
        return resp.json()

    def test_create_meal_and_day_view(self):
        self._create_meal(name="tavuk sote", type="main", date="2024-06-03")
        data = self._create_meal(name="Menemen", type="breakfast", date="2024-06-03")
        self.assertEqual(data["status"], "success")
        self.assertEqual(data["sync"]["recipes_created"][0]["name"], "Menemen")

        resp = self.client.get("/api/days/2024-06-03/meals")
        body = resp.json()
        self.assertEqual([m["name"] for m in body], ["Menemen", "tavuk sote"])
        self.assertEqual(body[1]["display_name"], "Tavuk Sote")
        self.assertEqual(body[0]["type_label"], "Kahvaltı")

    def test_empty_name_is_400(self):
        resp = self.client.post("/api/meals", json={"name": "", "type": "main", "date": "2024-06-03"})
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(self.client.get("/api/meals").json(), [])

    def test_missing_meal_is_404(self):
        resp = self.client.put("/api/meals/nope", json={"name": "X", "type": "main", "date": "2024-06-03"})
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(self.client.delete("/api/meals/nope").status_code, 404)
        self.assertEqual(self.client.post("/api/recipes/nope/favorite").status_code, 404)

    def test_recipes_listing_and_duplicate_add(self):
        self.client.post("/api/recipes", json={"name": "Tavuk Sote", "type": "main"})
        resp = self.client.post("/api/recipes", json={"name": "Menemen", "type": "breakfast"})
        rid = resp.json()["recipe"]["id"]
        self.client.post(f"/api/recipes/{rid}/favorite")

        dup = self.client.post("/api/recipes", json={"name": "tavuk sote", "type": "main"})
        self.assertEqual(dup.status_code, 400)
        self.assertEqual(dup.json()["detail"], "Recipe with this name already exists")

        names = [r["name"] for r in self.client.get("/api/recipes").json()]
        self.assertEqual(names, ["Menemen", "Tavuk Sote"])
        filtered = self.client.get("/api/recipes", params={"type": "main", "search": "SOTE"}).json()
        self.assertEqual([r["name"] for r in filtered], ["Tavuk Sote"])
        favs = self.client.get("/api/recipes/favorites").json()
        self.assertEqual([r["name"] for r in favs], ["Menemen"])

    def test_recipe_edit_propagates(self):
        meal = self._create_meal(name="Mercimek Çorbası", type="main", date="2024-06-03")["meal"]
        recipe = self.client.get("/api/recipes").json()[0]
        resp = self.client.put(f"/api/recipes/{recipe['id']}",
                               json={"name": "Ezogelin Çorbası", "type": "main", "recipe": "bulgurlu"})
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(len(resp.json()["sync"]["meals_updated"]), 1)
        meals = self.client.get("/api/meals").json()
        self.assertEqual(meals[0]["id"], meal["id"])
        self.assertEqual(meals[0]["name"], "Ezogelin Çorbası")

    def test_drop_recipe_on_day(self):
        recipe = self.client.post("/api/recipes", json={"name": "Tavuk Sote", "type": "main"}).json()["recipe"]
        resp = self.client.post("/api/transfer/drop", json={
            "source": {"kind": "recipe", "id": recipe["id"]},
            "target": {"kind": "day", "date": "2024-06-10"},
        })
        self.assertEqual(resp.status_code, 200, resp.text)
        body = resp.json()
        self.assertEqual(body["mode"], "copy")
        self.assertEqual(body["action"], "create")
        self.assertEqual(body["meal"]["date"], "2024-06-10")
        self.assertEqual(body["meal"]["order"], 0)

    def test_transfer_mode_endpoint(self):
        resp = self.client.post("/api/transfer/mode", json={"source_has_date": True})
        self.assertEqual(resp.json(), {"mode": "move"})
        resp = self.client.post("/api/transfer/mode", json={"source_has_date": True, "copy_modifier": True})
        self.assertEqual(resp.json(), {"mode": "copy"})

    def test_week_endpoint(self):
        self._create_meal(name="Menemen", type="breakfast", date="2024-06-05")
        body = self.client.get("/api/week", params={"date": "2024-06-05"}).json()
        self.assertEqual((body["start"], body["end"]), ("2024-06-03", "2024-06-09"))
        self.assertEqual(body["days"][2]["meals"][0]["name"], "Menemen")
        self.assertEqual(self.client.get("/api/week", params={"date": "05.06.2024"}).status_code, 400)

    def test_clear_meals_keeps_recipes(self):
        self._create_meal(name="Menemen", type="breakfast", date="2024-06-05")
        resp = self.client.delete("/api/meals")
        self.assertEqual(resp.json()["deleted"], 1)
        self.assertEqual(len(self.client.get("/api/recipes").json()), 1)

    def test_events_feed(self):
        web_observers.start()
        web_observers.reset()
        self._create_meal(name="Menemen", type="breakfast", date="2024-06-05")
        feed = self.client.get("/api/events").json()
        self.assertEqual([e["type"] for e in feed["events"]], ["meal.created", "recipe.created"])
        self.assertEqual(feed["events"][0]["name"], "Menemen")
        newer = self.client.get("/api/events", params={"since": feed["next_cursor"]}).json()
        self.assertEqual(newer["events"], [])
