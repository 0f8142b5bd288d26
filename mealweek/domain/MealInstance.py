"""MealInstance domain entity: a named meal scheduled on one calendar date."""
from typing import Optional

from mealweek.domain.MealType import MealType


class MealInstance:
    def __init__(self, name: str = "", type=MealType.MAIN, date: str = "", order: int = 0,
                 recipe: str = "", notes: str = "", id: Optional[str] = None,
                 owner_id: Optional[str] = None):
        self.id = id
        self.name = name
        self.type = MealType.parse(type)
        self.date = date or ""
        self.order = int(order or 0)
        self.recipe = recipe or ""
        self.notes = notes or ""
        self.owner_id = owner_id  # reserved for multi-user support

    def __str__(self) -> str:
        return f"{self.name} ({self.type.value}) on {self.date or '-'} #{self.order}"

    def __repr__(self) -> str:
        return f"MealInstance(id={self.id!r}, {self})"

    def __eq__(self, other):
        if not isinstance(other, MealInstance):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    @property
    def has_date(self) -> bool:
        return bool(self.date)

    def copy(self, **changes) -> "MealInstance":
        data = self.to_dict()
        data.update(changes)
        return MealInstance.from_dict(data)

    @staticmethod
    def from_dict(data):
        d = dict(data)
        return MealInstance(
            id=d.get("id"),
            name=d.get("name", ""),
            type=d.get("type", MealType.MAIN),
            date=d.get("date", ""),
            order=d.get("order", 0),
            recipe=d.get("recipe", ""),
            notes=d.get("notes", ""),
            owner_id=d.get("userId", d.get("owner_id")),
        )

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "type": self.type.value,
            "date": self.date,
            "order": self.order,
            "recipe": self.recipe,
            "notes": self.notes,
            "userId": self.owner_id,
        }

    def fields(self):
        """Mutable fields as stored, without the id."""
        d = self.to_dict()
        d.pop("id")
        return d
