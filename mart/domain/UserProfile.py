"""UserProfile domain entity: body metrics that drive the daily nutrient targets."""
from typing import Dict, Any
from mart.utilities.constants import ACTIVITY_MULTIPLIER, DEFAULT_ACTIVITY_LEVEL

EDITABLE_FIELDS = ("name", "weight", "height", "age", "activityLevel", "city")


class UserProfile:
    def __init__(self, id: str = "", name: str = "", weight: float = 0, height: float = 0,
                 age: int = 0, activity_level: str = DEFAULT_ACTIVITY_LEVEL, city: str = ""):
        self.id = str(id)
        self.name = name
        self.weight = weight
        self.height = height
        self.age = age
        self.activity_level = activity_level
        self.city = city

    def __str__(self) -> str:
        return (f"{self.name} - {self.weight}kg, {self.height}cm, {self.age}y, "
                f"activity: {self.activity_level}, {self.city}")

    __repr__ = __str__

    def updated(self, changes: Dict[str, Any]) -> "UserProfile":
        '''Returns a copy with the given camelCase fields replaced. The id never changes.'''
        unknown = set(changes) - set(EDITABLE_FIELDS)
        if unknown:
            raise ValueError(f"Fields cannot be updated: {', '.join(sorted(unknown))}")
        level = changes.get("activityLevel")
        if level is not None and level not in ACTIVITY_MULTIPLIER:
            raise ValueError(f"Invalid activity level: {level}")
        data = self.to_dict()
        data.update(changes)
        return UserProfile.from_dict(data)

    @staticmethod
    def from_dict(data):
        d = data if isinstance(data, dict) else {}
        return UserProfile(
            id=d.get("id", ""),
            name=d.get("name", ""),
            weight=d.get("weight", 0) or 0,
            height=d.get("height", 0) or 0,
            age=d.get("age", 0) or 0,
            activity_level=d.get("activityLevel", DEFAULT_ACTIVITY_LEVEL),
            city=d.get("city", ""),
        )

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "weight": self.weight,
            "height": self.height,
            "age": self.age,
            "activityLevel": self.activity_level,
            "city": self.city,
        }
