"""Product domain entity: catalog item with its per-unit nutrient composition."""
from typing import List, Optional, Dict, Any
from mart.utilities.constants import CALCIUM_FROM_POTASSIUM, CATEGORY_ALIASES, CATEGORY_VEGETABLES


def _non_negative(value) -> float:
    try:
        v = float(value)
    except (TypeError, ValueError):
        return 0.0
    return v if v > 0 else 0.0


def _optional(value) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    if not isinstance(value, (int, float)):
        return None
    return _non_negative(value)


def normalize_category(category: str) -> str:
    """Map any spelling of a category ('icecreams', 'fruit', ...) onto its canonical name."""
    if not isinstance(category, str):
        return CATEGORY_VEGETABLES
    return CATEGORY_ALIASES.get(category.strip().lower(), CATEGORY_VEGETABLES)


class NutrientProfile:
    """Immutable nutrition record. Optional nutrients stay None when not measured."""

    __slots__ = ("calories", "protein", "fiber", "iron", "calcium", "potassium", "vitamin_c")

    def __init__(self, calories: float = 0, protein: float = 0, fiber: float = 0, iron: float = 0,
                 calcium: Optional[float] = None, potassium: Optional[float] = None,
                 vitamin_c: Optional[float] = None):
        object.__setattr__(self, "calories", _non_negative(calories))
        object.__setattr__(self, "protein", _non_negative(protein))
        object.__setattr__(self, "fiber", _non_negative(fiber))
        object.__setattr__(self, "iron", _non_negative(iron))
        object.__setattr__(self, "calcium", _optional(calcium))
        object.__setattr__(self, "potassium", _optional(potassium))
        object.__setattr__(self, "vitamin_c", _optional(vitamin_c))

    def __setattr__(self, name, value):
        raise AttributeError("NutrientProfile is immutable")

    def calcium_mg(self) -> float:
        """Measured calcium, or the potassium-derived approximation when absent."""
        if self.calcium is not None:
            return self.calcium
        return (self.potassium or 0) * CALCIUM_FROM_POTASSIUM

    def value(self, metric: str) -> float:
        '''Per-unit amount of a metric, with missing optional nutrients read as 0.'''
        if metric == "calcium":
            return self.calcium_mg()
        if metric == "vitaminC":
            return self.vitamin_c or 0
        if metric == "potassium":
            return self.potassium or 0
        return getattr(self, metric, 0) or 0

    def __eq__(self, other):
        if not isinstance(other, NutrientProfile):
            return NotImplemented
        return all(getattr(self, k) == getattr(other, k) for k in self.__slots__)

    def __hash__(self):
        return hash(tuple(getattr(self, k) for k in self.__slots__))

    def __str__(self) -> str:
        return (f"{self.calories:g} kcal, protein {self.protein:g}g, fiber {self.fiber:g}g, "
                f"iron {self.iron:g}mg")

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        '''Creates a NutrientProfile from a JSON record (camelCase keys). Ignores unknown keys.'''
        d = data if isinstance(data, dict) else {}
        return NutrientProfile(
            calories=d.get("calories", 0),
            protein=d.get("protein", 0),
            fiber=d.get("fiber", 0),
            iron=d.get("iron", 0),
            calcium=d.get("calcium"),
            potassium=d.get("potassium"),
            vitamin_c=d.get("vitaminC"),
        )

    def to_dict(self) -> Dict[str, float]:
        out = {
            "calories": self.calories,
            "protein": self.protein,
            "fiber": self.fiber,
            "iron": self.iron,
        }
        # Absent optional nutrients are omitted, not written as 0
        if self.calcium is not None:
            out["calcium"] = self.calcium
        if self.potassium is not None:
            out["potassium"] = self.potassium
        if self.vitamin_c is not None:
            out["vitaminC"] = self.vitamin_c
        return out


class Product:
    def __init__(self, id: str = "", name: str = "", category: str = CATEGORY_VEGETABLES,
                 price: float = 0, unit: str = "", nutrition: Optional[NutrientProfile] = None,
                 image: str = "", description: str = "", popularity: float = 0,
                 health_benefits: Optional[List[str]] = None):
        self.id = str(id)
        self.name = name
        self.category = normalize_category(category)
        self.price = price
        self.unit = unit
        self.nutrition = nutrition or NutrientProfile()
        self.image = image
        self.description = description
        self.popularity = popularity
        self.health_benefits = health_benefits[:] if health_benefits else []

    def __str__(self) -> str:
        return f"{self.name} ({self.category}) - Rs {self.price}/{self.unit} - {self.nutrition}"

    __repr__ = __str__

    @staticmethod
    def from_dict(data: Dict[str, Any]):
        d = dict(data) if isinstance(data, dict) else {}
        return Product(
            id=d.get("id", ""),
            name=d.get("name", ""),
            category=d.get("category", CATEGORY_VEGETABLES),
            price=d.get("price", 0) or 0,
            unit=d.get("unit", ""),
            nutrition=NutrientProfile.from_dict(d.get("nutrition")),
            image=d.get("image", ""),
            description=d.get("description", ""),
            popularity=d.get("popularity", 0) or 0,
            health_benefits=d.get("healthBenefits"),
        )

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "category": self.category,
            "price": self.price,
            "unit": self.unit,
            "image": self.image,
            "description": self.description,
            "popularity": self.popularity,
            "healthBenefits": self.health_benefits,
            "nutrition": self.nutrition.to_dict(),
        }
