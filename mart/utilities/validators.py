"""
Input validation schemas using Pydantic for request bodies.
"""
from pydantic import BaseModel, Field, field_validator
from typing import List, Optional, Literal

DAY_PATTERN = r'^(Monday|Tuesday|Wednesday|Thursday|Friday|Saturday|Sunday)$'


class ProfileUpdateInput(BaseModel):
    """Schema for a partial profile update. Omitted fields are left unchanged."""
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    weight: Optional[float] = Field(None, ge=0, le=500)
    height: Optional[float] = Field(None, ge=0, le=300)
    age: Optional[int] = Field(None, ge=0, le=130)
    activityLevel: Optional[Literal['low', 'moderate', 'high']] = None
    city: Optional[str] = Field(None, max_length=100)

    @field_validator('name', 'city')
    @classmethod
    def strip_whitespace(cls, v):
        """Remove leading/trailing whitespace."""
        if isinstance(v, str):
            return v.strip()
        return v

    def changes(self) -> dict:
        return self.model_dump(exclude_none=True)


class DayInput(BaseModel):
    day: str = Field(..., pattern=DAY_PATTERN)


class PlanItemInput(BaseModel):
    """Single product action on a planner day (defaults to the selected day)."""
    productId: str = Field(..., min_length=1)
    day: Optional[str] = Field(None, pattern=DAY_PATTERN)


class PlanQuantityInput(PlanItemInput):
    # zero or negative removes the entry
    quantity: int = Field(..., ge=-1000, le=1000)


class SelectAllInput(BaseModel):
    """Either explicit product ids, or the catalog filter that produced them."""
    day: Optional[str] = Field(None, pattern=DAY_PATTERN)
    productIds: Optional[List[str]] = None
    category: str = 'All'
    search: str = ''


class RoutineInput(BaseModel):
    enabled: bool


class CartItemInput(BaseModel):
    productId: str = Field(..., min_length=1)
    quantity: int = Field(1, ge=1, le=1000)


class CartQuantityInput(BaseModel):
    quantity: int = Field(..., ge=-1000, le=1000)
