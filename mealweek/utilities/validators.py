"""
Input validation schemas using Pydantic for meal and recipe forms.
"""
from typing import Literal, Optional

from pydantic import BaseModel, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from mealweek.domain.MealType import MealType
from mealweek.domain.errors import ValidationError


def _strip_required(v, what: str):
    if not isinstance(v, str) or not v.strip():
        raise ValueError(f'{what} cannot be empty')
    return v.strip()


class MealInput(BaseModel):
    """Schema for the meal form (new meal when id is missing)."""
    id: Optional[str] = None
    name: str
    type: MealType = MealType.MAIN
    date: str = Field(..., pattern=r'^\d{4}-\d{2}-\d{2}$')
    order: Optional[int] = Field(None, ge=0)
    recipe: str = ""
    notes: str = ""

    @field_validator('name', mode='before')
    @classmethod
    def validate_name(cls, v):
        return _strip_required(v, 'Meal name')

    @field_validator('recipe', 'notes', mode='before')
    @classmethod
    def none_to_empty(cls, v):
        return v or ""


class RecipeInput(BaseModel):
    """Schema for the recipe form (new recipe when id is missing)."""
    id: Optional[str] = None
    name: str
    type: MealType = MealType.MAIN
    recipe: str = ""
    favorite: Optional[bool] = None

    @field_validator('name', mode='before')
    @classmethod
    def validate_name(cls, v):
        return _strip_required(v, 'Recipe name')

    @field_validator('recipe', mode='before')
    @classmethod
    def none_to_empty(cls, v):
        return v or ""


class DragSourceInput(BaseModel):
    kind: Literal['meal', 'recipe']
    id: str = Field(..., min_length=1)


class DropTargetInput(BaseModel):
    kind: Literal['day', 'library', 'none']
    date: Optional[str] = Field(None, pattern=r'^\d{4}-\d{2}-\d{2}$')


class DropInput(BaseModel):
    """Schema for a complete drag gesture: where it started, where it ended."""
    source: DragSourceInput
    target: DropTargetInput
    copy_modifier: bool = False


class TransferModeInput(BaseModel):
    source_has_date: bool
    copy_modifier: bool = False


def parse_form(model, data):
    """Validate ``data`` against ``model``; failures become planner ValidationErrors."""
    if isinstance(data, model):
        return data
    try:
        return model.model_validate(data)
    except PydanticValidationError as e:
        first = e.errors()[0]
        field = '.'.join(str(p) for p in first.get('loc', ())) or model.__name__
        raise ValidationError(f"{field}: {first.get('msg', 'invalid value')}") from e
