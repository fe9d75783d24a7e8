from typing import List, Optional, Union
from pydantic import BaseModel, Field


class Recipe(BaseModel):
    id: str
    name: str
    cuisine: str
    category: str
    tags: List[str] = Field(default_factory=list)
    ingredients: List[str] = Field(default_factory=list)
    # Display-only fields; never used for similarity.
    instructions: List[str] = Field(default_factory=list)
    image_url: Optional[str] = None
    youtube: Optional[str] = None
    source: Optional[str] = None


class RecipePayload(BaseModel):
    """Body of admin create/update calls. List fields accept a list or comma-joined text."""
    id: Optional[str] = None
    name: Optional[str] = None
    cuisine: Optional[str] = None
    category: Optional[str] = None
    instructions: Union[List[str], str, None] = None
    ingredients: Union[List[str], str, None] = None
    tags: Union[List[str], str, None] = None
    image_url: Optional[str] = None
    youtube: Optional[str] = None
    source: Optional[str] = None


class RecommendationResult(BaseModel):
    recipe: Recipe
    score: float = Field(..., ge=0.0, le=1.0, description="Weighted similarity to the target recipe")
    reasons: List[str] = Field(..., min_length=1, description="Why this recipe was recommended")


class RecommendationResponse(BaseModel):
    recipe_id: str
    recommendations: List[RecommendationResult]


class RecipeListResponse(BaseModel):
    recipes: List[Recipe]
    total: int


class HealthResponse(BaseModel):
    status: str
    recipes: int


class ErrorResponse(BaseModel):
    error_code: str
    message: str


class MessageResponse(BaseModel):
    message: str
    id: Optional[str] = None
