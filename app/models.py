from datetime import date
from typing import List, Optional, Dict, Any
from pydantic import BaseModel, Field


class SubstitutionMatch(BaseModel):
    substitute: str
    available: bool


class FoodItem(BaseModel):
    name: str
    id: Optional[str] = None
    expiration_date: Optional[date] = None
    quantity: Optional[float] = None
    unit: Optional[str] = None


class Recipe(BaseModel):
    id: str
    title: str
    ready_in_minutes: int = 0
    servings: int = 1
    image: Optional[str] = None
    ingredients: List[str] = Field(default_factory=list)
    dish_types: List[str] = Field(default_factory=list)
    diets: List[str] = Field(default_factory=list)
    source_api: str


class SubstitutionSuggestion(BaseModel):
    missing: str
    substitute: str
    in_inventory: bool


class RecipeMatch(BaseModel):
    id: str
    name: str
    time: str
    ready_in_minutes: int
    difficulty: str
    image: Optional[str] = None
    ingredients: List[str]
    matched_ingredients: List[str] = Field(default_factory=list)
    missing_ingredients: List[str] = Field(default_factory=list)
    match_percentage: int
    expiring_ingredients: List[str] = Field(default_factory=list)
    waste_prone_ingredients: List[str] = Field(default_factory=list)
    waste_reduction_score: float
    waste_reduction_tags: List[str] = Field(default_factory=list)
    substitution_suggestions: List[SubstitutionSuggestion] = Field(default_factory=list)
    source: str


# --- API payloads ---

class RecipeFilters(BaseModel):
    use_expiring: bool = True
    quick_meals: bool = False
    easy_only: bool = False
    min_match_percentage: Optional[int] = Field(default=None, ge=0, le=100)
    max_cooking_time: Optional[int] = Field(default=None, gt=0)


class PaginationRequest(BaseModel):
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=20, ge=1)


class PaginationInfo(BaseModel):
    current_page: int
    total_pages: int
    has_next_page: bool
    has_previous_page: bool
    results_per_page: int


class RecipeSearchRequest(BaseModel):
    ingredients: List[Any] = Field(default_factory=list, description="Ingredient names to cook with")
    inventory: List[FoodItem] = Field(
        default_factory=list,
        description="Inventory items with optional expiration dates"
    )
    filters: Optional[RecipeFilters] = None
    sources: List[str] = Field(default=["Local"], description="List of recipe sources to use")
    pagination: PaginationRequest = Field(default_factory=PaginationRequest)


class RecipeSearchResponse(BaseModel):
    success: bool = True
    recipes: List[RecipeMatch]
    total_results: int
    pagination: PaginationInfo
    metadata: Dict[str, Any] = Field(default_factory=dict)


class ExpiringRecipesRequest(BaseModel):
    inventory: List[FoodItem]
    days_ahead: int = Field(default=3, ge=0, le=30)
    sources: List[str] = Field(default=["Local"])


class ExpiringRecipesResponse(BaseModel):
    recipes: List[RecipeMatch]
    total_results: int


class SubstitutionsResponse(BaseModel):
    ingredient: str
    substitutes: List[str]


class ResolveSubstituteRequest(BaseModel):
    missing_ingredient: str
    available_ingredients: List[str] = Field(default_factory=list)


class ResolveSubstituteResponse(BaseModel):
    missing_ingredient: str
    match: Optional[SubstitutionMatch] = None


class WasteProneResponse(BaseModel):
    ingredient: str
    waste_prone: bool


class RecognizedIngredient(BaseModel):
    name: str
    confidence: float


class RecognitionRequest(BaseModel):
    image_base64: str
    content_type: str


class RecognitionResponse(BaseModel):
    ingredients: List[RecognizedIngredient]
    processing_time_ms: float
