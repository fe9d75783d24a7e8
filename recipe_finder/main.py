from typing import List, Optional
from fastapi import FastAPI, Query, Request
from fastapi.responses import JSONResponse
import time
import uuid
from recipe_finder.models import (
    ErrorResponse,
    HealthResponse,
    MessageResponse,
    Recipe,
    RecipeListResponse,
    RecipePayload,
    RecommendationResponse,
)
from recipe_finder.services.catalog_service import (
    RecipeConflictError,
    RecipeNotFoundError,
    RecipeSourceError,
    RecipeValidationError,
    catalog_service,
)
from recipe_finder.core.logging_config import get_logger

app = FastAPI(title="Recipe Finder API", version="0.1.0")
logger = get_logger(__name__)

NOT_FOUND_RESPONSES = {404: {"model": ErrorResponse}}
CREATE_RESPONSES = {400: {"model": ErrorResponse}, 409: {"model": ErrorResponse}}
UPDATE_RESPONSES = {400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}}


@app.middleware("http")
async def log_requests(request: Request, call_next):
    request_id = str(uuid.uuid4())
    start = time.time()
    response = await call_next(request)
    duration_ms = (time.time() - start) * 1000.0
    logger.info(
        f"{request.method} {request.url.path} {response.status_code} "
        f"{duration_ms:.1f}ms request_id={request_id}"
    )
    response.headers["X-Request-ID"] = request_id
    return response


@app.exception_handler(RecipeNotFoundError)
async def recipe_not_found_handler(request: Request, exc: RecipeNotFoundError):
    return JSONResponse(
        status_code=404,
        content={
            "error_code": "RECIPE_NOT_FOUND",
            "message": f"Recipe '{exc.recipe_id}' was not found."
        }
    )


@app.exception_handler(RecipeValidationError)
async def recipe_validation_handler(request: Request, exc: RecipeValidationError):
    return JSONResponse(
        status_code=400,
        content={
            "error_code": "MISSING_REQUIRED_FIELDS",
            "message": f"Missing required fields: {', '.join(exc.missing_fields)}",
            "fields": exc.missing_fields
        }
    )


@app.exception_handler(RecipeConflictError)
async def recipe_conflict_handler(request: Request, exc: RecipeConflictError):
    return JSONResponse(
        status_code=409,
        content={
            "error_code": "RECIPE_ALREADY_EXISTS",
            "message": f"Recipe '{exc.recipe_id}' already exists."
        }
    )


@app.exception_handler(RecipeSourceError)
async def recipe_source_error_handler(request: Request, exc: RecipeSourceError):
    logger.error(f"Recipe source failure: {exc.errors}")
    return JSONResponse(
        status_code=502,
        content={
            "error_code": "RECIPE_SOURCE_FAILURE",
            "message": "Failed to fetch recipes from configured sources.",
            "sources": exc.sources,
            "errors": exc.errors
        }
    )


@app.get("/")
def read_root():
    return {"message": "Welcome to the Recipe Finder API. Visit /docs for documentation."}


@app.get("/api/health", response_model=HealthResponse)
def health():
    return HealthResponse(status="ok", recipes=len(catalog_service.get_recipes()))


@app.get("/api/recipes", response_model=RecipeListResponse)
def list_recipes(
    cuisine: Optional[str] = None,
    category: Optional[str] = None,
    search: Optional[str] = None,
    sources: Optional[List[str]] = Query(default=None, description="Recipe sources to use, e.g. Local, TheMealDB")
):
    """
    List recipes ordered by name, optionally filtered by cuisine, category or a search term.
    """
    recipes = catalog_service.list_recipes(cuisine=cuisine, category=category, search=search, sources=sources)
    return RecipeListResponse(recipes=recipes, total=len(recipes))


@app.get("/api/recipes/{recipe_id}", response_model=Recipe, responses=NOT_FOUND_RESPONSES)
def get_recipe(recipe_id: str, sources: Optional[List[str]] = Query(default=None)):
    return catalog_service.get_recipe(recipe_id, sources=sources)


@app.get(
    "/api/recipes/{recipe_id}/recommendations",
    response_model=RecommendationResponse,
    responses=NOT_FOUND_RESPONSES
)
def get_recommendations(
    recipe_id: str,
    limit: Optional[int] = Query(
        default=None,
        ge=0,
        le=catalog_service.config.max_limit,
        description="Maximum number of similar recipes (defaults to the configured limit)"
    ),
    sources: Optional[List[str]] = Query(default=None)
):
    """
    Recipes similar to the given one, best match first, each with a score and reasons.
    """
    recommendations = catalog_service.similar_recipes(recipe_id, limit=limit, sources=sources)
    return RecommendationResponse(recipe_id=recipe_id, recommendations=recommendations)


@app.get("/api/cuisines", response_model=List[str])
def list_cuisines(sources: Optional[List[str]] = Query(default=None)):
    return catalog_service.cuisines(sources=sources)


@app.get("/api/categories", response_model=List[str])
def list_categories(sources: Optional[List[str]] = Query(default=None)):
    return catalog_service.categories(sources=sources)


@app.post("/api/recipes", status_code=201, response_model=MessageResponse, responses=CREATE_RESPONSES)
def create_recipe(payload: RecipePayload):
    """
    Add a recipe to the local store. List fields take a list or comma-joined text.
    """
    recipe = catalog_service.create_recipe(payload)
    return MessageResponse(message="Recipe created successfully", id=recipe.id)


@app.put("/api/recipes/{recipe_id}", response_model=MessageResponse, responses=UPDATE_RESPONSES)
def update_recipe(recipe_id: str, payload: RecipePayload):
    recipe = catalog_service.update_recipe(recipe_id, payload)
    return MessageResponse(message="Recipe updated successfully", id=recipe.id)


@app.delete("/api/recipes/{recipe_id}", response_model=MessageResponse, responses=NOT_FOUND_RESPONSES)
def delete_recipe(recipe_id: str):
    catalog_service.delete_recipe(recipe_id)
    return MessageResponse(message="Recipe deleted successfully", id=recipe_id)
