from fastapi import FastAPI, Query, Request
from fastapi.responses import JSONResponse
import time
import uuid
from app.models import (
    ExpiringRecipesRequest,
    ExpiringRecipesResponse,
    RecipeSearchRequest,
    RecipeSearchResponse,
    RecognitionRequest,
    RecognitionResponse,
    ResolveSubstituteRequest,
    ResolveSubstituteResponse,
    SubstitutionsResponse,
    WasteProneResponse,
)
from app.core.errors import RecipeSourceError, RecognitionError
from app.core.logging_config import get_logger
from app.services.ai_service import ai_service
from app.services.inventory import inventory_from_request
from app.services.recipe_service import paginate, recipe_service
from app.services.request_validator import request_validator
from app.services.substitution_service import find_available_substitute, find_substitutions
from app.services.waste_classifier import is_waste_prone

app = FastAPI(title="Pantry Match API", version="0.1.0")
logger = get_logger(__name__)
RATE_LIMIT = 60
RATE_LIMIT_WINDOW_SECONDS = 60
rate_limit_state = {}

def prune_rate_limit_state(now: float) -> None:
    expired = [
        ip for ip, state in rate_limit_state.items()
        if now - state["window_start"] > RATE_LIMIT_WINDOW_SECONDS
    ]
    for ip in expired:
        del rate_limit_state[ip]

@app.middleware("http")
async def rate_limit_requests(request: Request, call_next):
    now = time.time()
    prune_rate_limit_state(now)
    client_ip = request.client.host if request.client else "unknown"
    state = rate_limit_state.get(client_ip)

    if not state or now - state["window_start"] > RATE_LIMIT_WINDOW_SECONDS:
        state = {"window_start": now, "count": 0}

    if state["count"] >= RATE_LIMIT:
        return JSONResponse(
            status_code=429,
            content={
                "error_code": "RATE_LIMIT_EXCEEDED",
                "message": "Too many requests. Please retry later."
            }
        )

    state["count"] += 1
    rate_limit_state[client_ip] = state
    return await call_next(request)

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

@app.exception_handler(RecipeSourceError)
async def recipe_source_error_handler(request: Request, exc: RecipeSourceError):
    logger.error(f"Recipe source failure ({exc.error_code}): {exc.errors or exc.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "error_code": exc.error_code,
            "message": exc.message,
            "sources": exc.sources,
            "errors": exc.errors
        }
    )

@app.exception_handler(RecognitionError)
async def recognition_error_handler(request: Request, exc: RecognitionError):
    logger.error(f"Recognition failure ({exc.error_code}): {exc.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "error_code": exc.error_code,
            "message": exc.message
        }
    )

@app.get("/")
def read_root():
    return {"message": "Welcome to the Pantry Match API. Visit /docs for documentation."}


@app.post("/api/get-recipes", response_model=RecipeSearchResponse)
def get_recipes(request: RecipeSearchRequest):
    """
    Find recipes for the supplied ingredients/inventory, ranked by how much food they rescue.
    """
    start = time.time()
    ingredients = request_validator.validate_search(request)
    inventory = inventory_from_request(ingredients, request.inventory)

    if request.filters is not None:
        recipes = recipe_service.get_waste_reduction_recipes(inventory, request.filters, request.sources)
    else:
        recipes = recipe_service.search_recipes_by_ingredients(inventory, False, request.sources)

    page, pagination = paginate(recipes, request.pagination.page, request.pagination.limit)
    return RecipeSearchResponse(
        recipes=page,
        total_results=len(recipes),
        pagination=pagination,
        metadata={
            "search_ingredients": ingredients,
            "applied_filters": request.filters.model_dump() if request.filters else {},
            "sources": request.sources,
            "processing_time_ms": round((time.time() - start) * 1000.0, 1)
        }
    )


@app.post("/api/expiring-recipes", response_model=ExpiringRecipesResponse)
def get_expiring_recipes(request: ExpiringRecipesRequest):
    """
    Recipes that use up inventory expiring within `days_ahead` days.
    """
    recipes = recipe_service.get_expiration_based_recipes(request.inventory, request.days_ahead, request.sources)
    return ExpiringRecipesResponse(recipes=recipes, total_results=len(recipes))


@app.get("/api/substitutions", response_model=SubstitutionsResponse)
def get_substitutions(ingredient: str = Query(..., min_length=1)):
    return SubstitutionsResponse(ingredient=ingredient, substitutes=find_substitutions(ingredient))


@app.post("/api/substitutions/resolve", response_model=ResolveSubstituteResponse)
def resolve_substitute(request: ResolveSubstituteRequest):
    """
    Pick a substitute for a missing ingredient. `match` is null when no substitute is known.
    """
    match = find_available_substitute(request.missing_ingredient, request.available_ingredients)
    return ResolveSubstituteResponse(missing_ingredient=request.missing_ingredient, match=match)


@app.get("/api/waste-prone", response_model=WasteProneResponse)
def get_waste_prone(ingredient: str = Query(..., min_length=1)):
    return WasteProneResponse(ingredient=ingredient, waste_prone=is_waste_prone(ingredient))


@app.post("/api/recognize-ingredients", response_model=RecognitionResponse)
def recognize_ingredients(request: RecognitionRequest):
    """
    Recognize ingredients in a base64-encoded photo.
    """
    start = time.time()
    image = request_validator.validate_image(request)
    ingredients = ai_service.recognize_ingredients(image, request.content_type.strip().lower())
    if not ingredients:
        return JSONResponse(
            status_code=422,
            content={
                "error_code": "NO_INGREDIENTS_FOUND",
                "message": "No ingredients could be recognized in the image."
            }
        )
    return RecognitionResponse(
        ingredients=ingredients,
        processing_time_ms=round((time.time() - start) * 1000.0, 1)
    )
