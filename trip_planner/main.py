# main.py
# FastAPI app exposing POST /api/generate-itinerary - mirrors the form's TravelRequest

import logging
from contextlib import asynccontextmanager
from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from trip_planner import config
from trip_planner.errors import ItineraryGenerationError
from trip_planner.models import ErrorResponse, TravelRequest
from trip_planner.providers.gemini import GeminiProvider
from trip_planner.service import ItineraryService


def build_itinerary_service() -> ItineraryService:
    # raises MissingApiKeyError when no key is configured
    provider = GeminiProvider(config.GEMINI_API_KEY, model=config.GEMINI_MODEL, json_mode=config.GEMINI_JSON_MODE)
    return ItineraryService(provider, timeout_s=config.GENERATION_TIMEOUT_S)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # no key -> startup fails
    app.state.itinerary_service = build_itinerary_service()
    yield


app = FastAPI(title="Trip Planner API", version="0.1.0", lifespan=lifespan)

origins = [config.FRONTEND_LOCAL]
if config.FRONTEND_PROD:
    origins.append(config.FRONTEND_PROD)

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# logging
logging.basicConfig(level=config.LOG_LEVEL)
log = logging.getLogger("trip-planner")

INVALID_REQUEST = "Missing or invalid required fields"
GENERATION_FAILED = "Failed to generate itinerary. Please try again."


def get_itinerary_service(request: Request) -> ItineraryService:
    return request.app.state.itinerary_service


# global JSON error handling
# - validation errors -> 400 { "error": "Missing or invalid required fields" }
# - HTTPException -> { "error": <detail> }
# - ItineraryGenerationError / anything else -> 500 generic message
@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    log.warning("invalid request: %s", exc.errors())
    return JSONResponse(status_code=400, content={"error": INVALID_REQUEST})


@app.exception_handler(HTTPException)
async def http_error_handler(request: Request, exc: HTTPException):
    log.warning("HTTP %s: %s", exc.status_code, exc.detail)
    return JSONResponse(status_code=exc.status_code, content={"error": str(exc.detail)})


@app.exception_handler(ItineraryGenerationError)
async def generation_error_handler(request: Request, exc: ItineraryGenerationError):
    # already logged with traceback by the service
    return JSONResponse(status_code=500, content={"error": GENERATION_FAILED})


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    # log stack once. do not leak details to client
    log.exception("Error in generate itinerary handler")
    return JSONResponse(status_code=500, content={"error": GENERATION_FAILED})


@app.post(
    "/api/generate-itinerary",
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def generate_itinerary(req: TravelRequest, service: ItineraryService = Depends(get_itinerary_service)):
    """
    Build an itinerary for the trip: prompt Gemini, parse its JSON, attach image URLs.
    Falls back to a demo itinerary when the API key is blocked.
    """
    return await service.generate_itinerary(req)


@app.get("/health")
def health():
    return {"ok": True}
