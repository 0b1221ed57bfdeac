from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Callable, Dict

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from fastapi.templating import Jinja2Templates

from quillquest.agents.creative import CreativeService, Outcome
from quillquest.core.logger import get_logger, log_error
from quillquest.schemas import (
    CharacterRequest,
    ContinueStoryRequest,
    PromptRequest,
    SceneRequest,
    ValidationFailure,
    WorldRequest,
    validate_request,
)

# This points to the 'quillquest/templates' folder
BASE_DIR = Path(__file__).resolve().parent.parent
templates = Jinja2Templates(directory=str(BASE_DIR / "templates"))

router = APIRouter()
logger = get_logger("routes")


# =========================
# DEPENDENCIES & HELPERS
# =========================

async def read_json_body(request: Request) -> Dict[str, Any]:
    """Request body as a mapping. Anything that is not a JSON object counts as empty."""
    try:
        body = await request.json()
    except ValueError:
        return {}
    return body if isinstance(body, dict) else {}


def get_creative_service(request: Request) -> CreativeService:
    return request.app.state.creative


def error(message: str, status_code: int = 400) -> JSONResponse:
    return JSONResponse({"error": message}, status_code=status_code)


def run_operation(failure_message: str, operation: Callable[[], Outcome]) -> JSONResponse:
    """Call the provider. Its error details are logged, never returned."""
    try:
        outcome = operation()
    except Exception as e:
        log_error(failure_message, e)
        return error(failure_message, 500)
    if outcome.degraded:
        logger.info(f"Returning degraded result ({len(outcome.issues)} issue(s))")
    return JSONResponse(outcome.value)


# =========================
# PAGES
# =========================

@router.get("/")
async def home(request: Request):
    return templates.TemplateResponse(request, "index.html")


# =========================
# API
# =========================

@router.post("/api/prompts")
def create_prompt(
    body: Dict[str, Any] = Depends(read_json_body),
    service: CreativeService = Depends(get_creative_service),
):
    req = validate_request(PromptRequest, body)
    if isinstance(req, ValidationFailure):
        return error(req.message)
    return run_operation(
        "Failed to generate writing prompt",
        lambda: service.generate_writing_prompt(req.genre),
    )


@router.post("/api/characters")
def create_character(
    body: Dict[str, Any] = Depends(read_json_body),
    service: CreativeService = Depends(get_creative_service),
):
    req = validate_request(CharacterRequest, body)
    if isinstance(req, ValidationFailure):
        return error(req.message)
    return run_operation(
        "Failed to generate character",
        lambda: service.generate_character(req.description),
    )


@router.post("/api/scenes")
def create_scene(
    body: Dict[str, Any] = Depends(read_json_body),
    service: CreativeService = Depends(get_creative_service),
):
    req = validate_request(SceneRequest, body)
    if isinstance(req, ValidationFailure):
        return error(req.message)
    return run_operation(
        "Failed to visualize scene",
        lambda: service.visualize_scene(req.description),
    )


@router.post("/api/worlds")
def create_world(
    body: Dict[str, Any] = Depends(read_json_body),
    service: CreativeService = Depends(get_creative_service),
):
    req = validate_request(WorldRequest, body)
    if isinstance(req, ValidationFailure):
        return error(req.message)
    return run_operation(
        "Failed to generate world",
        lambda: service.generate_world(req.concept),
    )


@router.post("/api/stories/continue")
def continue_story(
    body: Dict[str, Any] = Depends(read_json_body),
    service: CreativeService = Depends(get_creative_service),
):
    req = validate_request(ContinueStoryRequest, body)
    if isinstance(req, ValidationFailure):
        return error(req.message)
    return run_operation(
        "Failed to continue story",
        lambda: service.continue_story(req.story_text, req.direction),
    )


@router.get("/api/health")
async def health():
    return {"status": "ok", "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")}
