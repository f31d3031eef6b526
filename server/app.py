"""FastAPI server for lingua application."""

import logging

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel
from typing import Optional, Union

logger = logging.getLogger(__name__)

from core.config import MENU_ITEMS
from core.errors import InvalidTransition
from core.interfaces import AIProvider
from core.models import ActivityKind
from core.navigation import Navigator

from server.gemini_provider import GeminiProvider
from server.settings import get_api_key, get_model_name


# Pydantic models for API
class UserRequest(BaseModel):
    user_id: str = "default"


class SelectRequest(BaseModel):
    kind: ActivityKind
    user_id: str = "default"


class AnswerRequest(BaseModel):
    answer: str
    user_id: str = "default"


class ActivityView(BaseModel):
    kind: str
    state: str
    content: Optional[Union[dict, str]]
    user_input: str
    feedback: Optional[Union[dict, str]]
    message: Optional[str]
    correct: Optional[bool]
    error: Optional[str]


class NavigationResponse(BaseModel):
    active_kind: str
    score: int
    activity: Optional[ActivityView]


class StatusResponse(BaseModel):
    active_kind: str
    score: int
    state: Optional[str]


class MenuItem(BaseModel):
    kind: str
    label: str
    icon: str


# Global state (in production, use proper DI)
ai_provider: AIProvider = None
user_sessions: dict[str, Navigator] = {}


app = FastAPI(title="Lingua API", description="English practice API")


def get_navigator(user_id: str = "default") -> Navigator:
    """Get or create the navigation session for a user."""
    if user_id not in user_sessions:
        user_sessions[user_id] = Navigator()
    return user_sessions[user_id]


def get_active_activity(navigator: Navigator):
    if navigator.activity is None:
        raise HTTPException(status_code=409, detail="No activity selected")
    return navigator.activity


@app.on_event("startup")
async def startup():
    """Initialize the AI provider on startup."""
    global ai_provider

    if ai_provider is not None:
        return

    api_key = get_api_key()
    if not api_key:
        raise RuntimeError(
            "GEMINI_API_KEY environment variable not set and config file not found. "
            "Set GEMINI_API_KEY or create ~/.config/lingua/config.json"
        )

    model_name = get_model_name()
    ai_provider = GeminiProvider(api_key, model_name=model_name)
    logger.info(f"AI provider initialized: {model_name}")


@app.get("/")
async def root():
    """Health check."""
    return {
        "service": "lingua",
        "status": "ok",
        "gemini_model": getattr(ai_provider, 'model_name', None)
    }


@app.get("/api/menu", response_model=list[MenuItem])
async def get_menu():
    """List the available activities."""
    return [MenuItem(kind=kind, label=label, icon=icon) for kind, label, icon in MENU_ITEMS]


@app.get("/api/status", response_model=StatusResponse)
async def get_status(user_id: str = "default"):
    """Get the score and the active activity kind."""
    navigator = get_navigator(user_id)
    return StatusResponse(
        active_kind=navigator.active_kind.value,
        score=navigator.scoreboard.value,
        state=navigator.activity.state.value if navigator.activity else None
    )


@app.get("/api/activity", response_model=NavigationResponse)
async def get_activity(user_id: str = "default"):
    """Get the current activity view."""
    return get_navigator(user_id).to_dict()


@app.post("/api/activity", response_model=NavigationResponse)
async def select_activity(request: SelectRequest):
    """Switch to an activity and load its first item."""
    navigator = get_navigator(request.user_id)
    activity = navigator.select(request.kind)
    logger.info(f"{request.user_id}: selected {request.kind.value}")
    if activity is not None:
        await activity.load(ai_provider)
    return navigator.to_dict()


@app.post("/api/activity/answer", response_model=NavigationResponse)
async def submit_answer(request: AnswerRequest):
    """Answer the current question, or submit text for evaluation."""
    navigator = get_navigator(request.user_id)
    activity = get_active_activity(navigator)
    try:
        await activity.submit(ai_provider, request.answer)
    except InvalidTransition as e:
        raise HTTPException(status_code=409, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return navigator.to_dict()


@app.post("/api/activity/next", response_model=NavigationResponse)
async def next_item(request: UserRequest):
    """Load the next item of the current activity."""
    navigator = get_navigator(request.user_id)
    activity = get_active_activity(navigator)
    try:
        await activity.load(ai_provider)
    except InvalidTransition as e:
        raise HTTPException(status_code=409, detail=str(e))
    return navigator.to_dict()


@app.post("/api/menu", response_model=NavigationResponse)
async def back_to_menu(request: UserRequest):
    """Leave the current activity."""
    navigator = get_navigator(request.user_id)
    navigator.go_to_menu()
    return navigator.to_dict()


@app.get("/api/stats")
async def get_api_stats():
    """Get Gemini API usage statistics."""
    if not hasattr(ai_provider, 'get_stats'):
        return {"error": "Statistics not available for the current provider"}
    return ai_provider.get_stats()


def create_app():
    """Factory function for creating the app (useful for testing)."""
    return app
