"""
Main entry point for the FastAPI application.

This module builds the FastAPI app, wires the database client into the
registration service and includes the API routes.

Usage:
    Run `python main.py`, or serve the factory with Uvicorn.

Example:
    uvicorn api.main:build_app --factory --reload
"""
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.errors import register_error_handlers
from api.routes import router as api_router
from app.config import Settings, load_settings
from app.logger import configure_logging
from app.translator import DEFAULT_LANG, available_languages, load_translations
from db.supabase_client import create_supabase
from db.users import UserQueries
from registration.service import RegistrationService

log = logging.getLogger(__name__)


def create_app(settings: Settings, client=None) -> FastAPI:
    """
    Create the application.

    Args:
        settings (Settings): Loaded configuration.
        client: Supabase client to use. Created from the settings when omitted.

    Returns:
        FastAPI: The configured application.
    """
    if client is None:
        client = create_supabase(settings.supabase_url, settings.supabase_key)

    load_translations()
    language = settings.api_language
    if language not in available_languages():
        log.warning(f"Language '{language}' is not available, using '{DEFAULT_LANG}'")
        language = DEFAULT_LANG

    app = FastAPI(
        title="User Registration API",
        description="Register, list and delete users",
        version="1.0.0"
    )
    app.state.language = language
    app.state.registration = RegistrationService(
        UserQueries(client, table=settings.supabase_table),
        lang=language
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_error_handlers(app)
    app.include_router(api_router)
    return app


def build_app() -> FastAPI:
    """Load settings from the environment and create the application."""
    settings = load_settings()
    configure_logging(settings.log_level)
    return create_app(settings)
