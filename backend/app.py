from contextlib import asynccontextmanager
from typing import Optional
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import logging
import uvicorn

import config
from services.game_exceptions import GameError
from services.game_repository import InMemoryGameRepository

# Import Tic-Tac-Toe router
from tic_tac_toe_routes import tic_tac_toe_router

# Set up logging - disable uvicorn access logs
logging.basicConfig(
    level=config.LOG_LEVEL,
    format='%(asctime)s - %(message)s',
    datefmt='%H:%M:%S'
)
logger = logging.getLogger(__name__)

# Disable uvicorn access logs
logging.getLogger("uvicorn.access").disabled = True


def create_app(repository: Optional[InMemoryGameRepository] = None) -> FastAPI:
    """
    Build the Tic-Tac-Toe API application.

    Args:
        repository: Game store to serve from. A fresh in-memory store is created
            at startup when omitted.

    Returns:
        FastAPI: The configured application
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        app.state.game_repository = repository if repository is not None else InMemoryGameRepository()
        logger.info("✅ Tic-Tac-Toe game store ready")
        yield
        logger.info(f"👋 Tic-Tac-Toe shutting down | Games played: {len(app.state.game_repository)}")

    app = FastAPI(title="Tic Tac Toe API", lifespan=lifespan)

    # Enable CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(GameError)
    async def game_error_handler(request: Request, exc: GameError):
        logger.warning(f"⚠️ TIC-TAC-TOE {request.method} {request.url.path} | {exc.status_code} | {exc.message}")
        return JSONResponse(status_code=exc.status_code, content={"error": exc.public_message})

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        logger.warning(f"⚠️ TIC-TAC-TOE {request.method} {request.url.path} | 400 | Invalid request: {exc.errors()}")
        return JSONResponse(status_code=400, content={"error": "Invalid input parameters"})

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.error(f"❌ UNHANDLED ERROR - {request.method} {request.url.path} | Error: {exc}")
        return JSONResponse(status_code=500, content={"error": "An internal server error occurred"})

    @app.get("/health")
    def health():
        return {"status": "ok"}

    # Register Tic-Tac-Toe router with FastAPI
    app.include_router(tic_tac_toe_router)

    logger.info("✅ Tic-Tac-Toe game API endpoints registered")
    return app


# FastAPI app setup
app = create_app()


def run():
    """Serve the API with uvicorn"""
    logger.info(f"🚀 Starting Tic-Tac-Toe API on {config.HOST}:{config.PORT}")
    uvicorn.run(app, host=config.HOST, port=config.PORT, log_level=config.LOG_LEVEL.lower())


if __name__ == "__main__":
    run()
