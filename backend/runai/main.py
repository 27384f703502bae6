import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request, status
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware

from runai.config import LOG_LEVEL, CORS_ALLOW_HEADERS
from runai.database import engine, Base
import runai.models
from runai.api import chat, dashboard, login, profile, training_plan, users, wearables, workouts

logging.basicConfig(
    level=getattr(logging, LOG_LEVEL, logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

BACKEND_ROOT = Path(__file__).resolve().parents[1]
INVALID_BODY_ERROR = "Invalid request body"


def run_migrations():
    """Run pending Alembic migrations, then make sure every table exists."""
    try:
        from alembic.config import Config
        from alembic import command
        alembic_cfg = Config(str(BACKEND_ROOT / "alembic.ini"))
        alembic_cfg.set_main_option("script_location", str(BACKEND_ROOT / "alembic"))
        command.upgrade(alembic_cfg, "head")
        logger.info("[Alembic] Migrations applied successfully")
    except Exception as e:
        logger.warning(f"[Alembic] Migration failed, falling back to create_all: {e}")

    Base.metadata.create_all(bind=engine)


@asynccontextmanager
async def lifespan(app: FastAPI):
    run_migrations()
    yield


app = FastAPI(title="RunAI Coach API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=CORS_ALLOW_HEADERS,
)

app.include_router(users.router)
app.include_router(login.router)
app.include_router(profile.router)
app.include_router(chat.router)
app.include_router(training_plan.router)
app.include_router(workouts.router)
app.include_router(dashboard.router)
app.include_router(wearables.router)

@app.exception_handler(RequestValidationError)
async def function_validation_handler(request: Request, exc: RequestValidationError):
    """The two coach functions answer malformed bodies in their own error shape."""
    if request.url.path == chat.AI_COACH_PATH:
        logger.warning(f"[Chat API] Invalid request body: {exc.errors()}")
        return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"error": INVALID_BODY_ERROR})
    if request.url.path == training_plan.GENERATE_PLAN_PATH:
        logger.warning(f"Invalid generate-training-plan request: {exc.errors()}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"success": False, "error": INVALID_BODY_ERROR}
        )
    return await request_validation_exception_handler(request, exc)

# Health check endpoint
@app.get("/health")
def health_check():
    return {"status": "healthy", "message": "API is running"}
