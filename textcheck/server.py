from dotenv import load_dotenv

load_dotenv()
from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI

from textcheck.api.routes import router as api_router
from textcheck.core.config import settings

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def validate_startup_config():
    """Validiert die Settings beim Startup (fail-fast)."""
    errors = []

    if settings.max_text_chars <= 0:
        errors.append("MAX_TEXT_CHARS must be > 0.")
    if settings.words_per_minute <= 0:
        errors.append("WORDS_PER_MINUTE must be > 0.")
    if not isinstance(getattr(logging, settings.log_level.upper(), None), int):
        errors.append(f"LOG_LEVEL '{settings.log_level}' is not a valid logging level.")

    if errors:
        error_msg = "Startup validation failed:\n" + "\n".join(f"  - {e}" for e in errors)
        raise ValueError(error_msg)


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    validate_startup_config()
    logger.info("%s gestartet (environment=%s)", settings.app_name, settings.environment)
    yield


app = FastAPI(title=settings.app_name, lifespan=lifespan)
app.include_router(api_router)


@app.get("/")
async def root():
    return {"message": "Text check API running"}
