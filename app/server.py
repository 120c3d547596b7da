from dotenv import load_dotenv

load_dotenv()
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.api.routes import router as api_router
from app.core.config import settings

logger = logging.getLogger(__name__)


def validate_startup_config():
    """Validiert die Review-Konfiguration beim Startup (fail-fast)."""
    errors = []

    if settings.min_word_count < 0:
        errors.append("MIN_WORD_COUNT must be >= 0.")

    if not 0.0 <= settings.plain_language_min_score <= 100.0:
        errors.append(
            "PLAIN_LANGUAGE_MIN_SCORE must be within [0, 100] "
            "(readability score, higher is more readable)."
        )

    if settings.enhance_min_length < 0:
        errors.append("ENHANCE_MIN_LENGTH must be >= 0.")

    if settings.report_max_examples < 0:
        errors.append("REPORT_MAX_EXAMPLES must be >= 0.")

    if errors:
        error_msg = "Startup validation failed:\n" + "\n".join(f"  - {e}" for e in errors)
        raise ValueError(error_msg)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logging.basicConfig(level=settings.log_level.upper())
    # Validierung beim Startup
    validate_startup_config()
    logger.info("%s started (environment=%s)", settings.app_name, settings.environment)
    yield


app = FastAPI(title=settings.app_name, lifespan=lifespan)
app.include_router(api_router)


@app.get("/")
async def root():
    return {"message": "Tooltip Review API running"}
