from contextlib import asynccontextmanager

from fastapi import FastAPI

from api import tagging
from core.config import settings
from core.errors import register_error_handlers
from core.logging import SERVICE_VERSION, configure_logging, get_logger
from languages import get_module

# Initialize logging before anything else
configure_logging(level=settings.LOG_LEVEL, json_logs=settings.LOG_JSON)

log = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    log.info("startup", message="Compound tagger API starting up")

    # Lexical resources are loaded eagerly: a missing resource aborts startup
    get_module("uk").get_tagger()

    yield

    log.info("shutdown", message="Compound tagger API shutting down")


app = FastAPI(
    title="Ukrainian Compound Tagger API",
    description="Tag inference for Ukrainian numerals, dates and hyphenated compounds",
    version=SERVICE_VERSION,
    lifespan=lifespan,
)

register_error_handlers(app)

app.include_router(tagging.router, prefix="/api/tagging", tags=["tagging"])


@app.get("/health")
async def health_check():
    return {"status": "healthy", "version": SERVICE_VERSION}


if __name__ == "__main__":
    import uvicorn

    log.info("server_config", host=settings.BACKEND_HOST, port=settings.BACKEND_PORT, debug=settings.APP_DEBUG)
    uvicorn.run(
        "main:app",
        host=settings.BACKEND_HOST,
        port=settings.BACKEND_PORT,
        reload=settings.APP_DEBUG,
        log_config=None,  # Disable uvicorn's default logging, we handle it
    )
