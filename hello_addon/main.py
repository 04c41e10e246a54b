from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from hello_addon.config import settings
from hello_addon.routers import dispatch
from hello_addon.utils.catalog_loader import get_catalog_store
import os
import sys
import traceback
import logging
from datetime import datetime

# Logging: console always, file only when LOG_TO_FILE is set and writable
LOG_FILE_PATH = settings.get_log_file()
FILE_LOG_ENABLED = False

handlers = []

console_handler = logging.StreamHandler(sys.stdout)
formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
console_handler.setFormatter(formatter)
handlers.append(console_handler)

if settings.log_to_file():
    try:
        log_dir = os.path.dirname(LOG_FILE_PATH)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = logging.FileHandler(LOG_FILE_PATH, encoding='utf-8')
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)
        FILE_LOG_ENABLED = True
    except OSError:
        # console-only when the file cannot be opened
        FILE_LOG_ENABLED = False

logging.basicConfig(
    level=settings.get_log_level().upper(),
    handlers=handlers
)
logger = logging.getLogger(__name__)


def run_startup_diagnostics():
    """Load the catalog and report anything odd about it."""
    logger.info("🔧 Startup diagnostics: loading catalog...")
    store = get_catalog_store()
    for content_type in store.catalog_types():
        logger.info(f"✅ {content_type}: {len(store.items(content_type))} items")
    for content_type, by_id in store.streams.items():
        logger.info(f"✅ {content_type}: streams for {len(by_id)} ids")

    for content_type, item_id in store.dangling_stream_ids():
        logger.warning(f"⚠️ Stream id {content_type}/{item_id} matches no catalog entry")
    if FILE_LOG_ENABLED:
        logger.info(f"📝 Logging to {LOG_FILE_PATH}")


@asynccontextmanager
async def lifespan(app: FastAPI):
    run_startup_diagnostics()
    yield


app = FastAPI(
    title="Hello Add-on for Stremio",
    description="Sample add-on serving a few public domain movies and series",
    version="1.0.0",
    lifespan=lifespan,
)


@app.middleware("http")
async def log_requests_and_responses(request: Request, call_next):
    """Log every request line and the resulting status"""
    start_time = datetime.now()
    logger.info(f"🔍 REQUEST: {request.method} {request.url}")

    response = await call_next(request)

    process_time = (datetime.now() - start_time).total_seconds()
    logger.info(f"✅ RESPONSE: {response.status_code} in {process_time:.3f}s")
    return response


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Log anything unexpected and answer with a JSON 500"""
    logger.error("🚨 GLOBAL EXCEPTION HANDLER TRIGGERED")
    logger.error(f"   Request: {request.method} {request.url}")
    logger.error(f"   Exception Type: {type(exc).__name__}")
    logger.error(f"   Exception Message: {str(exc)}")
    logger.error("   Full Traceback:")
    logger.error(traceback.format_exc())

    return JSONResponse(
        status_code=500,
        content={
            "error": "Unhandled Exception",
            "message": str(exc),
            "type": type(exc).__name__,
            "timestamp": datetime.now().isoformat(),
            "path": str(request.url)
        }
    )


app.include_router(dispatch.router, prefix="", tags=["addon"])
