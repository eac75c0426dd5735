import logging
import time

from fastapi import APIRouter, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from slowapi.middleware import SlowAPIMiddleware

from app.controllers import (
    category_controller,
    health_controller,
    property_controller,
    upload_controller,
    user_controller,
)
from app.core.config import settings
from app.core.dependencies import lifespan
from app.core.error_handlers import register_error_handlers
from app.core.logging_config import setup_logging
from app.core.rate_limit import limiter

setup_logging(settings.LOG_LEVEL)
logger = logging.getLogger("app.requests")

# Cria a aplicação FastAPI com lifespan
app = FastAPI(title="LoonCamp API", lifespan=lifespan)
app.state.limiter = limiter
register_error_handlers(app)

app.add_middleware(SlowAPIMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    start = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - start) * 1000
    logger.info(f"{request.method} {request.url.path} -> {response.status_code} ({elapsed_ms:.1f}ms)")
    return response


# --- Endpoints ---
api_router = APIRouter(prefix="/api")
api_router.include_router(user_controller.router)
api_router.include_router(property_controller.router)
api_router.include_router(category_controller.router)
api_router.include_router(upload_controller.router)
api_router.include_router(health_controller.router)
app.include_router(api_router)
