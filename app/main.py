# app/main.py
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import settings
from app.core.logging import setup_logging
from app.core.metrics import router_metrics
from app.middleware.observability import ObservabilityMiddleware
from app.routers import health as health_router
from app.routers import users as users_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    # startup
    setup_logging(settings.log_level)
    yield


# --- App ---
app = FastAPI(
    title="User Registration Service",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

# Observabilidade
app.add_middleware(ObservabilityMiddleware)

# Routers
app.include_router(users_router.router)
app.include_router(health_router.router)

# /metrics
app.include_router(router_metrics)
