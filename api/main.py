# api/main.py

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from . import config
from .discovery import router as discovery_router
from .log_setup import setup_logging
from .models import init_db


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    init_db()
    logger.info(f"Influencer discovery service started (source={config.INFLUENCER_SOURCE})")
    yield


app = FastAPI(
    title="Influencer Discovery Service",
    description="POST /api/influencers/search with filter criteria → returns the matching influencers[]",
    lifespan=lifespan,
)

# Allow cross‐origin requests from the discovery frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
)

# All discovery calls live under /api
app.include_router(discovery_router, prefix="/api")


@app.get("/health")
def health():
    return {"status": "ok", "source": config.INFLUENCER_SOURCE}
