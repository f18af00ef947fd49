import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from core import cache, db
from core.logging_config import setup_logging
from dinosaurs import router as dinosaurs_router
from locations import router as locations_router

DEFAULT_CORS_ORIGINS = "http://localhost:5173,http://127.0.0.1:5173"


def cors_origins() -> list[str]:
    raw = os.environ.get("CORS_ORIGINS", "").strip() or DEFAULT_CORS_ORIGINS
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


@asynccontextmanager
async def lifespan(_: FastAPI):
    setup_logging()
    # One DB pool and one Redis client per process.
    await db.init_pool()
    await cache.init_client()
    try:
        yield
    finally:
        await cache.close_client()
        await db.close_pool()


app = FastAPI(
    title="Dino Park API",
    description="Dinosaur and location management API.",
    version="1.0",
    lifespan=lifespan,
)

# Allow local frontend dev server to call this API from the browser.
app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(dinosaurs_router.router, tags=["dinosaurs"])
app.include_router(locations_router.router, tags=["locations"])


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}


@app.get("/")
def root() -> dict:
    return {"message": "dino-park api"}
