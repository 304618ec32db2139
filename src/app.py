"""Attraction Reviews FastAPI application.

Serves the review widget's API: list an attraction's reviews and flag reviews
or their images as helpful. Every request runs inside the reviews domain
context.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 3004 --reload
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from reviews.domain import logger, reviews
from reviews.utils.db import uses_memory_store

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# The domain is initialized at module level so uvicorn workers share it.
# PROTEAN_ENV selects the domain.toml overlay:
#   - unset / "test" → in-memory store
#   - "production"   → PostgreSQL store
reviews.init()


def _custom(key, default):
    return reviews.config.get("custom", {}).get(key, default)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Seed the in-memory store on startup so a fresh process has data to serve."""
    if _custom("SEED_ON_STARTUP", False) and uses_memory_store(reviews):
        from reviews.seeding.data_generators import seed_data
        from reviews.seeding.loader import load_reviews

        with reviews.domain_context():
            review_ids = load_reviews(
                seed_data(
                    min_per=_custom("REVIEWS_PER_ATTRACTION_MIN", 1),
                    max_per=_custom("REVIEWS_PER_ATTRACTION_MAX", 8),
                )
            )
        logger.info("Startup seeding complete", reviews=len(review_ids))
    yield


# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
app = FastAPI(
    title="Attraction Reviews API",
    description="Reviews of attractions, with helpful flags for reviews and uploaded images",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def domain_context_middleware(request: Request, call_next):
    """Push the reviews domain context for each request."""
    with reviews.domain_context():
        response = await call_next(request)
    return response


# ---------------------------------------------------------------------------
# Health / root
# ---------------------------------------------------------------------------
@app.get("/health")
async def health():
    return JSONResponse(content={"status": "ok", "domain": reviews.name})


# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------
from reviews.api.routes import review_router  # noqa: E402

app.include_router(review_router)
