"""
FundRank FastAPI app
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from fundrank import __version__
from fundrank.config import settings
from fundrank.logging_setup import configure_logging
from fundrank.api.routes import router

configure_logging()

app = FastAPI(
    title="FundRank",
    description="Fund ranking and data-integrity engine",
    version=__version__,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router, prefix=settings.API_PREFIX)


@app.get("/")
async def root():
    """Health check"""
    return {
        "name": "FundRank",
        "status": "running",
        "version": __version__,
    }


@app.get("/health")
async def health():
    """Detailed health check"""
    from fundrank.domain.clustering import CLUSTER_DEFINITIONS
    from fundrank.domain.contradictions import CONTRADICTION_RULES

    return {
        "status": "healthy",
        "env": settings.ENV,
        "clusters": len(CLUSTER_DEFINITIONS),
        "contradiction_rules": len(CONTRADICTION_RULES),
    }
