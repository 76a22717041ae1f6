"""FastAPI application entry point."""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from carcost.api.routes import projection
from carcost.config import settings

logging.basicConfig(level=settings.log_level.upper())

app = FastAPI(
    title="Car Cost Calculator",
    description="Car loan and total cost of ownership projections",
    version="0.1.0",
    debug=settings.debug,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(projection.router)


@app.get("/health")
async def health():
    return {"status": "ok"}
