"""FastAPI application setup for the weather lookup service."""

from fastapi import FastAPI

from .api import router as api_router

app = FastAPI(title="Weather Lookup")


@app.get("/")
def index():
    """Point clients at the versioned API."""
    return {"service": app.title, "api": "/v1"}


# API routes
app.include_router(api_router, prefix="/v1")
