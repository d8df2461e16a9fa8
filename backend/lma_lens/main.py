from fastapi import FastAPI

from lma_lens.api.v1.api import api_router
from lma_lens.core.config import settings
from lma_lens.core.logging import configure_logging

configure_logging()

app = FastAPI(title=settings.PROJECT_NAME)


@app.get("/healthz", tags=["health"])
def root_health() -> dict[str, str]:
    """Basic health endpoint."""
    return {"status": "ok"}


app.include_router(api_router, prefix="/api/v1")
