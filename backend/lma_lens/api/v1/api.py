from fastapi import APIRouter

from lma_lens.api.v1.endpoints import clauses

api_router = APIRouter()
api_router.include_router(clauses.router, prefix="/clauses", tags=["clauses"])
