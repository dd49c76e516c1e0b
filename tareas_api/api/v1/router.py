"""API router: include all route modules."""

from fastapi import APIRouter

from tareas_api.api.v1 import auth, tasks

api_router = APIRouter()

api_router.include_router(tasks.router)
api_router.include_router(auth.router)


@api_router.get("/health")
def health():
    return {"status": "ok"}
