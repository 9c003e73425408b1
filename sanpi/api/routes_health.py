"""Health routes."""

from fastapi import APIRouter

from sanpi.services.news.pipeline import refresh_guard

router = APIRouter()


@router.get("/health")
def health() -> dict[str, str]:
    """Simple liveness probe; also reports whether a refresh is running."""
    return {"status": "ok", "refresh": "running" if refresh_guard.busy else "idle"}
