"""Public routes: health probe plus the rooms and room types resources."""

from fastapi import APIRouter

from roomdesk.api.routes import room_types, rooms

router = APIRouter()
router.include_router(room_types.router)
router.include_router(rooms.router)


@router.get("/health")
def health() -> dict:
    """Health check endpoint. Does not touch the database."""
    return {"status": "ok"}
