from fastapi import APIRouter

from dislike_service.api.v1 import auth, dislike

api_router = APIRouter()
api_router.include_router(auth.router, prefix="/auth", tags=["auth"])
api_router.include_router(dislike.router, tags=["dislikes"])
