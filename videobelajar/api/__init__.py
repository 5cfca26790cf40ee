"""API routes."""

from fastapi import APIRouter

from videobelajar.api import auth, courses, health, upload, users

router = APIRouter()
router.include_router(health.router, prefix="/health", tags=["health"])
router.include_router(auth.router, prefix="/auth", tags=["auth"])
router.include_router(users.router, prefix="/users", tags=["users"])
router.include_router(courses.router, prefix="/courses", tags=["courses"])
router.include_router(upload.router, prefix="/upload", tags=["upload"])
