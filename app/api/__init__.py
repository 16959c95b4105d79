"""API router for quiz endpoints."""

from fastapi import APIRouter

from app.api import quiz

router = APIRouter()

# Quiz catalog, assessment submission and report export
router.include_router(quiz.router, tags=["quiz"])
