"""
Router principal de la API.
Agrupa todos los endpoints bajo /api.
"""
from fastapi import APIRouter

from post_importer.api.endpoints import posts


api_router = APIRouter()

api_router.include_router(posts.router)
