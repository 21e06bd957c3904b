# nc_news/api/api.py

import json
import logging
import os
from fastapi import APIRouter
from nc_news.api.endpoints import (
    topics,
    articles,
    comments,
    users,
)

# Set up logging
logger = logging.getLogger(__name__)

ENDPOINTS_FILE = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "endpoints.json")


def load_endpoints() -> dict:
    with open(ENDPOINTS_FILE, encoding="utf-8") as f:
        return json.load(f)


api_router = APIRouter()


@api_router.get("", tags=["api"])
def read_endpoints():
    """Describe every endpoint this API serves"""
    return {"endpoints": load_endpoints()}


api_router.include_router(topics.router, prefix="/topics", tags=["topics"])
api_router.include_router(articles.router, prefix="/articles", tags=["articles"])
api_router.include_router(comments.router, prefix="/comments", tags=["comments"])
api_router.include_router(users.router, prefix="/users", tags=["users"])

logger.info(f"API routes configured: {[getattr(route, 'path', None) for route in api_router.routes]}")
