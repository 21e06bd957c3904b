# nc_news/schemas/article.py

from pydantic import BaseModel, Field, StrictInt, field_serializer
from datetime import datetime
from typing import Annotated, Optional, List
from .common import format_timestamp

# Fits the INTEGER votes column
VoteDelta = Annotated[StrictInt, Field(ge=-2**31, le=2**31 - 1)]

class ArticleBase(BaseModel):
    """Fields shared by every article representation"""
    article_id: int
    title: str
    topic: str
    author: str
    created_at: datetime
    votes: int
    article_img_url: Optional[str] = None

    @field_serializer("created_at")
    def serialize_created_at(self, created_at: datetime) -> str:
        return format_timestamp(created_at)

    class Config:
        from_attributes = True

class ArticleSummary(ArticleBase):
    """Listing entry: no body, with the number of comments"""
    comment_count: int

class Article(ArticleBase):
    """Full article as stored"""
    body: str

class ArticleDetail(Article):
    """Full article with the number of comments"""
    comment_count: int

class VotesUpdate(BaseModel):
    """Body of PATCH requests adjusting a vote counter"""
    inc_votes: Optional[VoteDelta] = None

class ArticleList(BaseModel):
    articles: List[ArticleSummary]

class ArticleResponse(BaseModel):
    article: Article

class ArticleDetailResponse(BaseModel):
    article: ArticleDetail
