# nc_news/schemas/comment.py

from pydantic import BaseModel, field_serializer
from datetime import datetime
from typing import Optional, List
from .common import format_timestamp

class CommentCreate(BaseModel):
    # Both optional so that the handler can report exactly which ones are missing
    username: Optional[str] = None
    body: Optional[str] = None

class Comment(BaseModel):
    comment_id: int
    body: str
    article_id: int
    author: str
    votes: int
    created_at: datetime

    @field_serializer("created_at")
    def serialize_created_at(self, created_at: datetime) -> str:
        return format_timestamp(created_at)

    class Config:
        from_attributes = True

class CommentList(BaseModel):
    comments: List[Comment]

class CommentResponse(BaseModel):
    comment: Comment
