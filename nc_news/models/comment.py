# nc_news/models/comment.py
from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from nc_news.db.base_class import Base

class Comment(Base):
    """A reply to an article. Removed physically on delete."""
    __tablename__ = "comments"

    comment_id = Column(Integer, primary_key=True, index=True)
    body = Column(Text, nullable=False)
    article_id = Column(Integer, ForeignKey("articles.article_id", ondelete="CASCADE"), nullable=False, index=True)
    author = Column(String, ForeignKey("users.username"), nullable=False)
    votes = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    article = relationship("Article", back_populates="comments")
    author_ref = relationship("User", back_populates="comments")
