# nc_news/models/article.py
from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from nc_news.db.base_class import Base

DEFAULT_ARTICLE_IMG_URL = (
    "https://images.pexels.com/photos/97050/pexels-photo-97050.jpeg?w=700&h=700"
)

class Article(Base):
    __tablename__ = "articles"

    article_id = Column(Integer, primary_key=True, index=True)
    title = Column(String, nullable=False)
    topic = Column(String, ForeignKey("topics.slug"), nullable=False, index=True)
    author = Column(String, ForeignKey("users.username"), nullable=False)
    body = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False, index=True)
    votes = Column(Integer, nullable=False, default=0)
    article_img_url = Column(String(1000), default=DEFAULT_ARTICLE_IMG_URL)

    topic_ref = relationship("Topic", back_populates="articles")
    author_ref = relationship("User", back_populates="articles")
    comments = relationship("Comment", back_populates="article", passive_deletes=True)
