# Import Base and every model so that Base.metadata knows about all tables
from nc_news.db.base_class import Base
from nc_news.models.topic import Topic
from nc_news.models.user import User
from nc_news.models.article import Article
from nc_news.models.comment import Comment

__all__ = ["Base", "Topic", "User", "Article", "Comment"]
