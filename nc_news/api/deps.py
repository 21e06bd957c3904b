# nc_news/api/deps.py

from nc_news.db.session import get_db
from nc_news.api.validation import valid_article_id, valid_comment_id

__all__ = ["get_db", "valid_article_id", "valid_comment_id"]
