# nc_news/crud/__init__.py

from .crud_topic import get_topics, get_topic
from .crud_user import get_users, get_user
from .crud_article import (
    get_articles,
    get_article,
    article_exists,
    update_article_votes,
    SORTABLE_COLUMNS,
)
from .crud_comment import (
    get_comments_by_article,
    create_comment,
    update_comment_votes,
    delete_comment,
)

__all__ = [
    "get_topics", "get_topic",
    "get_users", "get_user",
    "get_articles", "get_article", "article_exists", "update_article_votes",
    "SORTABLE_COLUMNS",
    "get_comments_by_article", "create_comment", "update_comment_votes", "delete_comment",
]
