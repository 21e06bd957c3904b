# nc_news/crud/crud_article.py

import logging
from typing import Any, Dict, List, Optional
from sqlalchemy import func, update
from sqlalchemy.exc import DataError
from sqlalchemy.orm import Session
from nc_news.models.article import Article
from nc_news.models.comment import Comment
from nc_news.core.errors import BadRequestError

logger = logging.getLogger(__name__)

comment_count = func.count(Comment.comment_id).label("comment_count")

SORTABLE_COLUMNS = {
    "article_id": Article.article_id,
    "title": Article.title,
    "topic": Article.topic,
    "author": Article.author,
    "created_at": Article.created_at,
    "votes": Article.votes,
    "article_img_url": Article.article_img_url,
    "comment_count": comment_count,
}

SUMMARY_COLUMNS = (
    Article.article_id,
    Article.title,
    Article.topic,
    Article.author,
    Article.created_at,
    Article.votes,
    Article.article_img_url,
)


def get_articles(
    db: Session,
    sort_by: str = "created_at",
    order: str = "desc",
    topic: Optional[str] = None,
) -> List[Dict[str, Any]]:
    """All articles without their body, each with its comment count.

    ``sort_by`` and ``order`` are expected to be validated already.
    """
    logger.info(f"Fetching articles sort_by={sort_by} order={order} topic={topic}")
    query = db.query(*SUMMARY_COLUMNS, comment_count)\
              .outerjoin(Comment, Comment.article_id == Article.article_id)
    if topic is not None:
        query = query.filter(Article.topic == topic)
    sort_column = SORTABLE_COLUMNS[sort_by]
    rows = query.group_by(*SUMMARY_COLUMNS)\
                .order_by(sort_column.desc() if order.lower() == "desc" else sort_column.asc())\
                .all()
    logger.info(f"Retrieved {len(rows)} articles")
    return [dict(row._mapping) for row in rows]


def get_article(db: Session, article_id: int) -> Optional[Dict[str, Any]]:
    row = db.query(Article, comment_count)\
            .outerjoin(Comment, Comment.article_id == Article.article_id)\
            .filter(Article.article_id == article_id)\
            .group_by(Article.article_id)\
            .first()
    if row is None:
        logger.warning(f"Article with ID {article_id} not found")
        return None
    article, count = row
    return {**{c.key: getattr(article, c.key) for c in Article.__table__.columns}, "comment_count": count}


def article_exists(db: Session, article_id: int) -> bool:
    return db.query(Article.article_id).filter(Article.article_id == article_id).first() is not None


def update_article_votes(db: Session, article_id: int, inc_votes: int) -> Optional[Article]:
    """Add ``inc_votes`` to the counter in one statement; None if there is no such article."""
    try:
        article = db.execute(
            update(Article)
            .where(Article.article_id == article_id)
            .values(votes=Article.votes + inc_votes)
            .returning(Article)
        ).scalar_one_or_none()
        db.commit()
    except DataError:
        db.rollback()
        logger.warning(f"Votes for article {article_id} out of range after adding {inc_votes}")
        raise BadRequestError("Bad request - votes out of range")
    if article is not None:
        db.refresh(article)
        logger.info(f"Article {article_id} votes now {article.votes}")
    return article
