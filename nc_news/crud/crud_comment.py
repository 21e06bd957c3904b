# nc_news/crud/crud_comment.py

import logging
from typing import List, Optional
from sqlalchemy import delete, update
from sqlalchemy.exc import DataError, IntegrityError
from sqlalchemy.orm import Session
from nc_news.models.comment import Comment
from nc_news.core.errors import BadRequestError

logger = logging.getLogger(__name__)


def get_comments_by_article(db: Session, article_id: int) -> List[Comment]:
    return db.query(Comment)\
             .filter(Comment.article_id == article_id)\
             .order_by(Comment.created_at.desc(), Comment.comment_id.desc())\
             .all()


def create_comment(db: Session, article_id: int, username: str, body: str) -> Comment:
    """Insert a comment.

    The foreign keys on ``article_id`` and ``author`` are the existence check:
    an unknown article or user raises ``IntegrityError`` after rolling back.
    """
    db_comment = Comment(article_id=article_id, author=username, body=body)
    db.add(db_comment)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        logger.warning(f"Rejected comment by {username} on article {article_id}")
        raise
    db.refresh(db_comment)
    logger.info(f"Comment created successfully. ID: {db_comment.comment_id}")
    return db_comment


def update_comment_votes(db: Session, comment_id: int, inc_votes: int) -> Optional[Comment]:
    try:
        comment = db.execute(
            update(Comment)
            .where(Comment.comment_id == comment_id)
            .values(votes=Comment.votes + inc_votes)
            .returning(Comment)
        ).scalar_one_or_none()
        db.commit()
    except DataError:
        db.rollback()
        raise BadRequestError("Bad request - votes out of range")
    if comment is not None:
        db.refresh(comment)
    return comment


def delete_comment(db: Session, comment_id: int) -> bool:
    deleted = db.execute(
        delete(Comment)
        .where(Comment.comment_id == comment_id)
        .returning(Comment.comment_id)
    ).scalar_one_or_none()
    db.commit()
    if deleted is None:
        return False
    logger.info(f"Comment {comment_id} deleted")
    return True
