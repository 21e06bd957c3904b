# nc_news/api/validation.py

import logging
import re
from typing import Optional
from sqlalchemy.orm import Session
from nc_news import crud
from nc_news.core.errors import BadRequestError, NotFoundError

logger = logging.getLogger(__name__)

NUMERIC_ID = re.compile(r"[0-9]+")

# Largest value a Postgres INTEGER primary key can hold
MAX_ID = 2**31 - 1


def parse_id(value: str, entity: str) -> int:
    """Parse a path parameter as a base-10 integer id or raise a 400."""
    if not NUMERIC_ID.fullmatch(value):
        logger.warning(f"Rejected non-numeric {entity} id: {value!r}")
        raise BadRequestError(f"Bad request - {entity} Id can only be a number")
    return int(value)


def valid_article_id(article_id: str) -> int:
    parsed = parse_id(article_id, "article")
    if parsed > MAX_ID:
        raise NotFoundError("article does not exist")
    return parsed


def valid_comment_id(comment_id: str) -> int:
    parsed = parse_id(comment_id, "comment")
    if parsed > MAX_ID:
        raise NotFoundError("comment does not exist")
    return parsed


def check_article_exists(db: Session, article_id: int) -> None:
    if not crud.article_exists(db, article_id):
        raise NotFoundError("article does not exist")


def check_user_exists(db: Session, username: str) -> None:
    if crud.get_user(db, username=username) is None:
        raise NotFoundError("User does not exist")


def check_topic_exists(db: Session, slug: str) -> None:
    if crud.get_topic(db, slug=slug) is None:
        raise NotFoundError("topic does not exist")


def check_comment_fields(username: Optional[str], body: Optional[str]) -> None:
    """Reject a new comment that is missing its author, its content, or both."""
    missing_username = not username
    missing_body = body is None or not body.strip()
    if missing_username and missing_body:
        raise BadRequestError("missing fields username and content")
    if missing_username:
        raise BadRequestError("missing username, unable to post comment")
    if missing_body:
        raise BadRequestError("missing content, unable to post an empty comment")


def check_inc_votes(inc_votes: Optional[int]) -> int:
    if inc_votes is None:
        raise BadRequestError("missing inc_votes, unable to update votes")
    return inc_votes


def check_article_query(sort_by: str, order: str) -> None:
    if sort_by not in crud.SORTABLE_COLUMNS:
        raise BadRequestError("Bad request - invalid sort_by query")
    if order.lower() not in ("asc", "desc"):
        raise BadRequestError("Bad request - invalid order query")
