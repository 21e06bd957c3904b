# nc_news/api/endpoints/articles.py

import logging
from typing import Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from nc_news import crud, schemas
from nc_news.api import deps, validation
from nc_news.core.errors import NotFoundError

logger = logging.getLogger(__name__)

router = APIRouter()

@router.get("", response_model=schemas.ArticleList)
def read_articles(
    sort_by: str = Query("created_at"),
    order: str = Query("desc"),
    topic: Optional[str] = Query(None),
    db: Session = Depends(deps.get_db)
):
    validation.check_article_query(sort_by, order)
    articles = crud.get_articles(db, sort_by=sort_by, order=order, topic=topic)
    if not articles and topic is not None:
        validation.check_topic_exists(db, topic)
    return {"articles": articles}

@router.get("/{article_id}", response_model=schemas.ArticleDetailResponse)
def read_article(
    article_id: int = Depends(deps.valid_article_id),
    db: Session = Depends(deps.get_db)
):
    logger.info(f"Fetching article with ID: {article_id}")
    article = crud.get_article(db, article_id=article_id)
    if article is None:
        raise NotFoundError("article does not exist")
    return {"article": article}

@router.patch("/{article_id}", response_model=schemas.ArticleResponse)
def patch_article_votes(
    article_id: int = Depends(deps.valid_article_id),
    payload: Optional[schemas.VotesUpdate] = None,
    db: Session = Depends(deps.get_db)
):
    inc_votes = validation.check_inc_votes(payload.inc_votes if payload else None)
    article = crud.update_article_votes(db, article_id=article_id, inc_votes=inc_votes)
    if article is None:
        raise NotFoundError("article does not exist")
    return {"article": article}

@router.get("/{article_id}/comments", response_model=schemas.CommentList)
def read_article_comments(
    article_id: int = Depends(deps.valid_article_id),
    db: Session = Depends(deps.get_db)
):
    comments = crud.get_comments_by_article(db, article_id=article_id)
    if not comments:
        # An existing article with no comments is an empty list, not a 404
        validation.check_article_exists(db, article_id)
    return {"comments": comments}

@router.post("/{article_id}/comments", response_model=schemas.CommentResponse, status_code=201)
def post_article_comment(
    article_id: int = Depends(deps.valid_article_id),
    comment: Optional[schemas.CommentCreate] = None,
    db: Session = Depends(deps.get_db)
):
    comment = comment or schemas.CommentCreate()
    validation.check_comment_fields(comment.username, comment.body)
    try:
        db_comment = crud.create_comment(
            db, article_id=article_id, username=comment.username, body=comment.body
        )
    except IntegrityError:
        # Work out which reference was missing
        validation.check_user_exists(db, comment.username)
        validation.check_article_exists(db, article_id)
        raise
    return {"comment": db_comment}
