# nc_news/api/endpoints/comments.py

import logging
from typing import Optional
from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session

from nc_news import crud, schemas
from nc_news.api import deps, validation
from nc_news.core.errors import NotFoundError

logger = logging.getLogger(__name__)

router = APIRouter()

@router.patch("/{comment_id}", response_model=schemas.CommentResponse)
def patch_comment_votes(
    comment_id: int = Depends(deps.valid_comment_id),
    payload: Optional[schemas.VotesUpdate] = None,
    db: Session = Depends(deps.get_db)
):
    inc_votes = validation.check_inc_votes(payload.inc_votes if payload else None)
    comment = crud.update_comment_votes(db, comment_id=comment_id, inc_votes=inc_votes)
    if comment is None:
        raise NotFoundError("comment does not exist")
    return {"comment": comment}

@router.delete("/{comment_id}", status_code=204, response_class=Response)
def remove_comment(
    comment_id: int = Depends(deps.valid_comment_id),
    db: Session = Depends(deps.get_db)
):
    """Delete a comment for good"""
    if not crud.delete_comment(db, comment_id=comment_id):
        logger.warning(f"Comment with ID {comment_id} not found")
        raise NotFoundError("comment does not exist")
    return Response(status_code=204)
