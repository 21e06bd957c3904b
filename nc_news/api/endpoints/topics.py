# nc_news/api/endpoints/topics.py

import logging
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from nc_news import crud, schemas
from nc_news.api import deps

logger = logging.getLogger(__name__)

router = APIRouter()

@router.get("", response_model=schemas.TopicList)
def read_topics(db: Session = Depends(deps.get_db)):
    topics = crud.get_topics(db)
    logger.info(f"Returning {len(topics)} topics")
    return {"topics": topics}
