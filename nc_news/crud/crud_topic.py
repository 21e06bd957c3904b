# nc_news/crud/crud_topic.py

import logging
from typing import List, Optional
from sqlalchemy.orm import Session
from nc_news import models

logger = logging.getLogger(__name__)

def get_topics(db: Session) -> List[models.Topic]:
    logger.info("Fetching all topics")
    topics = db.query(models.Topic).order_by(models.Topic.slug).all()
    logger.info(f"Retrieved {len(topics)} topics")
    return topics

def get_topic(db: Session, slug: str) -> Optional[models.Topic]:
    return db.query(models.Topic).filter(models.Topic.slug == slug).first()
