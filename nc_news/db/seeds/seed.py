# nc_news/db/seeds/seed.py

import logging
from datetime import datetime, timezone
from typing import Any, Dict, List
from sqlalchemy.orm import Session
from nc_news import models
from nc_news.db.base import Base

logger = logging.getLogger(__name__)


def convert_timestamp(row: Dict[str, Any]) -> Dict[str, Any]:
    """Copy of ``row`` with an epoch-millisecond ``created_at`` turned into a UTC datetime."""
    if "created_at" not in row:
        return dict(row)
    created_at = datetime.fromtimestamp(row["created_at"] / 1000, tz=timezone.utc)
    return {**row, "created_at": created_at}


def seed(db: Session, data: Dict[str, List[Dict[str, Any]]]) -> None:
    """Drop and recreate every table, then load ``data`` into them."""
    bind = db.get_bind()
    db.close()
    Base.metadata.drop_all(bind=bind)
    Base.metadata.create_all(bind=bind)
    logger.info("Tables recreated")

    db.add_all(models.Topic(**topic) for topic in data["topics"])
    db.add_all(models.User(**user) for user in data["users"])
    db.flush()
    # One at a time so that ids follow the order of the data
    for article in data["articles"]:
        db.add(models.Article(**convert_timestamp(article)))
        db.flush()
    for comment in data["comments"]:
        db.add(models.Comment(**convert_timestamp(comment)))
        db.flush()
    db.commit()
    logger.info(
        f"Seeded {len(data['topics'])} topics, {len(data['users'])} users, "
        f"{len(data['articles'])} articles and {len(data['comments'])} comments"
    )
