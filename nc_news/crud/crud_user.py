# nc_news/crud/crud_user.py
from typing import List, Optional
from sqlalchemy.orm import Session
from nc_news.models.user import User

def get_users(db: Session) -> List[User]:
    return db.query(User).order_by(User.username).all()

def get_user(db: Session, username: str) -> Optional[User]:
    return db.query(User).filter(User.username == username).first()
