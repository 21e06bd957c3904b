# nc_news/api/endpoints/users.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from nc_news import crud, schemas
from nc_news.api import deps
from nc_news.core.errors import NotFoundError

router = APIRouter()

@router.get("", response_model=schemas.UserList)
def read_users(db: Session = Depends(deps.get_db)):
    return {"users": crud.get_users(db)}

@router.get("/{username}", response_model=schemas.UserResponse)
def read_user(username: str, db: Session = Depends(deps.get_db)):
    user = crud.get_user(db, username=username)
    if user is None:
        raise NotFoundError("User does not exist")
    return {"user": user}
