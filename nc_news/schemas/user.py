# nc_news/schemas/user.py
from pydantic import BaseModel
from typing import List, Optional

class User(BaseModel):
    username: str
    name: str
    avatar_url: Optional[str] = None

    class Config:
        from_attributes = True

class UserList(BaseModel):
    users: List[User]

class UserResponse(BaseModel):
    user: User
