from .topic import Topic, TopicList
from .user import User, UserList, UserResponse
from .article import (
    Article,
    ArticleSummary,
    ArticleDetail,
    VotesUpdate,
    ArticleList,
    ArticleResponse,
    ArticleDetailResponse,
)
from .comment import Comment, CommentCreate, CommentList, CommentResponse

__all__ = [
    "Topic", "TopicList",
    "User", "UserList", "UserResponse",
    "Article", "ArticleSummary", "ArticleDetail", "VotesUpdate",
    "ArticleList", "ArticleResponse", "ArticleDetailResponse",
    "Comment", "CommentCreate", "CommentList", "CommentResponse",
]
