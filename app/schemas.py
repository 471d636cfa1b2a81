from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, StringConstraints

from app.config import settings


# --- User ---

class UserCreate(BaseModel):
    # Stripped before the length check so "   " is rejected.
    username: Annotated[
        str,
        StringConstraints(strip_whitespace=True, min_length=settings.USERNAME_MIN_LENGTH, max_length=100),
    ]
    password: str = Field(min_length=settings.PASSWORD_MIN_LENGTH, max_length=72)
    name: str | None = Field(None, max_length=150)


class BlogOwner(BaseModel):
    """The owning user as embedded inside a blog."""
    id: str
    username: str
    name: str | None = None
    model_config = ConfigDict(from_attributes=True)


class UserBlog(BaseModel):
    """A blog as embedded inside a user (no back-reference to the user)."""
    id: str
    title: str
    author: str | None = None
    url: str
    likes: int
    model_config = ConfigDict(from_attributes=True)


class UserResponse(BaseModel):
    id: str
    username: str
    name: str | None = None
    blogs: list[UserBlog] = []
    model_config = ConfigDict(from_attributes=True)


# --- Blog ---

class BlogCreate(BaseModel):
    title: str = Field(min_length=1, max_length=300)
    author: str | None = Field(None, max_length=150)
    url: str = Field(min_length=1, max_length=2048)
    likes: int = Field(0, ge=0)


class BlogUpdate(BaseModel):
    title: str | None = Field(None, min_length=1, max_length=300)
    author: str | None = Field(None, max_length=150)
    url: str | None = Field(None, min_length=1, max_length=2048)
    likes: int | None = Field(None, ge=0)


class BlogResponse(BaseModel):
    id: str
    title: str
    author: str | None = None
    url: str
    likes: int
    user: BlogOwner | None = None
    model_config = ConfigDict(from_attributes=True)


# --- Login ---

class LoginRequest(BaseModel):
    username: str
    password: str


class LoginResponse(BaseModel):
    token: str
    username: str
    name: str | None = None
    id: str
