"""Type definitions for Telegraph API objects.

See https://telegra.ph/api#Available-types
"""

from typing import Literal, get_args

from pydantic import BaseModel, Field

from telepage.content.nodes import Node

AccountField = Literal["short_name", "author_name", "author_url", "auth_url", "page_count"]

ACCOUNT_FIELDS: tuple[AccountField, ...] = get_args(AccountField)


class Account(BaseModel):
    """A Telegraph account. Which fields are set depends on the call."""

    short_name: str | None = None
    author_name: str | None = None
    author_url: str | None = None
    access_token: str | None = Field(
        default=None, description="Only returned by createAccount and revokeAccessToken"
    )
    auth_url: str | None = Field(
        default=None, description="One-time login URL, valid for 5 minutes"
    )
    page_count: int | None = None


class RevokedToken(BaseModel):
    """New credentials returned by revokeAccessToken."""

    access_token: str
    auth_url: str


class Page(BaseModel):
    """A Telegraph page."""

    path: str
    url: str
    title: str
    description: str = ""
    author_name: str | None = None
    author_url: str | None = None
    image_url: str | None = None
    content: list[Node] | None = None
    views: int = 0
    can_edit: bool | None = None


class PageList(BaseModel):
    """Pages belonging to an account, most recently created first."""

    total_count: int
    pages: list[Page] = Field(default_factory=list)


class PageViews(BaseModel):
    views: int
