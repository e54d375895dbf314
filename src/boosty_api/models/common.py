"""Shared base models and media blocks used by posts, comments and showcase items."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    """Base for API records: camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PlayerUrl(ApiModel):
    type: str
    url: str = ""


class ListItem(ApiModel):
    data: list[MediaBlock] = Field(default_factory=list)
    items: list[ListItem] = Field(default_factory=list)


class MediaBlock(ApiModel):
    """One block of post/comment content.

    The API tags blocks by ``type`` ("image", "video", "ok_video", "audio_file",
    "text", "smile", "link", "file", "list"). Fields of unknown block types are
    kept as extras so nothing is lost.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")

    type: str
    id: str | None = None
    url: str | None = None
    title: str | None = None
    content: str | None = None
    modificator: str | None = None
    explicit: bool = False
    width: int | None = None
    height: int | None = None
    preview: str | None = None
    size: int | None = None
    vid: str | None = None
    player_urls: list[PlayerUrl] = Field(default_factory=list)
    file_type: str | None = None
    name: str | None = None
    small_url: str | None = None
    medium_url: str | None = None
    large_url: str | None = None
    is_animated: bool = False
    style: str | None = None
    items: list[ListItem] = Field(default_factory=list)


class Reactions(ApiModel):
    dislike: int = 0
    heart: int = 0
    fire: int = 0
    angry: int = 0
    wonder: int = 0
    laught: int = 0
    sad: int = 0
    like: int = 0


class ReactionCounter(ApiModel):
    type: str
    count: int = 0


class Tag(ApiModel):
    id: int
    title: str


class Flags(ApiModel):
    show_post_donations: bool = False


class User(ApiModel):
    """Author or owner of a post."""
    id: int
    name: str = ""
    blog_url: str = ""
    avatar_url: str = ""
    has_avatar: bool = False
    flags: Flags = Field(default_factory=Flags)


ListItem.model_rebuild()
