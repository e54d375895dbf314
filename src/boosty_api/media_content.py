"""Turn post/comment media blocks into flat, typed content items."""

from __future__ import annotations

import json
from typing import Union

from pydantic import BaseModel, Field

from boosty_api.models.common import MediaBlock, PlayerUrl

# Best first.
VIDEO_QUALITY_PRIORITY = ("ultra_hd", "full_hd", "high", "medium", "low")


class ImageItem(BaseModel):
    kind: str = "image"
    url: str
    id: str


class VideoItem(BaseModel):
    kind: str = "video"
    url: str


class OkVideoItem(BaseModel):
    kind: str = "ok_video"
    url: str
    title: str
    vid: str


class AudioItem(BaseModel):
    kind: str = "audio"
    url: str
    title: str
    file_type: str | None = None
    size: int = 0


class TextItem(BaseModel):
    kind: str = "text"
    content: str
    modificator: str = ""

    def plain_text(self) -> str:
        """The text of an editor block, whose content is a JSON [text, style, ranges] triple."""
        try:
            decoded = json.loads(self.content)
        except ValueError:
            return self.content
        if isinstance(decoded, list) and decoded and isinstance(decoded[0], str):
            return decoded[0]
        return self.content


class SmileItem(BaseModel):
    kind: str = "smile"
    small_url: str
    medium_url: str
    large_url: str
    name: str
    is_animated: bool = False


class LinkItem(BaseModel):
    kind: str = "link"
    explicit: bool = False
    content: str
    url: str


class FileItem(BaseModel):
    kind: str = "file"
    url: str
    title: str
    size: int = 0


class ListContent(BaseModel):
    kind: str = "list"
    style: str
    items: list[list[ContentItem]] = Field(default_factory=list)


class UnknownItem(BaseModel):
    kind: str = "unknown"
    type: str


ContentItem = Union[
    ImageItem, VideoItem, OkVideoItem, AudioItem, TextItem,
    SmileItem, LinkItem, FileItem, ListContent, UnknownItem,
]


def pick_higher_quality_for_video(player_urls: list[PlayerUrl]) -> str | None:
    """Best non-empty player URL by quality, falling back to the first non-empty one."""
    for quality in VIDEO_QUALITY_PRIORITY:
        for player_url in player_urls:
            if player_url.type == quality and player_url.url:
                return player_url.url
    for player_url in player_urls:
        if player_url.url:
            return player_url.url
    return None


def extract_content(blocks: list[MediaBlock]) -> list[ContentItem]:
    result: list[ContentItem] = []
    for block in blocks:
        _extract_block(block, result)
    return result


def _extract_block(block: MediaBlock, out: list[ContentItem]) -> None:
    kind = block.type
    if kind == "image":
        out.append(ImageItem(url=block.url or "", id=block.id or ""))
    elif kind == "video":
        out.append(VideoItem(url=block.url or ""))
    elif kind == "ok_video":
        best_url = pick_higher_quality_for_video(block.player_urls)
        # Videos still processing have no playable URL yet.
        if best_url:
            out.append(OkVideoItem(url=best_url, title=block.title or "", vid=block.vid or ""))
    elif kind == "audio_file":
        out.append(AudioItem(
            url=block.url or "",
            title=block.title or "",
            file_type=block.file_type,
            size=block.size or 0,
        ))
    elif kind == "text":
        out.append(TextItem(content=block.content or "", modificator=block.modificator or ""))
    elif kind == "smile":
        out.append(SmileItem(
            small_url=block.small_url or "",
            medium_url=block.medium_url or "",
            large_url=block.large_url or "",
            name=block.name or "",
            is_animated=block.is_animated,
        ))
    elif kind == "link":
        out.append(LinkItem(explicit=block.explicit, content=block.content or "", url=block.url or ""))
    elif kind == "file":
        out.append(FileItem(url=block.url or "", title=block.title or "", size=block.size or 0))
    elif kind == "list":
        out.append(_extract_list(block))
    else:
        out.append(UnknownItem(type=kind))


def _extract_list(block: MediaBlock) -> ListContent:
    style = block.style or ""
    items: list[list[ContentItem]] = []
    for list_item in block.items:
        sub_items = extract_content(list_item.data)
        # One level of nesting is kept; each nested item becomes its own sub-list.
        for nested in list_item.items:
            nested_items = extract_content(nested.data)
            if nested_items:
                sub_items.append(ListContent(style=style, items=[nested_items]))
        items.append(sub_items)
    return ListContent(style=style, items=items)


ListContent.model_rebuild()
