"""Fluent builder for webhook messages."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Self

from webhook_service.payload.embed import EmbedBuilder
from webhook_service.payload.models import EmbedData, MessageData

logger = logging.getLogger(__name__)


class MessageBuilder:
    """Accumulates top-level message fields through chainable setters.

    Embeds are attached by value: ``add_embed`` stores a deep copy, so the
    embed builder can be changed or reused afterwards without touching the
    message.
    """

    def __init__(self, initial: MessageData | Mapping[str, object] | None = None) -> None:
        """Initialize the builder.

        Args:
            initial: Optional starting data; it is copied, never aliased
        """
        if initial is None:
            self._data: MessageData = MessageData()
        elif isinstance(initial, MessageData):
            self._data = initial.model_copy(deep=True)
        else:
            self._data = MessageData.model_validate(initial)

    @property
    def data(self) -> MessageData:
        """The live accumulated message data."""
        return self._data

    def set_message(self, content: str) -> Self:
        """Set the plain-text message content."""
        self._data.content = content
        return self

    def set_username(self, username: str) -> Self:
        self._data.username = username
        return self

    def set_avatar(self, avatar_url: str) -> Self:
        self._data.avatar_url = avatar_url
        return self

    def set_tts(self, tts: bool) -> Self:
        self._data.tts = tts
        return self

    def add_embed(self, embed: EmbedBuilder | EmbedData) -> Self:
        """Append a copy of ``embed`` to the message's embeds."""
        snapshot = embed.build() if isinstance(embed, EmbedBuilder) else embed.model_copy(deep=True)
        if self._data.embeds is None:
            self._data.embeds = [snapshot]
        else:
            self._data.embeds.append(snapshot)
        logger.debug("Attached embed %r (%d total)", snapshot.title, len(self._data.embeds))
        return self

    def build(self) -> MessageData:
        """Return an independent copy of the accumulated message."""
        return self._data.model_copy(deep=True)

    def __repr__(self) -> str:
        embed_count = len(self._data.embeds) if self._data.embeds else 0
        return f"MessageBuilder(content={self._data.content!r}, embeds={embed_count})"


def create_message(initial: MessageData | Mapping[str, object] | None = None) -> MessageBuilder:
    """Create a message builder, optionally seeded with existing data."""
    return MessageBuilder(initial)
