"""Message and embed payloads: models, builders, and validation."""

from webhook_service.payload.color import Color, ColorLike, pack_color
from webhook_service.payload.embed import EmbedBuilder, create_embed
from webhook_service.payload.message import MessageBuilder, create_message
from webhook_service.payload.models import (
    EmbedAuthor,
    EmbedData,
    EmbedField,
    EmbedFooter,
    MessageData,
)
from webhook_service.payload.validation import (
    MAX_EMBED_CHARACTERS,
    MAX_EMBEDS_PER_MESSAGE,
    is_sendable,
    platform_limit_violations,
)

__all__ = [
    "MAX_EMBEDS_PER_MESSAGE",
    "MAX_EMBED_CHARACTERS",
    "Color",
    "ColorLike",
    "EmbedAuthor",
    "EmbedBuilder",
    "EmbedData",
    "EmbedField",
    "EmbedFooter",
    "MessageBuilder",
    "MessageData",
    "create_embed",
    "create_message",
    "is_sendable",
    "pack_color",
    "platform_limit_violations",
]
