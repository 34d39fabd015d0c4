"""Structural checks applied to messages before delivery."""

from __future__ import annotations

from typing import Final

from webhook_service.payload.message import MessageBuilder
from webhook_service.payload.models import EmbedData, MessageData

# Limits enforced by the platform, not by this library.
MAX_EMBEDS_PER_MESSAGE: Final[int] = 10
MAX_EMBED_CHARACTERS: Final[int] = 6000


def _materialize(message: MessageData | MessageBuilder) -> MessageData:
    return message.data if isinstance(message, MessageBuilder) else message


def is_sendable(message: MessageData | MessageBuilder) -> bool:
    """Return True if the message has non-empty content or at least one embed.

    Pure; safe to call any number of times.
    """
    data = _materialize(message)
    return bool(data.content) or bool(data.embeds)


def _embed_characters(embed: EmbedData) -> int:
    total = len(embed.title or "") + len(embed.description or "")
    if embed.footer is not None:
        total += len(embed.footer.text)
    if embed.author is not None:
        total += len(embed.author.name)
    for field in embed.fields or ():
        total += len(field.name) + len(field.value)
    return total


def platform_limit_violations(message: MessageData | MessageBuilder) -> list[str]:
    """Report where a message exceeds the platform's documented limits.

    The dispatcher never calls this; it is an opt-in check for callers who
    want to catch oversized payloads before the platform rejects them.

    Returns:
        Human-readable descriptions of each exceeded limit, empty if none
    """
    data = _materialize(message)
    embeds = data.embeds or []
    violations: list[str] = []

    if len(embeds) > MAX_EMBEDS_PER_MESSAGE:
        violations.append(
            f"Message has {len(embeds)} embeds, platform limit is {MAX_EMBEDS_PER_MESSAGE}"
        )

    characters = sum(_embed_characters(embed) for embed in embeds)
    if characters > MAX_EMBED_CHARACTERS:
        violations.append(
            f"Embeds contain {characters} characters, platform limit is {MAX_EMBED_CHARACTERS}"
        )

    return violations
