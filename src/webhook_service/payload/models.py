"""Payload models for webhook messages and embeds.

The models mirror the platform's JSON shape field for field. They are
serialized with ``exclude_none=True`` so unset optional fields never reach
the wire as ``null``.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class PayloadModel(BaseModel):
    """Base model for wire payload objects."""

    model_config: ConfigDict = ConfigDict(  # pyright: ignore[reportIncompatibleVariableOverride]
        extra="forbid",
        validate_assignment=True,
    )


class EmbedFooter(PayloadModel):
    """Embed footer block."""

    text: str
    icon_url: str | None = None


class EmbedAuthor(PayloadModel):
    """Embed author block."""

    name: str
    url: str | None = None
    icon_url: str | None = None


class EmbedField(PayloadModel):
    """A single name/value field inside an embed."""

    name: str
    value: str
    inline: bool | None = None


class EmbedData(PayloadModel):
    """Rich-content block attached to a message."""

    title: str | None = None
    description: str | None = None
    url: str | None = None
    timestamp: str | None = None
    color: int | None = None
    footer: EmbedFooter | None = None
    author: EmbedAuthor | None = None
    fields: list[EmbedField] | None = None


class MessageData(PayloadModel):
    """Top-level webhook message."""

    content: str | None = None
    username: str | None = None
    avatar_url: str | None = None
    tts: bool | None = None
    embeds: list[EmbedData] | None = None

    def to_payload(self) -> dict[str, object]:
        """Return the JSON-compatible payload with unset fields omitted."""
        return self.model_dump(mode="json", exclude_none=True)

    def to_json(self) -> bytes:
        """Encode the message as the JSON request body."""
        return self.model_dump_json(exclude_none=True).encode("utf-8")
