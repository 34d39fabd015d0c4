"""Fluent builder for embed blocks."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import UTC, datetime
from typing import Self

from webhook_service.payload.color import ColorLike, pack_color
from webhook_service.payload.models import EmbedAuthor, EmbedData, EmbedField, EmbedFooter

logger = logging.getLogger(__name__)


def current_timestamp() -> str:
    """Return the current UTC time as an ISO-8601 string."""
    return datetime.now(UTC).isoformat()


class EmbedBuilder:
    """Accumulates the fields of one embed through chainable setters.

    Every setter stores a single field, replaces any previous value and
    returns the builder itself. No setter performs I/O or cross-field
    validation.

    Example:
        >>> embed = (
        ...     EmbedBuilder()
        ...     .set_title("Deploy finished")
        ...     .set_color((0, 204, 0))
        ...     .add_field("Duration", "42s", inline=True)
        ... )
    """

    def __init__(self, initial: EmbedData | Mapping[str, object] | None = None) -> None:
        """Initialize the builder.

        Args:
            initial: Optional starting data; it is copied, never aliased
        """
        if initial is None:
            self._data: EmbedData = EmbedData()
        elif isinstance(initial, EmbedData):
            self._data = initial.model_copy(deep=True)
        else:
            self._data = EmbedData.model_validate(initial)

    @property
    def data(self) -> EmbedData:
        """The live accumulated embed data."""
        return self._data

    def set_title(self, title: str) -> Self:
        self._data.title = title
        return self

    def set_description(self, description: str) -> Self:
        self._data.description = description
        return self

    def set_url(self, url: str) -> Self:
        self._data.url = url
        return self

    def set_timestamp(self, timestamp: str | datetime | None = None) -> Self:
        """Set the embed timestamp.

        Args:
            timestamp: ISO-8601 string (stored as given), a datetime, or
                None for the current UTC time
        """
        if timestamp is None:
            self._data.timestamp = current_timestamp()
        elif isinstance(timestamp, datetime):
            self._data.timestamp = timestamp.isoformat()
        else:
            self._data.timestamp = timestamp
        return self

    def set_color(self, color: ColorLike) -> Self:
        """Set the accent color, stored as its packed 24-bit integer."""
        self._data.color = pack_color(color)
        return self

    def set_footer(self, text: str, icon_url: str | None = None) -> Self:
        self._data.footer = EmbedFooter(text=text, icon_url=icon_url)
        return self

    def set_author(self, name: str, url: str | None = None, icon_url: str | None = None) -> Self:
        self._data.author = EmbedAuthor(name=name, url=url, icon_url=icon_url)
        return self

    def add_field(self, name: str, value: str, inline: bool | None = None) -> Self:
        """Append a field; fields keep the order in which they were added."""
        field = EmbedField(name=name, value=value, inline=inline)
        if self._data.fields is None:
            self._data.fields = [field]
        else:
            self._data.fields.append(field)
        logger.debug("Added embed field %r (%d total)", name, len(self._data.fields))
        return self

    def build(self) -> EmbedData:
        """Return an independent copy of the accumulated embed."""
        return self._data.model_copy(deep=True)

    def __repr__(self) -> str:
        return f"EmbedBuilder(title={self._data.title!r})"


def create_embed(initial: EmbedData | Mapping[str, object] | None = None) -> EmbedBuilder:
    """Create an embed builder, optionally seeded with existing data."""
    return EmbedBuilder(initial)
