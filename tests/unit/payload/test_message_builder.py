"""Tests for the message builder."""

from __future__ import annotations

from webhook_service.payload.embed import EmbedBuilder
from webhook_service.payload.message import MessageBuilder, create_message
from webhook_service.payload.models import EmbedData, MessageData


class TestSetters:
    """Chainable top-level setters."""

    def test_chain_populates_fields(self) -> None:
        builder = (
            create_message()
            .set_message("hello")
            .set_username("ci-bot")
            .set_avatar("https://example.com/avatar.png")
            .set_tts(True)
        )

        assert builder.data == MessageData(
            content="hello",
            username="ci-bot",
            avatar_url="https://example.com/avatar.png",
            tts=True,
        )

    def test_setters_return_same_builder(self) -> None:
        builder = MessageBuilder()

        assert builder.set_message("m") is builder
        assert builder.set_username("u") is builder
        assert builder.set_avatar("a") is builder
        assert builder.set_tts(False) is builder
        assert builder.add_embed(EmbedBuilder()) is builder


class TestAddEmbed:
    """Embeds are attached by value."""

    def test_mutating_embed_builder_after_attach_does_not_leak(self) -> None:
        """Later changes to the embed builder leave the attached copy intact."""
        embed = EmbedBuilder().set_title("original").add_field("a", "1")
        message = MessageBuilder().add_embed(embed)

        _ = embed.set_title("mutated").add_field("b", "2").set_color((255, 0, 0))

        attached = message.data.embeds
        assert attached is not None
        assert attached[0].title == "original"
        assert attached[0].color is None
        assert attached[0].fields is not None
        assert [field.name for field in attached[0].fields] == ["a"]

    def test_embed_builder_can_be_reused(self) -> None:
        """Reusing one builder for several embeds yields distinct snapshots."""
        embed = EmbedBuilder()
        message = MessageBuilder()
        for title in ("first", "second", "third"):
            _ = message.add_embed(embed.set_title(title))

        assert message.data.embeds is not None
        assert [e.title for e in message.data.embeds] == ["first", "second", "third"]

    def test_embed_data_is_copied(self) -> None:
        data = EmbedData(title="plain")
        message = MessageBuilder().add_embed(data)
        data.title = "changed"

        assert message.data.embeds is not None
        assert message.data.embeds[0].title == "plain"

    def test_no_embed_count_limit(self) -> None:
        message = MessageBuilder()
        for index in range(15):
            _ = message.add_embed(EmbedBuilder().set_title(str(index)))

        assert message.data.embeds is not None
        assert len(message.data.embeds) == 15


class TestInitialData:
    def test_initial_message_data_is_copied(self) -> None:
        seed = MessageData(content="seed", embeds=[EmbedData(title="e")])
        builder = MessageBuilder(seed).set_message("changed").add_embed(EmbedData(title="f"))

        assert seed.content == "seed"
        assert seed.embeds is not None
        assert len(seed.embeds) == 1
        assert builder.data.embeds is not None
        assert len(builder.data.embeds) == 2

    def test_initial_mapping(self) -> None:
        builder = create_message({"content": "hi", "embeds": [{"title": "t"}]})

        assert builder.data.content == "hi"
        assert builder.data.embeds == [EmbedData(title="t")]
