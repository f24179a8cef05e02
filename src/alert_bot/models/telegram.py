"""Telegram Bot API payload models."""

from enum import Enum

from pydantic import BaseModel, Field


class ParseMode(str, Enum):
    """Rich text formats understood by the Bot API."""

    MARKDOWN = "Markdown"
    MARKDOWN_V2 = "MarkdownV2"
    HTML = "HTML"


class SendMessageRequest(BaseModel):
    """Body of a ``sendMessage`` call.

    See: https://core.telegram.org/bots/api#sendmessage
    """

    chat_id: str = Field(..., description="Destination chat identifier")
    text: str = Field(..., min_length=1, description="Message text")
    parse_mode: ParseMode | None = Field(
        ParseMode.MARKDOWN, description="Rich text format of the text"
    )
