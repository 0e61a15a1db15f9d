"""
Zendesk API Client - Attachment Schema
"""

from typing import Optional

from pydantic import BaseModel, Field, field_validator

from .common import null_as_list


class Attachment(BaseModel):
    """
    File attached to a ticket comment or used as a user photo.

    Thumbnails are attachments themselves; Zendesk nests them one level deep.
    """
    id: Optional[int] = None
    file_name: Optional[str] = None
    content_type: Optional[str] = None
    content_url: Optional[str] = None
    size: Optional[int] = None
    inline: Optional[bool] = None
    thumbnails: list["Attachment"] = Field(default_factory=list)

    class Config:
        frozen = True
        extra = "allow"

    @field_validator("thumbnails", mode="before")
    @classmethod
    def empty_thumbnails(cls, value):
        return null_as_list(value)
