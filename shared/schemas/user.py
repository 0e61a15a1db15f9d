"""
Zendesk API Client - User Schemas

User model and the JSON envelope the Users API wraps it in
"""

from enum import Enum
from typing import Annotated, Any, Optional, Union

from pydantic import BaseModel, Field, field_validator

from .attachment import Attachment
from .common import null_as_dict, null_as_list


class UserRole(str, Enum):
    """Zendesk user role"""
    END_USER = "end-user"
    AGENT = "agent"
    ADMIN = "admin"


# Known roles parse to UserRole, anything else stays a plain string
UserRoleValue = Annotated[Union[UserRole, str, None], Field(union_mode="left_to_right")]


class User(BaseModel):
    """
    Zendesk user as returned by the Users API.

    All fields are optional so partial payloads (create/update requests)
    can be built from the same model.
    """
    # Identity
    id: Optional[int] = None
    url: Optional[str] = None
    external_id: Optional[str] = None
    name: Optional[str] = None
    alias: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    photo: Optional[Attachment] = None

    # Timestamps
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    last_login_at: Optional[str] = None

    # Profile
    role: UserRoleValue = None
    custom_role_id: Optional[int] = None
    organization_id: Optional[int] = None
    locale: Optional[str] = None
    locale_id: Optional[int] = None
    time_zone: Optional[str] = None
    details: Optional[str] = None
    notes: Optional[str] = None
    signature: Optional[str] = None
    ticket_restriction: Optional[str] = None
    tags: list[str] = Field(default_factory=list)
    user_fields: dict[str, Any] = Field(default_factory=dict)

    # Flags
    active: Optional[bool] = None
    verified: Optional[bool] = None
    suspended: Optional[bool] = None
    moderator: Optional[bool] = None
    chat_only: Optional[bool] = None
    restricted_agent: Optional[bool] = None
    only_private_comments: Optional[bool] = None
    shared: Optional[bool] = None
    shared_agent: Optional[bool] = None
    shared_phone_number: Optional[bool] = None
    two_factor_auth_enabled: Optional[bool] = None

    class Config:
        frozen = True
        extra = "allow"
        json_schema_extra = {
            "example": {
                "id": 35436,
                "name": "Johnny Agent",
                "email": "johnny@example.com",
                "role": "agent",
                "verified": True,
                "user_fields": {"employee_id": "1234"},
            }
        }

    @field_validator("tags", mode="before")
    @classmethod
    def empty_tags(cls, value):
        return null_as_list(value)

    @field_validator("user_fields", mode="before")
    @classmethod
    def empty_user_fields(cls, value):
        return null_as_dict(value)


class UserEnvelope(BaseModel):
    user: User
