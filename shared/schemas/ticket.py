"""
Zendesk API Client - Ticket Schemas

Ticket, audit and job status models plus the JSON envelopes the
Tickets API wraps them in
"""

from enum import Enum
from typing import Annotated, Optional, Union

from pydantic import BaseModel, Field, field_validator

from .common import JSONValue, null_as_dict, null_as_list


class TicketStatus(str, Enum):
    """Zendesk ticket status"""
    NEW = "new"
    OPEN = "open"
    PENDING = "pending"
    HOLD = "hold"
    SOLVED = "solved"
    CLOSED = "closed"


class TicketPriority(str, Enum):
    """Zendesk ticket priority"""
    LOW = "low"
    NORMAL = "normal"
    HIGH = "high"
    URGENT = "urgent"


class TicketType(str, Enum):
    """Zendesk ticket type"""
    PROBLEM = "problem"
    INCIDENT = "incident"
    QUESTION = "question"
    TASK = "task"


# Known values parse to the enum, anything else stays a plain string
TicketStatusValue = Annotated[Union[TicketStatus, str, None], Field(union_mode="left_to_right")]
TicketPriorityValue = Annotated[Union[TicketPriority, str, None], Field(union_mode="left_to_right")]
TicketTypeValue = Annotated[Union[TicketType, str, None], Field(union_mode="left_to_right")]


class Source(BaseModel):
    """Origin and destination of a via channel"""
    from_: JSONValue = Field(None, alias="from")
    rel: JSONValue = None
    to: JSONValue = None

    class Config:
        frozen = True
        extra = "allow"
        populate_by_name = True


class Via(BaseModel):
    """How a ticket or audit was created"""
    channel: Optional[str] = None
    source: Optional[Source] = None

    class Config:
        frozen = True
        extra = "allow"


class CustomField(BaseModel):
    """Single custom field entry on a ticket"""
    id: Optional[int] = None
    value: JSONValue = None

    class Config:
        frozen = True
        extra = "allow"


class Ticket(BaseModel):
    """
    Zendesk ticket as returned by the Tickets API.

    Every field is optional; the remote service is authoritative for
    which combinations are valid. Timestamps are kept as the ISO strings
    Zendesk sends.
    """
    # Identifiers
    id: Optional[int] = None
    url: Optional[str] = None
    external_id: Optional[str] = None

    # Timestamps
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    due_at: Optional[str] = None

    # Classification
    type: TicketTypeValue = None
    status: TicketStatusValue = None
    priority: TicketPriorityValue = None

    # Content
    subject: Optional[str] = None
    raw_subject: Optional[str] = None
    description: Optional[str] = None
    recipient: Optional[str] = None
    tags: list[str] = Field(default_factory=list)
    custom_fields: list[CustomField] = Field(default_factory=list)
    fields: list[JSONValue] = Field(default_factory=list)
    satisfaction_rating: JSONValue = None
    via: Optional[Via] = None

    # People and ownership
    requester_id: Optional[int] = None
    submitter_id: Optional[int] = None
    assignee_id: Optional[int] = None
    organization_id: Optional[int] = None
    group_id: Optional[int] = None
    brand_id: Optional[int] = None
    ticket_form_id: Optional[int] = None
    collaborator_ids: list[int] = Field(default_factory=list)

    # Relations
    problem_id: Optional[int] = None
    forum_topic_id: Optional[int] = None
    followup_ids: list[int] = Field(default_factory=list)
    sharing_agreement_ids: list[int] = Field(default_factory=list)
    has_incidents: Optional[bool] = None
    allow_channelback: Optional[bool] = None

    class Config:
        frozen = True
        extra = "allow"
        json_schema_extra = {
            "example": {
                "id": 35436,
                "subject": "Help, my printer is on fire!",
                "status": "open",
                "priority": "high",
                "requester_id": 20978392,
                "tags": ["enterprise", "other_tag"],
                "custom_fields": [{"id": 27642, "value": "745"}],
            }
        }

    @field_validator(
        "tags",
        "custom_fields",
        "fields",
        "collaborator_ids",
        "followup_ids",
        "sharing_agreement_ids",
        mode="before",
    )
    @classmethod
    def empty_lists(cls, value):
        return null_as_list(value)


class Audit(BaseModel):
    """Audit trail record attached to a ticket change"""
    id: Optional[int] = None
    ticket_id: Optional[int] = None
    author_id: Optional[int] = None
    created_at: Optional[str] = None
    events: list[JSONValue] = Field(default_factory=list)
    metadata: JSONValue = None
    via: Optional[Via] = None

    class Config:
        frozen = True
        extra = "allow"

    @field_validator("events", mode="before")
    @classmethod
    def empty_events(cls, value):
        return null_as_list(value)


class JobStatusResult(BaseModel):
    """Per-item outcome of an asynchronous job"""
    id: Optional[int] = None
    action: Optional[str] = None
    status: Optional[str] = None
    success: Optional[bool] = None
    title: Optional[str] = None
    errors: Optional[str] = None

    class Config:
        frozen = True
        extra = "allow"


class JobStatus(BaseModel):
    """
    State of an asynchronous bulk operation.

    The client never polls; use the job id against the Job Statuses API.
    """
    id: Optional[str] = None
    url: Optional[str] = None
    status: Optional[str] = None
    message: Optional[str] = None
    progress: Optional[int] = None
    total: Optional[int] = None
    results: list[JobStatusResult] = Field(default_factory=list)

    class Config:
        frozen = True
        extra = "allow"

    @field_validator("results", mode="before")
    @classmethod
    def empty_results(cls, value):
        return null_as_list(value)


class TicketRef(BaseModel):
    """Ticket reference carrying only the id"""
    id: Optional[int] = None

    class Config:
        frozen = True
        extra = "allow"


class TicketEnvelope(BaseModel):
    ticket: Ticket


class TicketsEnvelope(BaseModel):
    """
    One page of tickets with the paging links Zendesk sends alongside.

    Further pages are not fetched.
    """
    tickets: list[Ticket] = Field(default_factory=list)
    next_page: Optional[str] = None
    previous_page: Optional[str] = None
    count: Optional[int] = None

    class Config:
        frozen = True
        extra = "allow"

    @field_validator("tickets", mode="before")
    @classmethod
    def empty_tickets(cls, value):
        return null_as_list(value)


class CreateTicketResult(BaseModel):
    """Response of a synchronous ticket creation"""
    ticket: Ticket
    audit: Audit = Field(default_factory=Audit)

    class Config:
        frozen = True

    @field_validator("audit", mode="before")
    @classmethod
    def empty_audit(cls, value):
        return null_as_dict(value)


class CreateTicketAsyncResult(BaseModel):
    """Response of an asynchronous ticket creation"""
    ticket: TicketRef = Field(default_factory=TicketRef)
    job_status: JobStatus = Field(default_factory=JobStatus)

    class Config:
        frozen = True

    @field_validator("ticket", "job_status", mode="before")
    @classmethod
    def empty_parts(cls, value):
        return null_as_dict(value)
