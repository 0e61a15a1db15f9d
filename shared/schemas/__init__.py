"""Zendesk API Client Shared Schemas"""

from .attachment import Attachment
from .ticket import (
    Audit,
    CreateTicketAsyncResult,
    CreateTicketResult,
    CustomField,
    JobStatus,
    JobStatusResult,
    JSONValue,
    Source,
    Ticket,
    TicketEnvelope,
    TicketPriority,
    TicketRef,
    TicketsEnvelope,
    TicketStatus,
    TicketType,
    Via,
)
from .user import User, UserEnvelope, UserRole

__all__ = [
    # Ticket schemas
    "Ticket",
    "TicketRef",
    "TicketStatus",
    "TicketPriority",
    "TicketType",
    "CustomField",
    "Via",
    "Source",
    "Audit",
    "JSONValue",
    # Async jobs
    "JobStatus",
    "JobStatusResult",
    # User schemas
    "User",
    "UserRole",
    "Attachment",
    # Envelopes
    "TicketEnvelope",
    "TicketsEnvelope",
    "UserEnvelope",
    "CreateTicketResult",
    "CreateTicketAsyncResult",
]
