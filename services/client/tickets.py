"""
Zendesk Tickets API
Create, show and list tickets
"""

from typing import Any

from shared.schemas.ticket import (
    CreateTicketAsyncResult,
    CreateTicketResult,
    TicketEnvelope,
    TicketsEnvelope,
)

from .client import ApiResult, encode_body, reports_errors
from .errors import ZendeskArgumentError


class TicketMixin:
    """
    Ticket operations; mixed into ZendeskAPI on top of ZendeskClientBase.

    Each call returns an ApiResult of (data, body, response) so headers and
    the raw payload stay available next to the parsed model.
    """

    @reports_errors
    def create_ticket(self, payload: Any) -> ApiResult:
        """
        Create a ticket.

        Args:
            payload: Ticket model, dict or any JSON-serializable value

        Returns:
            ApiResult whose data is a CreateTicketResult (ticket and audit)
        """
        body, response = self._send("POST", "tickets.json", encode_body({"ticket": payload}))
        return ApiResult(CreateTicketResult.model_validate_json(body), body, response)

    @reports_errors
    def create_ticket_async(self, payload: Any) -> ApiResult:
        """
        Create a ticket in the background.

        Data is a CreateTicketAsyncResult with the new ticket id and the job
        status as queued; the job is not polled.
        """
        body, response = self._send("POST", "tickets.json?async=true", encode_body({"ticket": payload}))
        return ApiResult(CreateTicketAsyncResult.model_validate_json(body), body, response)

    @reports_errors
    def show_ticket(self, ticket_id: int) -> ApiResult:
        body, response = self._send("GET", f"tickets/{ticket_id}.json")
        return ApiResult(TicketEnvelope.model_validate_json(body).ticket, body, response)

    @reports_errors
    def show_tickets(self, ticket_ids: list[int]) -> ApiResult:
        """Fetch several tickets in one call; data is a TicketsEnvelope"""
        ids = ",".join(str(ticket_id) for ticket_id in ticket_ids)
        body, response = self._send("GET", f"tickets/show_many.json?ids={ids}")
        return ApiResult(TicketsEnvelope.model_validate_json(body), body, response)

    @reports_errors
    def list_tickets(self, url: str, sort_by: str = "", sort_order: str = "") -> ApiResult:
        """
        List tickets from any ticket listing endpoint.

        Args:
            url: Listing path, e.g. "organizations/5/tickets.json"
            sort_by: Optional sort field
            sort_order: Optional "asc" or "desc"

        Returns:
            ApiResult whose data is the TicketsEnvelope page Zendesk returned,
            including next_page, previous_page and count
        """
        if not url:
            raise ZendeskArgumentError("Required argument is missing (url)")

        query = []
        if sort_by:
            query.append(f"sort_by={sort_by}")
        if sort_order:
            query.append(f"sort_order={sort_order}")
        if query:
            url = f"{url}?{'&'.join(query)}"

        body, response = self._send("GET", url)
        return ApiResult(TicketsEnvelope.model_validate_json(body), body, response)
