import json

import httpx
import pytest

from services.client import ZendeskArgumentError
from shared.schemas import CustomField, Source, Ticket, TicketPriority, TicketStatus, TicketType, Via

from .conftest import echo, json_response

TICKET = {
    "id": 35436,
    "url": "https://acme.zendesk.com/api/v2/tickets/35436.json",
    "subject": "Help, my printer is on fire!",
    "raw_subject": "Help, my printer is on fire!",
    "description": "The fire is very colorful.",
    "status": "open",
    "priority": "high",
    "type": "incident",
    "requester_id": 20978392,
    "submitter_id": 76872,
    "assignee_id": 235323,
    "organization_id": 509974,
    "group_id": 98738,
    "collaborator_ids": [35334, 234],
    "tags": ["enterprise", "other_tag"],
    "custom_fields": [{"id": 27642, "value": "745"}, {"id": 27648, "value": True}],
    "via": {"channel": "web", "source": {"from": {}, "to": {}, "rel": None}},
    "satisfaction_rating": {"id": 1234, "score": "good"},
    "created_at": "2009-07-20T22:55:29Z",
    "updated_at": "2011-05-05T10:38:52Z",
    "has_incidents": False,
}


class TestCreateTicket:

    def test_posts_envelope_and_parses_ticket_and_audit(self, make_api):
        response = {
            "ticket": TICKET,
            "audit": {
                "id": 2127301143,
                "ticket_id": 35436,
                "author_id": 76872,
                "created_at": "2009-07-20T22:55:29Z",
                "events": [{"id": 1, "type": "Create", "field_name": "status", "value": "open"}],
                "metadata": {"system": {"client": "curl"}},
                "via": {"channel": "api", "source": {"from": {}, "to": {}, "rel": None}},
            },
        }
        api, sent = make_api(lambda request: json_response(response, 201))

        payload = {"subject": "Help, my printer is on fire!", "comment": {"body": "Fire"}}
        result = api.create_ticket(payload).data

        request = sent[0]
        assert request.method == "POST"
        assert str(request.url) == "https://acme.zendesk.com/api/v2/tickets.json"
        assert json.loads(request.content) == {
            "ticket": {"subject": "Help, my printer is on fire!", "comment": {"body": "Fire"}}
        }
        assert result.ticket.id == 35436
        assert result.audit.id == 2127301143
        assert result.audit.via.channel == "api"
        assert result.audit.events[0]["type"] == "Create"

    def test_round_trip_preserves_populated_fields(self, make_api):
        ticket = Ticket(
            subject="Printer on fire",
            description="Smoke everywhere",
            status=TicketStatus.OPEN.value,
            priority=TicketPriority.URGENT.value,
            requester_id=42,
            collaborator_ids=[1, 2],
            tags=["hardware", "fire"],
            custom_fields=[
                CustomField(id=1, value="745"),
                CustomField(id=2, value=12),
                CustomField(id=3, value=True),
                CustomField(id=4, value=["a", "b"]),
            ],
            via=Via(channel="email", source=Source(from_={"address": "x@y.com"}, rel=None)),
            satisfaction_rating={"score": "good"},
        )
        api, _ = make_api(echo)

        result = api.create_ticket(ticket).data

        assert result.ticket == ticket

    def test_missing_audit_defaults_to_empty(self, make_api):
        api, _ = make_api(lambda request: json_response({"ticket": {"id": 1}}))

        result = api.create_ticket({"subject": "x"}).data

        assert result.ticket.id == 1
        assert result.audit.id is None


class TestCreateTicketAsync:

    def test_returns_ticket_id_and_job_status(self, make_api):
        response = {
            "ticket": {"id": 123},
            "job_status": {
                "id": "8b726e606741012ffc2d782bcb7848fe",
                "url": "https://acme.zendesk.com/api/v2/job_statuses/8b726e606741012ffc2d782bcb7848fe.json",
                "status": "queued",
                "message": None,
                "progress": 0,
                "total": 1,
                "results": [
                    {"action": "create", "id": 123, "status": "Created", "success": True, "title": "Fire"},
                ],
            },
        }
        api, sent = make_api(lambda request: json_response(response, 202))

        result = api.create_ticket_async({"subject": "Fire"}).data

        request = sent[0]
        assert request.method == "POST"
        assert request.url.path == "/api/v2/tickets.json"
        assert request.url.query == b"async=true"
        assert result.ticket.id == 123
        assert result.job_status.id == "8b726e606741012ffc2d782bcb7848fe"
        assert result.job_status.status == "queued"
        assert result.job_status.results[0].success is True
        assert result.job_status.results[0].id == 123

    def test_only_one_request_is_made(self, make_api):
        api, sent = make_api(lambda request: json_response({"ticket": {"id": 1}, "job_status": {"id": "j"}}))

        api.create_ticket_async({"subject": "x"})

        assert len(sent) == 1


class TestShowTickets:

    def test_show_ticket(self, make_api):
        api, sent = make_api(lambda request: json_response({"ticket": TICKET}))

        ticket = api.show_ticket(35436).data

        assert sent[0].method == "GET"
        assert str(sent[0].url) == "https://acme.zendesk.com/api/v2/tickets/35436.json"
        assert ticket.subject == "Help, my printer is on fire!"
        assert ticket.via.source.from_ == {}
        assert ticket.custom_fields[1].value is True
        assert ticket.satisfaction_rating == {"id": 1234, "score": "good"}

    def test_show_tickets_joins_ids(self, make_api):
        api, sent = make_api(lambda request: json_response({"tickets": [{"id": 3}, {"id": 7}, {"id": 42}]}))

        tickets = api.show_tickets([3, 7, 42]).data.tickets

        assert sent[0].url.path == "/api/v2/tickets/show_many.json"
        assert sent[0].url.query == b"ids=3,7,42"
        assert [t.id for t in tickets] == [3, 7, 42]

    def test_show_tickets_empty_response(self, make_api):
        api, _ = make_api(lambda request: json_response({"tickets": []}))

        assert api.show_tickets([1]).data.tickets == []


class TestListTickets:

    def test_requires_url(self, make_api):
        api, sent = make_api(lambda request: json_response({"tickets": []}))

        with pytest.raises(ZendeskArgumentError):
            api.list_tickets("")

        assert sent == []

    def test_argument_error_is_a_value_error(self, make_api):
        api, _ = make_api(lambda request: json_response({"tickets": []}))

        with pytest.raises(ValueError):
            api.list_tickets("", "created_at", "desc")

    def test_without_sorting(self, make_api):
        api, sent = make_api(lambda request: json_response({"tickets": [TICKET]}))

        tickets = api.list_tickets("organizations/5/tickets.json").data.tickets

        assert str(sent[0].url) == "https://acme.zendesk.com/api/v2/organizations/5/tickets.json"
        assert sent[0].url.query == b""
        assert tickets[0].id == 35436

    def test_with_sort_by_and_order(self, make_api):
        api, sent = make_api(lambda request: json_response({"tickets": []}))

        api.list_tickets("organizations/5/tickets.json", "created_at", "desc")

        assert sent[0].url.query == b"sort_by=created_at&sort_order=desc"

    def test_with_sort_order_only(self, make_api):
        api, sent = make_api(lambda request: json_response({"tickets": []}))

        api.list_tickets("users/9/tickets/requested.json", sort_order="asc")

        assert sent[0].url.query == b"sort_order=asc"

    def test_failure_status(self, make_api):
        from services.client import ZendeskAPIError

        api, _ = make_api(lambda request: httpx.Response(403, content=b'{"error":"Forbidden"}'))

        with pytest.raises(ZendeskAPIError) as exc_info:
            api.list_tickets("tickets.json")

        assert exc_info.value.status_code == 403
        assert b"Forbidden" in exc_info.value.body


class TestNullCollections:
    """Zendesk sends null where a collection is empty"""

    def test_queued_job_with_null_results(self, make_api):
        response = {
            "ticket": {"id": 123},
            "job_status": {
                "id": "82de0b044094f0c67893ac9fe64f1a99",
                "url": "https://acme.zendesk.com/api/v2/job_statuses/82de0b044094f0c67893ac9fe64f1a99.json",
                "status": "queued",
                "message": None,
                "progress": None,
                "total": None,
                "results": None,
            },
        }
        api, _ = make_api(lambda request: json_response(response, 202))

        result = api.create_ticket_async({"subject": "Fire"}).data

        assert result.ticket.id == 123
        assert result.job_status.status == "queued"
        assert result.job_status.results == []
        assert result.job_status.progress is None

    def test_ticket_with_null_lists(self, make_api):
        ticket = {**TICKET, "tags": None, "followup_ids": None, "custom_fields": None}
        api, _ = make_api(lambda request: json_response({"ticket": ticket}))

        result = api.show_ticket(35436).data

        assert result.tags == []
        assert result.followup_ids == []
        assert result.custom_fields == []

    def test_create_with_null_audit(self, make_api):
        api, _ = make_api(lambda request: json_response({"ticket": {"id": 1}, "audit": None}))

        result = api.create_ticket({"subject": "x"}).data

        assert result.audit.events == []


class TestRawExchange:
    """Typed calls keep the raw body and response next to the model"""

    def test_list_tickets_keeps_paging_fields(self, make_api):
        page = {"tickets": [{"id": 1}], "next_page": "https://x/p2", "previous_page": None, "count": 200}
        api, _ = make_api(lambda request: json_response(page))

        result = api.list_tickets("tickets.json")

        assert [t.id for t in result.data.tickets] == [1]
        assert result.data.next_page == "https://x/p2"
        assert result.data.previous_page is None
        assert result.data.count == 200

    def test_result_unpacks_to_data_body_response(self, make_api):
        api, _ = make_api(
            lambda request: httpx.Response(
                201,
                content=json.dumps({"ticket": {"id": 9}}).encode(),
                headers={"Location": "https://acme.zendesk.com/api/v2/tickets/9.json"},
            )
        )

        data, body, response = api.create_ticket({"subject": "x"})

        assert data.ticket.id == 9
        assert json.loads(body) == {"ticket": {"id": 9}}
        assert response.status_code == 201
        assert response.headers["Location"] == "https://acme.zendesk.com/api/v2/tickets/9.json"

    def test_show_tickets_page(self, make_api):
        api, _ = make_api(lambda request: json_response({"tickets": [{"id": 3}], "count": 1}))

        result = api.show_tickets([3])

        assert result.data.count == 1
        assert result.response.status_code == 200


class TestPayloadEncoding:

    def test_none_fields_on_models_are_omitted(self, make_api):
        api, sent = make_api(lambda request: json_response({"ticket": {"id": 1}}))

        api.create_ticket(Ticket(subject="x", assignee_id=None))

        assert json.loads(sent[0].content) == {"ticket": {"subject": "x"}}

    def test_explicit_null_in_mapping_is_sent(self, make_api):
        api, sent = make_api(lambda request: json_response({"ticket": {"id": 1}}))

        api.create_ticket({"subject": "x", "assignee_id": None})

        assert json.loads(sent[0].content) == {"ticket": {"subject": "x", "assignee_id": None}}

    def test_enum_fields_are_sent_as_values(self, make_api):
        api, sent = make_api(echo)

        result = api.create_ticket(Ticket(status=TicketStatus.PENDING, type=TicketType.TASK)).data

        assert json.loads(sent[0].content) == {"ticket": {"status": "pending", "type": "task"}}
        assert result.ticket.status is TicketStatus.PENDING
        assert result.ticket.type is TicketType.TASK
