#!/usr/bin/env python3
"""Fetch tickets or users from Zendesk and print them for inspection"""
import argparse
import os
import sys

import structlog

sys.path.insert(0, ".")
from services.client import ZendeskAPI, ZendeskAPIError
from shared.schemas import Ticket, User

logger = structlog.get_logger()


def log_error(err: Exception):
    """Error handler wired into the client"""
    logger.warning("Zendesk call failed", error=str(err), error_type=type(err).__name__)


def display_value(value) -> str:
    """Show enum members by their Zendesk value"""
    return str(getattr(value, "value", value))


def format_ticket_display(ticket: Ticket) -> str:
    """Format ticket data for display"""
    lines = []
    lines.append("=" * 80)
    lines.append(f"TICKET #{ticket.id}")
    lines.append("=" * 80)

    lines.append("\n### METADATA ###")
    lines.append(f"Subject: {ticket.subject}")
    lines.append(f"Status: {display_value(ticket.status)}")
    lines.append(f"Priority: {display_value(ticket.priority or 'Not set')}")
    lines.append(f"Type: {display_value(ticket.type)}")
    lines.append(f"Created: {ticket.created_at}")
    lines.append(f"Updated: {ticket.updated_at}")
    if ticket.via:
        lines.append(f"Via: {ticket.via.channel}")

    lines.append("\n### PEOPLE ###")
    lines.append(f"Requester: {ticket.requester_id}")
    lines.append(f"Assignee: {ticket.assignee_id}")

    lines.append("\n### TAGS ###")
    lines.append(", ".join(ticket.tags))

    lines.append("\n### CUSTOM FIELDS (with values) ###")
    for cf in ticket.custom_fields:
        if cf.value not in (None, "", False):
            lines.append(f"  {cf.id}: {cf.value}")

    lines.append("\n### DESCRIPTION ###")
    lines.append(ticket.description or "")
    return "\n".join(lines)


def format_user_display(user: User) -> str:
    """Format user data for display"""
    lines = []
    lines.append("=" * 80)
    lines.append(f"USER #{user.id} - {user.name}")
    lines.append("=" * 80)
    lines.append(f"Email: {user.email}")
    lines.append(f"Role: {display_value(user.role)}")
    lines.append(f"Organization: {user.organization_id}")
    lines.append(f"Active: {user.active}  Verified: {user.verified}  Suspended: {user.suspended}")
    lines.append(f"Time zone: {user.time_zone}")
    if user.photo and user.photo.content_url:
        lines.append(f"Photo: {user.photo.content_url}")
    if user.user_fields:
        lines.append("\n### USER FIELDS ###")
        for key, value in user.user_fields.items():
            lines.append(f"  {key}: {value}")
    return "\n".join(lines)


def main():
    parser = argparse.ArgumentParser(description="Inspect Zendesk tickets and users")
    parser.add_argument("--host", default=os.getenv("ZENDESK_HOST"), help="Zendesk host")
    parser.add_argument("--email", default=os.getenv("ZENDESK_EMAIL"), help="Agent email")
    parser.add_argument("--token", default=os.getenv("ZENDESK_API_TOKEN"), help="API token")
    parser.add_argument("--timeout", type=float, default=30.0, help="Request timeout in seconds")

    subparsers = parser.add_subparsers(dest="command", required=True)

    ticket_parser = subparsers.add_parser("ticket", help="Show one ticket")
    ticket_parser.add_argument("ticket_id", type=int)

    tickets_parser = subparsers.add_parser("tickets", help="Show several tickets")
    tickets_parser.add_argument("ticket_ids", type=int, nargs="+")

    user_parser = subparsers.add_parser("user", help="Show one user")
    user_parser.add_argument("user_id", type=int)

    args = parser.parse_args()

    if not (args.host and args.email and args.token):
        parser.error("host, email and token are required (or set ZENDESK_HOST, ZENDESK_EMAIL, ZENDESK_API_TOKEN)")

    api = ZendeskAPI(args.email, args.token, args.host, log_error, timeout=args.timeout)

    try:
        if args.command == "ticket":
            print(format_ticket_display(api.show_ticket(args.ticket_id).data))
        elif args.command == "tickets":
            for ticket in api.show_tickets(args.ticket_ids).data.tickets:
                print(format_ticket_display(ticket))
        elif args.command == "user":
            print(format_user_display(api.show_user(args.user_id).data))
    except ZendeskAPIError as e:
        print(f"❌ Zendesk returned HTTP {e.status_code}")
        print(e.body.decode("utf-8", errors="replace")[:500])
        sys.exit(1)


if __name__ == "__main__":
    main()
