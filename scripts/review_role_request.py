#!/usr/bin/env python3
"""
Approve or reject a pending role request from the shell, or list pending ones.

Usage:
  python scripts/review_role_request.py --list
  python scripts/review_role_request.py --approve REQUEST_ID --reviewer ADMIN_ID
  python scripts/review_role_request.py --reject REQUEST_ID --reviewer ADMIN_ID [--comments "..."]
"""
from __future__ import annotations

import argparse
import sys

from hockeyapp.core.logging_setup import configure_logging
from hockeyapp.repositories.base import open_storage
from hockeyapp.services.role_request_service import RoleRequestService
from hockeyapp.services.user_service import UserService


def main() -> None:
    ap = argparse.ArgumentParser(description="Review role requests")
    group = ap.add_mutually_exclusive_group(required=True)
    group.add_argument("--list", action="store_true", help="List pending requests")
    group.add_argument("--approve", metavar="REQUEST_ID", help="Approve this request")
    group.add_argument("--reject", metavar="REQUEST_ID", help="Reject this request")
    ap.add_argument("--reviewer", help="Id of the reviewing admin")
    ap.add_argument("--comments", help="Reason given when rejecting")
    args = ap.parse_args()

    configure_logging()
    storage = open_storage()
    users = UserService(storage)
    service = RoleRequestService(storage, users.session)

    if args.list:
        pending = service.list_pending()
        if not pending:
            print("No pending role requests")
        for request in pending:
            user = users.get_user(request["userId"])
            name = user["username"] if user else "Unknown User"
            print(f"{request['id']}  {name}  -> {request['requestedRole']}  team={request.get('team') or '-'}  {request['requestDate']}")
        return

    reviewer = (args.reviewer or "").strip()
    if not reviewer:
        raise SystemExit("--reviewer is required")
    admin = users.get_user(reviewer)
    if not admin or admin.get("role") != "admin":
        raise SystemExit(f"User '{reviewer}' is not an administrator")

    if args.approve:
        request = service.approve(args.approve, reviewer)
    else:
        request = service.reject(args.reject, reviewer, args.comments)
    print(f"OK: request {request['id']} {request['status']}")


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover - CLI usage
        sys.stderr.write(f"Error: {exc}\n")
        raise SystemExit(1)
