"""Role elevation requests and their administrator review."""

from __future__ import annotations

from typing import Optional
import logging

from hockeyapp.core.errors import HockeyError, ValidationError, require_id
from hockeyapp.core.ids import generate_id
from hockeyapp.core.utils import now_iso
from hockeyapp.domain import keys, roles
from hockeyapp.repositories import collections
from hockeyapp.repositories.base import KeyValueStorage
from hockeyapp.services.session_service import SessionStore
from hockeyapp.services.user_service import UserNotFoundError

logger = logging.getLogger(__name__)


class RoleRequestError(HockeyError):
    """Base exception for the role request workflow."""


class DuplicatePendingRequestError(RoleRequestError):
    """Raised when the user already has a request waiting for review."""


class RequestNotFoundError(RoleRequestError):
    pass


class RequestAlreadyReviewedError(RoleRequestError):
    """Raised when approving/rejecting a request that is no longer pending."""


class RoleRequestService:
    """
    pending --approve--> approved
    pending --reject---> rejected

    Both terminal states are final. Approval changes the user record, the
    request and (when the user is logged in) the session pointer in a single
    ``set_many`` write.
    """

    def __init__(self, storage: KeyValueStorage, session: Optional[SessionStore] = None) -> None:
        self.storage = storage
        self.session = session or SessionStore(storage)
        self.repository = collections.role_requests(storage)
        self.users = collections.users(storage)

    def list_all(self) -> list[dict]:
        return self.repository.list()

    def list_pending(self) -> list[dict]:
        return self.repository.filter(status=roles.PENDING)

    def list_for_user(self, user_id: str) -> list[dict]:
        return self.repository.filter(userId=require_id(user_id, "User ID"))

    def has_pending(self, user_id: Optional[str]) -> bool:
        user_id = user_id.strip() if isinstance(user_id, str) else ""
        if not user_id:
            return False
        return self.repository.exists(userId=user_id, status=roles.PENDING)

    def submit(self, user_id: str, requested_role: str, team: Optional[str] = None) -> dict:
        user_id = require_id(user_id, "User ID")
        if requested_role not in roles.REQUESTABLE_ROLES:
            raise ValidationError(f"Requested role must be one of {', '.join(roles.REQUESTABLE_ROLES)}")
        requests = self.repository.list()
        if any(r.get("userId") == user_id and r.get("status") == roles.PENDING for r in requests):
            raise DuplicatePendingRequestError("You already have a pending role request")
        request = {
            "id": generate_id(),
            "userId": user_id,
            "requestedRole": requested_role,
            "team": team,
            "status": roles.PENDING,
            "requestDate": now_iso(),
            "reviewDate": None,
            "reviewedBy": None,
            "comments": None,
        }
        self.repository.replace_all([*requests, request])
        logger.info("role request %s submitted: user=%s role=%s", request["id"], user_id, requested_role)
        return request

    # -------------------------------------- review --------------------------------------
    def _find_pending(self, requests: list[dict], request_id: str) -> int:
        request_id = require_id(request_id, "Request id")
        index = next((i for i, r in enumerate(requests) if r.get("id") == request_id), None)
        if index is None:
            raise RequestNotFoundError("Role request not found")
        status = requests[index].get("status")
        if status != roles.PENDING:
            raise RequestAlreadyReviewedError(f"Role request already {status}")
        return index

    def approve(self, request_id: str, reviewer_id: str) -> dict:
        requests = self.repository.list()
        index = self._find_pending(requests, request_id)
        request = requests[index]

        users = self.users.list()
        user_index = next((i for i, u in enumerate(users) if u.get("id") == request.get("userId")), None)
        if user_index is None:
            raise UserNotFoundError("User not found")

        user = dict(users[user_index])
        user["role"] = request["requestedRole"]
        if request.get("team"):
            user["team"] = request["team"]
        users[user_index] = user

        reviewed = {
            **request,
            "status": roles.APPROVED,
            "reviewDate": now_iso(),
            "reviewedBy": reviewer_id,
        }
        requests[index] = reviewed

        writes = {keys.USERS: users, keys.ROLE_REQUESTS: requests}
        current = self.session.get()
        if current and current.get("id") == user.get("id"):
            writes[keys.CURRENT_USER] = {
                **current,
                "role": user["role"],
                "team": request.get("team") or current.get("team"),
            }
        self.storage.set_many(writes)
        logger.info("role request %s approved by %s: user=%s role=%s", reviewed["id"], reviewer_id, user["id"], user["role"])
        return reviewed

    def reject(self, request_id: str, reviewer_id: str, comments: Optional[str] = None) -> dict:
        requests = self.repository.list()
        index = self._find_pending(requests, request_id)
        reviewed = {
            **requests[index],
            "status": roles.REJECTED,
            "reviewDate": now_iso(),
            "reviewedBy": reviewer_id,
            "comments": comments,
        }
        requests[index] = reviewed
        self.repository.replace_all(requests)
        logger.info("role request %s rejected by %s", reviewed["id"], reviewer_id)
        return reviewed
