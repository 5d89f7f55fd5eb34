"""Email Uniqueness Enforcement — decides whether a write may claim an email.

Invariants:
    - check_email_available is PURE: no IO, the shell fetches the holder first
    - A holder with a different id than the request always conflicts
    - A request without an id (create) conflicts with any holder
    - A user keeping its own email never conflicts with itself

Design Decisions:
    - Compare record ids, not the holder's email against the request email:
      the holder was found BY that email, so string equality is always true
"""

from user_api.core.domain_types import UserId
from user_api.core.errors import DataIntegrityViolationError, ErrorContext


EMAIL_ALREADY_USED: str = "Email already used"


def is_email_conflict(holder_id: UserId | None, request_id: UserId | None) -> bool:
    """True when the email is held by a record other than the one being written."""
    if holder_id is None:
        return False
    return holder_id != request_id


def check_email_available(holder_id: UserId | None, request_id: UserId | None) -> None:
    """Raise DataIntegrityViolationError when the email belongs to another user."""
    if is_email_conflict(holder_id, request_id):
        raise DataIntegrityViolationError(
            EMAIL_ALREADY_USED, ErrorContext(user_id=holder_id),
        )
