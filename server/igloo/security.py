from __future__ import annotations

import secrets
from typing import Optional

from fastapi import Header

from igloo.config import settings
from igloo.errors import UnauthorizedError

ADMIN_KEY_HEADER = "x-admin-key"


def is_admin_key_valid(provided: Optional[str], expected: Optional[str]) -> bool:
    """
    Compare a request-supplied admin key against the configured one.

    An unset server key rejects every request.
    """
    if not provided or not expected:
        return False
    return secrets.compare_digest(provided.encode(), expected.encode())


async def require_admin(x_admin_key: Optional[str] = Header(None, alias=ADMIN_KEY_HEADER)) -> None:
    """Dependency that raises ``UnauthorizedError`` unless the admin key matches."""
    if not is_admin_key_valid(x_admin_key, settings.admin_key):
        raise UnauthorizedError()
