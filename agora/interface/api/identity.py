"""Identity of the acting user.

The upstream gateway authenticates users and forwards their ID in the
X-User-Id header. Requests without it are anonymous.
"""

from uuid import UUID

from fastapi import Header, HTTPException, status


def optional_user_id(x_user_id: str | None = Header(default=None)) -> str | None:
    """Read the acting user's ID, None for anonymous requests.

    Raises:
        HTTPException: If the header is present but not a UUID
    """
    if not x_user_id:
        return None
    try:
        return str(UUID(x_user_id))
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="X-User-Id must be a UUID",
        )


def require_user_id(user_id: str | None, action: str) -> str:
    """Return the acting user's ID or reject the anonymous request."""
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"Authentication required to {action}",
        )
    return user_id
