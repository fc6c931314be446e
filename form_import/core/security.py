from fastapi import Header, HTTPException, status


def get_current_owner(
    x_user_email: str | None = Header(default=None),
) -> str:
    """
    DEV AUTH: pass X-User-Email header to identify the importing user.
    Example: X-User-Email: owner@local.test
    """
    email = (x_user_email or "").strip().lower()
    if not email:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing X-User-Email header (dev auth)",
        )
    return email
