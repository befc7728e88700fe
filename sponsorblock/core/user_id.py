"""Local user ID generation."""

import secrets
import string

USER_ID_LENGTH = 36
USER_ID_ALPHABET = string.ascii_uppercase + string.ascii_lowercase + string.digits


def gen_user_id() -> str:
    """
    Generate a new local (private) user ID.

    Don't call this every time a client starts: keep one saved ID per user
    and treat it like a password. This is for applications that give each of
    their own users a separate ID. The format matches the one the official
    browser extension generates.

    Returns:
        A random 36-character alphanumeric ID
    """
    return "".join(secrets.choice(USER_ID_ALPHABET) for _ in range(USER_ID_LENGTH))
