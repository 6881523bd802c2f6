"""Bearer token verification for the auth gate.

Tokens are issued by the surrounding application and signed with the shared
HMAC secret from app.core.config. This service only verifies them.
"""

from jose import JWTError, jwt

from app.core.config import get_settings
from app.domain.exceptions import AuthenticationException


def decode_access_token(token: str) -> str:
    """Return the acting user id carried in the token's sub claim.

    exp and sub are mandatory. A bad signature, an expired token, a missing
    claim or an empty subject all raise AuthenticationException.
    """
    settings = get_settings()
    try:
        payload = jwt.decode(
            token,
            settings.secret_key.get_secret_value(),
            algorithms=[settings.algorithm],
            options={"require_exp": True, "require_sub": True},
        )
    except JWTError as e:
        raise AuthenticationException("Token is not valid") from e
    user_id = payload.get("sub")
    if not user_id:
        raise AuthenticationException("Token is not valid")
    return str(user_id)
