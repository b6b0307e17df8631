import hmac

from .errors import AuthenticationError
from .results import Outcome


def validate_token(secret: str | None, token: str | None) -> Outcome:
    # no configured secret: open mode
    if not secret:
        return Outcome.success()
    if token is not None and hmac.compare_digest(secret.encode(), token.encode()):
        return Outcome.success()
    return Outcome.failure(AuthenticationError())
