"""Issuing and validating signed session tokens (HS256 JWT)."""
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional
import logging
import uuid

from jose import jwt, JWTError

from usertask_api.config import Settings
from usertask_api.services.errors import AuthError, AuthErrorKind

logger = logging.getLogger(__name__)

ALGORITHM = "HS256"


@dataclass(frozen=True)
class TokenClaims:
    """Identity asserted by a verified token."""

    user_id: int
    email: Optional[str]
    token_id: str
    issued_at: datetime
    expires_at: datetime


class TokenService:
    """Stateless bearer tokens: nothing is stored server-side."""

    def __init__(self, settings: Settings):
        self.settings = settings

    def issue(self, user_id: int, email: str, now: Optional[datetime] = None) -> str:
        """Sign a token for ``user_id`` valid for the configured lifetime."""
        issued_at = now or datetime.now(timezone.utc)
        payload = {
            "sub": str(user_id),
            "email": email,
            "jti": str(uuid.uuid4()),
            "iat": issued_at,
            "exp": issued_at + self.settings.token_lifetime,
            "iss": self.settings.jwt_issuer,
            "aud": self.settings.jwt_audience,
        }
        return jwt.encode(payload, self.settings.jwt_key, algorithm=ALGORITHM)

    def validate(self, token: str) -> TokenClaims:
        """
        Verify signature, issuer, audience and expiry of a token.

        Raises:
            AuthError: INVALID_TOKEN for any verification failure
        """
        try:
            payload = jwt.decode(
                token,
                self.settings.jwt_key,
                algorithms=[ALGORITHM],
                audience=self.settings.jwt_audience,
                issuer=self.settings.jwt_issuer,
                options={"require_iat": True, "require_exp": True},
            )
        except jwt.ExpiredSignatureError:
            logger.info("Rejected expired token")
            raise AuthError(AuthErrorKind.INVALID_TOKEN, "Token has expired")
        except JWTError as e:
            logger.info(f"Rejected invalid token: {str(e)}")
            raise AuthError(AuthErrorKind.INVALID_TOKEN, "Invalid token")

        subject = payload.get("sub")
        if subject is None or not str(subject).isdigit():
            raise AuthError(AuthErrorKind.INVALID_TOKEN, "Invalid token: missing user ID")

        return TokenClaims(
            user_id=int(subject),
            email=payload.get("email"),
            token_id=payload.get("jti", ""),
            issued_at=datetime.fromtimestamp(payload["iat"], timezone.utc),
            expires_at=datetime.fromtimestamp(payload["exp"], timezone.utc),
        )
