"""Authentication service for JWT and password handling."""

import logging
import math
from datetime import UTC, datetime, timedelta
from typing import Any

from jose import ExpiredSignatureError, JWTError, jwt
from passlib.context import CryptContext
from sqlalchemy import func
from sqlalchemy.orm import Session

from blog_api.config import Settings
from blog_api.database import atomic
from blog_api.errors import AuthenticationError, ConflictError
from blog_api.models.enums import Role
from blog_api.models.user import User
from blog_api.schemas.auth import AccessToken, TokenPair, UserRegister
from blog_api.validation import validate_email, validate_password, validate_username

logger = logging.getLogger(__name__)

# Password hashing context
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

ACCESS_TOKEN = "access"  # noqa: S105
REFRESH_TOKEN = "refresh"  # noqa: S105

INVALID_CREDENTIALS = "Incorrect username or password"


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """Hash a password."""
    return pwd_context.hash(password)


class TokenService:
    """Issues and validates signed JWTs."""

    def __init__(self, settings: Settings):
        self.secret = settings.jwt_secret
        self.algorithm = settings.jwt_algorithm
        self.access_ttl = timedelta(minutes=settings.access_token_expiration_minutes)
        self.refresh_ttl = timedelta(minutes=settings.refresh_token_expiration_minutes)

    def _encode(
        self, user: User, token_type: str, ttl: timedelta, now: datetime | None
    ) -> tuple[str, datetime]:
        issued_at = now or datetime.now(UTC)
        expires_at = issued_at + ttl
        role = user.role_enum
        claims = {
            "sub": user.username,
            "uid": user.id,
            "role": role.value,
            "authorities": [role.authority],
            "type": token_type,
            "iat": int(issued_at.timestamp()),
            # JWT expiry is whole seconds, rounded up from the reported expiry
            "exp": math.ceil(expires_at.timestamp()),
        }
        return jwt.encode(claims, self.secret, algorithm=self.algorithm), expires_at

    def create_access_token(self, user: User, now: datetime | None = None) -> tuple[str, datetime]:
        """Create an access token and return it with its expiry."""
        return self._encode(user, ACCESS_TOKEN, self.access_ttl, now)

    def create_refresh_token(self, user: User, now: datetime | None = None) -> tuple[str, datetime]:
        """Create a refresh token and return it with its expiry."""
        return self._encode(user, REFRESH_TOKEN, self.refresh_ttl, now)

    def decode_token(self, token: str, expected_type: str = ACCESS_TOKEN) -> dict[str, Any]:
        """Validate signature, expiry and token type, returning the claims.

        Raises:
            AuthenticationError: with code ``TOKEN_EXPIRED`` or ``TOKEN_INVALID``.
        """
        try:
            payload = jwt.decode(token, self.secret, algorithms=[self.algorithm])
        except ExpiredSignatureError:
            raise AuthenticationError("Token has expired", code="TOKEN_EXPIRED") from None
        except JWTError:
            raise AuthenticationError("Invalid token", code="TOKEN_INVALID") from None

        if payload.get("type") != expected_type:
            raise AuthenticationError("Invalid token", code="TOKEN_INVALID")
        if not isinstance(payload.get("uid"), int) or not payload.get("sub"):
            raise AuthenticationError("Invalid token", code="TOKEN_INVALID")
        return payload


class AuthService:
    """Registration, login and token refresh."""

    def __init__(self, db: Session, tokens: TokenService):
        self.db = db
        self.tokens = tokens

    def get_user_by_username(self, username: str) -> User | None:
        return (
            self.db.query(User).filter(func.lower(User.username) == username.lower()).first()
        )

    def get_user_by_email(self, email: str) -> User | None:
        return self.db.query(User).filter(User.email == email.lower()).first()

    def register(self, data: UserRegister, role: Role = Role.USER) -> User:
        """Create a new account with a bcrypt-hashed password."""
        username = validate_username(data.username)
        email = validate_email(data.email)
        password = validate_password(data.password)

        if self.get_user_by_username(username):
            raise ConflictError("Username is already taken")
        if self.get_user_by_email(email):
            raise ConflictError("Email is already registered")

        user = User(
            username=username,
            email=email,
            password_hash=get_password_hash(password),
            role=role.value,
        )
        with atomic(self.db, "Username or email is already registered"):
            self.db.add(user)
        self.db.refresh(user)
        logger.info(f"Registered user {user.id} ({user.username})")
        return user

    def authenticate(self, username: str, password: str) -> User:
        """Check credentials, accepting either the username or the email.

        Unknown accounts still pay for a hash comparison and get the same
        error as a wrong password.
        """
        user = self.get_user_by_username(username)
        if user is None and "@" in username:
            user = self.get_user_by_email(username)

        if user is None or user.is_deleted:
            pwd_context.dummy_verify()
            logger.info("Failed login attempt for unknown or inactive account")
            raise AuthenticationError(INVALID_CREDENTIALS)

        if not verify_password(password, user.password_hash):
            logger.info(f"Failed login attempt for user {user.id}")
            raise AuthenticationError(INVALID_CREDENTIALS)

        return user

    def login(self, username: str, password: str, now: datetime | None = None) -> TokenPair:
        user = self.authenticate(username, password)
        access_token, expires_at = self.tokens.create_access_token(user, now)
        refresh_token, _ = self.tokens.create_refresh_token(user, now)
        return TokenPair(
            access_token=access_token,
            refresh_token=refresh_token,
            expires_at=expires_at,
        )

    def refresh(self, refresh_token: str, now: datetime | None = None) -> AccessToken:
        """Exchange a refresh token for a new access token."""
        payload = self.tokens.decode_token(refresh_token, expected_type=REFRESH_TOKEN)
        user = self._load_active_user(payload)
        access_token, expires_at = self.tokens.create_access_token(user, now)
        return AccessToken(access_token=access_token, expires_at=expires_at)

    def resolve_user(self, access_token: str) -> User:
        """Return the active user an access token was issued to."""
        payload = self.tokens.decode_token(access_token, expected_type=ACCESS_TOKEN)
        return self._load_active_user(payload)

    def _load_active_user(self, payload: dict[str, Any]) -> User:
        user = self.db.query(User).filter(User.id == payload["uid"]).first()
        if user is None or user.is_deleted or user.username != payload["sub"]:
            raise AuthenticationError("User not found or inactive", code="TOKEN_INVALID")
        return user
