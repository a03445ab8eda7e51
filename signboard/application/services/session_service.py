"""Session service.

Implements IdentityProviderProtocol on top of the identity registry and
keeps the signed-in principal in the persistent store, so a restarted
process resumes the session the way the front end resumed it from
browser storage.

Login awaits the same simulated latency as repository mutations.
"""

from __future__ import annotations

import asyncio
import json
import re
from typing import TYPE_CHECKING

from structlog import get_logger
from uuid6 import uuid7

from signboard.application.ports.identity_registry import RegisteredAccount
from signboard.application.ports.persistent_store import SESSION_KEY
from signboard.application.services.credentials import hash_password, verify_password
from signboard.domain.errors import (
    AuthenticationError,
    AuthorizationError,
    ValidationError,
)
from signboard.domain.models.principal import Principal, UserRole

if TYPE_CHECKING:
    from signboard.application.ports.identity_registry import (
        IdentityRegistryProtocol,
    )
    from signboard.application.ports.persistent_store import PersistentStoreProtocol
    from signboard.config.workflow_config import WorkflowConfig

logger = get_logger(__name__)

MIN_USERNAME_LENGTH = 3
MIN_PASSWORD_LENGTH = 6
_EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


class SessionService:
    """Authenticates principals and tracks the current session.

    Example:
        >>> sessions = SessionService(registry=registry, store=store, config=config)
        >>> principal = await sessions.authenticate("director@example.com", "director123")
        >>> sessions.current_principal() == principal
        True
    """

    def __init__(
        self,
        registry: IdentityRegistryProtocol,
        store: PersistentStoreProtocol,
        config: WorkflowConfig,
    ) -> None:
        """Initialize without a session.

        Args:
            registry: Accounts that credentials are checked against.
            store: Persistent store for the session entry.
            config: Workflow configuration (simulated latency).
        """
        self._registry = registry
        self._store = store
        self._latency = config.simulated_latency_seconds
        self._principal: Principal | None = None

    def current_principal(self) -> Principal | None:
        """Get the signed-in principal, or None."""
        return self._principal

    def require_principal(self) -> Principal:
        """Get the signed-in principal.

        Raises:
            AuthenticationError: If nobody is signed in.
        """
        if self._principal is None:
            raise AuthenticationError("You must be logged in")
        return self._principal

    async def restore(self) -> Principal | None:
        """Resume the session persisted by a previous run, if any.

        A corrupt session entry is discarded rather than trusted.

        Returns:
            The restored principal, or None.
        """
        raw = await self._store.get(SESSION_KEY)
        if raw is None:
            return None
        try:
            self._principal = Principal.from_dict(json.loads(raw))
        except (KeyError, TypeError, ValueError):
            logger.warning("session_entry_discarded")
            await self._store.remove(SESSION_KEY)
            self._principal = None
            return None
        logger.info("session_restored", principal_id=self._principal.id)
        return self._principal

    async def authenticate(self, email: str, password: str) -> Principal:
        """Check credentials and open a session.

        Args:
            email: Login email (case-insensitive).
            password: Plain-text password.

        Returns:
            The authenticated principal.

        Raises:
            AuthenticationError: If the email is unknown or the password
                does not match. No session is established.
        """
        if self._latency > 0:
            await asyncio.sleep(self._latency)

        account = await self._registry.find_by_email(email)
        if account is None or not verify_password(password, account.password_hash):
            logger.warning("login_failed", email=email)
            raise AuthenticationError("Invalid credentials")

        await self._store.put(SESSION_KEY, json.dumps(account.principal.to_dict()))
        self._principal = account.principal
        logger.info(
            "login_succeeded",
            principal_id=account.principal.id,
            role=account.principal.role.value,
        )
        return account.principal

    async def logout(self) -> None:
        """Close the current session. Safe to call without one."""
        previous = self._principal
        await self._store.remove(SESSION_KEY)
        self._principal = None
        if previous is not None:
            logger.info("logout", principal_id=previous.id)

    async def register_user(
        self,
        actor: Principal,
        *,
        username: str,
        email: str,
        password: str,
        confirm_password: str,
        role: UserRole = UserRole.DESIGNER,
    ) -> Principal:
        """Add an account to the registry.

        Only the unrestricted role may create accounts.

        Args:
            actor: The principal performing the registration.
            username: Display name, at least three characters.
            email: Login email, must look like an address and be unused.
            password: At least six characters.
            confirm_password: Must equal ``password``.
            role: Role of the new account.

        Returns:
            The new principal.

        Raises:
            AuthorizationError: If the actor is not an admin.
            ValidationError: If any field is invalid or the email is taken.
        """
        if not actor.is_admin:
            logger.warning("register_user_refused", actor_id=actor.id)
            raise AuthorizationError(
                "Only administrators may create users",
                role=actor.role.value,
                action="register_user",
            )

        username = username.strip()
        email = email.strip()
        if len(username) < MIN_USERNAME_LENGTH:
            raise ValidationError(
                f"Username must have at least {MIN_USERNAME_LENGTH} characters",
                field="username",
            )
        if not _EMAIL_PATTERN.match(email):
            raise ValidationError("Invalid email address", field="email")
        if len(password) < MIN_PASSWORD_LENGTH:
            raise ValidationError(
                f"Password must have at least {MIN_PASSWORD_LENGTH} characters",
                field="password",
            )
        if password != confirm_password:
            raise ValidationError("Passwords do not match", field="confirm_password")
        if await self._registry.find_by_email(email) is not None:
            raise ValidationError(f"Email {email} is already registered", field="email")

        principal = Principal(id=str(uuid7()), email=email, name=username, role=role)
        await self._registry.add(
            RegisteredAccount(
                principal=principal,
                password_hash=hash_password(password),
            )
        )
        logger.info(
            "user_registered",
            principal_id=principal.id,
            role=role.value,
            actor_id=actor.id,
        )
        return principal
