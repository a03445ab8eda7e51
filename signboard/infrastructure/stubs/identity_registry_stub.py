"""Identity registry stub.

Fixed in-memory registry of accounts. Ships the three demo accounts the
signage front end was delivered with, one per role.
"""

from __future__ import annotations

from signboard.application.ports.identity_registry import RegisteredAccount
from signboard.application.services.credentials import hash_password
from signboard.domain.models.principal import Principal, UserRole

# (id, email, password, name, role)
DEMO_ACCOUNTS: tuple[tuple[str, str, str, str, UserRole], ...] = (
    ("1", "admin@example.com", "admin123", "Admin User", UserRole.ADMIN),
    ("2", "director@example.com", "director123", "Director User", UserRole.DIRECTOR),
    ("3", "designer@example.com", "designer123", "Designer User", UserRole.DESIGNER),
)


def build_account(principal: Principal, password: str) -> RegisteredAccount:
    """Create a registry entry with a freshly hashed password."""
    return RegisteredAccount(principal=principal, password_hash=hash_password(password))


class IdentityRegistryStub:
    """In-memory implementation of IdentityRegistryProtocol.

    Usage:
        registry = IdentityRegistryStub()               # demo accounts
        registry = IdentityRegistryStub(with_demo_accounts=False)
    """

    def __init__(self, *, with_demo_accounts: bool = True) -> None:
        """Initialize the registry.

        Args:
            with_demo_accounts: Pre-load the admin/director/designer
                demo accounts.
        """
        self._accounts: dict[str, RegisteredAccount] = {}
        if with_demo_accounts:
            for account_id, email, password, name, role in DEMO_ACCOUNTS:
                principal = Principal(id=account_id, email=email, name=name, role=role)
                account = build_account(principal, password)
                self._accounts[email.lower()] = account

    @property
    def accounts(self) -> tuple[RegisteredAccount, ...]:
        """Get every registered account (for test assertions)."""
        return tuple(self._accounts.values())

    async def find_by_email(self, email: str) -> RegisteredAccount | None:
        """Find an account by email, ignoring case."""
        return self._accounts.get(email.strip().lower())

    async def add(self, account: RegisteredAccount) -> None:
        """Add an account.

        Raises:
            ValueError: If the email is already registered.
        """
        key = account.principal.email.strip().lower()
        if key in self._accounts:
            raise ValueError(f"Account {account.principal.email} already exists")
        self._accounts[key] = account
