"""Identity registry service.

Self-service registration plus admin/oracle-driven verification.

Identity State Machine:
    UNREGISTERED -> REGISTERED (register, caller-bound)
    REGISTERED -> VERIFIED (verify, admin or allowlisted oracle)

Ledger Invariants:
- One record per address; registration is never done on behalf of another
- verified implies registered
- The identifier is returned only to its owner and never logged
"""

from __future__ import annotations

from structlog import get_logger

from guardian_ledger.application.dtos.ledger import UserStatus
from guardian_ledger.application.ports.allowlist import AllowlistProtocol
from guardian_ledger.application.ports.time_authority import TimeAuthorityProtocol
from guardian_ledger.application.ports.user_repository import UserRepositoryProtocol
from guardian_ledger.application.services.ledger_sequencer import LedgerSequencer
from guardian_ledger.domain.errors import (
    AdminOnlyError,
    AlreadyRegisteredError,
    AlreadyVerifiedError,
    EmptyContentError,
    InvalidAmountError,
    UnauthorizedError,
    UserNotRegisteredError,
)
from guardian_ledger.domain.events import (
    OracleAllowlistChangedEvent,
    UserRegisteredEvent,
    UserVerifiedEvent,
)
from guardian_ledger.domain.models.address import normalize_address
from guardian_ledger.domain.models.user import User

logger = get_logger(__name__)


class IdentityRegistryService:
    """Service for identity registration and verification.

    The admin may always verify. Other callers may verify only while on
    the oracle allowlist, which normally holds just the stake gate.

    Example:
        >>> registry = IdentityRegistryService(
        ...     users=users,
        ...     oracles=oracles,
        ...     sequencer=sequencer,
        ...     time_authority=time_authority,
        ...     admin=admin,
        ... )
        >>> await registry.register(alice, "alice", 100)
        >>> await registry.verify(admin, alice)
        >>> await registry.is_verified(alice)
        True
    """

    def __init__(
        self,
        users: UserRepositoryProtocol,
        oracles: AllowlistProtocol,
        sequencer: LedgerSequencer,
        time_authority: TimeAuthorityProtocol,
        admin: str,
    ) -> None:
        """Initialize the identity registry.

        Args:
            users: User arena.
            oracles: Addresses besides the admin allowed to verify.
            sequencer: Ledger transaction sequencer.
            time_authority: Injected clock.
            admin: Registry admin address.
        """
        self._users = users
        self._oracles = oracles
        self._sequencer = sequencer
        self._time = time_authority
        self._admin = normalize_address(admin)

    @property
    def admin(self) -> str:
        """Registry admin address."""
        return self._admin

    async def register(self, caller: str, identifier: str, longevity: int) -> User:
        """Register the caller.

        Args:
            caller: The registering address; registration is caller-bound.
            identifier: Opaque, non-empty identifier (kept confidential).
            longevity: Non-negative longevity score.

        Returns:
            The new User record.

        Raises:
            InvalidAddressError: If caller is malformed.
            EmptyContentError: If identifier is empty or whitespace.
            InvalidAmountError: If longevity is negative or not an integer.
            AlreadyRegisteredError: If caller already has a record.
        """
        caller = normalize_address(caller)
        log = logger.bind(caller=caller)

        if not isinstance(identifier, str) or not identifier.strip():
            log.warning("registration_rejected_empty_identifier")
            raise EmptyContentError("identifier")
        if not isinstance(longevity, int) or isinstance(longevity, bool) or longevity < 0:
            log.warning("registration_rejected_invalid_longevity", longevity=longevity)
            raise InvalidAmountError(longevity, field_name="longevity")

        async with self._sequencer.transaction("identity.register") as tx:
            if await self._users.get(caller) is not None:
                log.warning("registration_rejected_already_registered")
                raise AlreadyRegisteredError(caller)

            now = self._time.now()
            user = User(
                address=caller,
                identifier=identifier,
                longevity=longevity,
                created_at=now,
            )
            await self._users.save(user)
            tx.record(
                UserRegisteredEvent(
                    address=caller,
                    longevity=longevity,
                    registered_at=now,
                )
            )

        log.info("user_registered", longevity=longevity)
        return user

    async def verify(self, caller: str, address: str) -> User:
        """Mark a registered address as verified.

        Args:
            caller: The admin or an allowlisted oracle.
            address: The address to verify.

        Returns:
            The verified User record.

        Raises:
            AdminOnlyError: If caller is neither admin nor oracle.
            UserNotRegisteredError: If address has no record.
            AlreadyVerifiedError: If address is already verified.
        """
        caller = normalize_address(caller)
        address = normalize_address(address)
        log = logger.bind(caller=caller, address=address)

        async with self._sequencer.transaction("identity.verify") as tx:
            if caller != self._admin and not await self._oracles.contains(caller):
                log.warning("verification_rejected_not_authorized")
                raise AdminOnlyError(caller, "verify users")

            user = await self._users.get(address)
            if user is None:
                log.warning("verification_rejected_not_registered")
                raise UserNotRegisteredError(address)
            if user.verified:
                log.warning("verification_rejected_already_verified")
                raise AlreadyVerifiedError(address)

            now = self._time.now()
            verified = user.with_verified(now)
            await self._users.save(verified)
            tx.record(
                UserVerifiedEvent(
                    address=address,
                    verified_by=caller,
                    verified_at=now,
                )
            )

        log.info("user_verified")
        return verified

    async def is_registered(self, address: str) -> bool:
        """Return True if address has a registry record."""
        return await self._users.get(normalize_address(address)) is not None

    async def is_verified(self, address: str) -> bool:
        """Return True if address is registered and verified."""
        user = await self._users.get(normalize_address(address))
        return user is not None and user.verified

    async def get_my_identifier(self, caller: str, address: str | None = None) -> str:
        """Return the caller's own identifier.

        Args:
            caller: The requesting address.
            address: Optional target; must equal caller when given.

        Returns:
            The identifier the caller registered with.

        Raises:
            UnauthorizedError: If address names someone other than caller.
            UserNotRegisteredError: If caller has no record.
        """
        caller = normalize_address(caller)
        if address is not None and normalize_address(address) != caller:
            logger.warning("identifier_read_rejected", caller=caller)
            raise UnauthorizedError(caller, "read another user's identifier")

        user = await self._users.get(caller)
        if user is None:
            raise UserNotRegisteredError(caller)
        return user.identifier

    async def get_user_status(self, address: str) -> UserStatus:
        """Return the public status of address (no identifier)."""
        address = normalize_address(address)
        user = await self._users.get(address)
        if user is None:
            return UserStatus(address=address, is_registered=False, is_verified=False)
        return UserStatus(
            address=address,
            is_registered=True,
            is_verified=user.verified,
            created_at=user.created_at,
            verified_at=user.verified_at,
            longevity=user.longevity,
        )

    async def total_users(self) -> int:
        """Return the number of registered users."""
        return await self._users.count()

    async def is_oracle(self, address: str) -> bool:
        """Return True if address may verify users."""
        return await self._oracles.contains(normalize_address(address))

    async def add_oracle(self, caller: str, address: str) -> bool:
        """Allow address to verify users (admin only)."""
        return await self._change_oracle(caller, address, added=True)

    async def remove_oracle(self, caller: str, address: str) -> bool:
        """Revoke address's right to verify users (admin only)."""
        return await self._change_oracle(caller, address, added=False)

    async def _change_oracle(self, caller: str, address: str, *, added: bool) -> bool:
        caller = normalize_address(caller)
        address = normalize_address(address)
        if caller != self._admin:
            logger.warning("oracle_change_rejected_not_admin", caller=caller, oracle=address)
            raise AdminOnlyError(caller, "add oracles" if added else "remove oracles")

        async with self._sequencer.transaction("identity.change_oracle") as tx:
            if added:
                changed = await self._oracles.add(address)
            else:
                changed = await self._oracles.remove(address)
            if changed:
                tx.record(
                    OracleAllowlistChangedEvent(
                        oracle=address,
                        added=added,
                        changed_by=caller,
                        changed_at=self._time.now(),
                    )
                )

        logger.info("oracle_allowlist_changed", oracle=address, added=added, changed=changed)
        return changed
