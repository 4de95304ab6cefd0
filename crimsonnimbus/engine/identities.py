"""Identity registration and refresh on login."""

import logging

from crimsonnimbus.errors import NotFoundError
from crimsonnimbus.models.identity import Identity, IdentityProfile
from crimsonnimbus.persistence.stores import IdentityStore

logger = logging.getLogger(__name__.split(".")[-1])


class IdentityRegistry:
    """Keeps stored identities in step with the authentication layer."""

    def __init__(self, identities: IdentityStore) -> None:
        self._identities = identities

    def login(self, profile: IdentityProfile) -> Identity:
        """
        Create or refresh an identity.

        New identities start with a high score of 0. Existing ones get their
        names and avatar refreshed; high score and characters are kept.
        """
        existing = self._identities.find_by_id(profile.id)
        if existing is None:
            logger.info(f"Registering identity {profile.id} ({profile.user_name})")
            return self._identities.save(Identity(**profile.model_dump()))

        refreshed = existing.model_copy(
            update={
                "user_name": profile.user_name,
                "display_name": profile.display_name,
                "avatar": profile.avatar,
            }
        )
        if refreshed == existing:
            return existing
        return self._identities.save(refreshed)

    def get(self, identity_id: str) -> Identity:
        """Get identity or raise NotFoundError."""
        identity = self._identities.find_by_id(identity_id)
        if identity is None:
            raise NotFoundError(f"Identity {identity_id} is not found")
        return identity
