"""Identity provider contract (protocol)."""

from typing import Protocol

from session_coordination.domain.models.presence_entry import ParticipantIdentity


class IdentityProviderProtocol(Protocol):
    """Supplies the local user, if one is signed in."""

    def get_identity(self) -> ParticipantIdentity | None:
        """Return the local participant, or None while signed out."""
        ...
