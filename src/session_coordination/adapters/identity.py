"""Static identity provider."""

from session_coordination.domain.contracts.identity_provider import IdentityProviderProtocol
from session_coordination.domain.models.presence_entry import ParticipantIdentity


class StaticIdentityProvider(IdentityProviderProtocol):
    """Identity provider holding a value set by the host application."""

    def __init__(self, identity: ParticipantIdentity | None = None) -> None:
        self._identity = identity

    def get_identity(self) -> ParticipantIdentity | None:
        return self._identity

    def set_identity(self, identity: ParticipantIdentity | None) -> None:
        self._identity = identity
