"""Tracking of remote participants who are currently typing."""

import logging

from session_coordination.domain.models.presence_entry import PresenceEntry

logger = logging.getLogger(__name__)


class TypingTracker:
    """Remote typing participants keyed by id, with time-to-live eviction.

    Iteration order is insertion order; refreshing an entry keeps its position.
    """

    def __init__(self, ttl_ms: float = 3000) -> None:
        """Initialize the tracker.

        Args:
            ttl_ms: Age after which an entry is considered stale.
        """
        self.ttl_ms = ttl_ms
        self._entries: dict[str, PresenceEntry] = {}

    def touch(self, participant_id: str, display_name: str, now_ms: float) -> bool:
        """Insert or refresh a participant.

        Returns:
            True if the participant was not tracked before.
        """
        is_new = participant_id not in self._entries
        self._entries[participant_id] = PresenceEntry(
            participant_id=participant_id,
            display_name=display_name,
            last_seen_at_ms=now_ms,
        )
        return is_new

    def remove(self, participant_id: str) -> bool:
        """Remove a participant.

        Returns:
            True if the participant was tracked.
        """
        return self._entries.pop(participant_id, None) is not None

    def evict_stale(self, now_ms: float) -> list[str]:
        """Remove entries last seen more than ``ttl_ms`` ago.

        Returns:
            Ids of the removed participants.
        """
        stale = [
            participant_id
            for participant_id, entry in self._entries.items()
            if now_ms - entry.last_seen_at_ms > self.ttl_ms
        ]
        for participant_id in stale:
            del self._entries[participant_id]

        if stale:
            logger.debug(f"Evicted {len(stale)} stale typing entries, {len(self._entries)} remain")
        return stale

    def clear(self) -> bool:
        """Drop all entries; returns True if any were present."""
        had_entries = bool(self._entries)
        self._entries.clear()
        return had_entries

    def entries(self) -> list[PresenceEntry]:
        return list(self._entries.values())

    def display_names(self) -> list[str]:
        return [entry.display_name for entry in self._entries.values()]

    def __contains__(self, participant_id: object) -> bool:
        return participant_id in self._entries

    def __len__(self) -> int:
        return len(self._entries)
