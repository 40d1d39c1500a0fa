"""Profile settings service."""

import logging
from dataclasses import dataclass

from pydantic import TypeAdapter

from vitality_tracker.domain.profile import DEFAULT_PROFILE, ProfileSettings
from vitality_tracker.services.storage import (
    SETTINGS_KEY,
    KeyValueStore,
    decode_blob,
    encode_blob,
)

_PROFILE_ADAPTER = TypeAdapter(ProfileSettings)

_logger = logging.getLogger(__name__)


@dataclass
class ProfileService:
    """Holds the singleton profile and writes it through on change."""

    store: KeyValueStore
    profile: ProfileSettings = DEFAULT_PROFILE

    @classmethod
    def load(cls, store: KeyValueStore) -> "ProfileService":
        """Load the stored profile, falling back to the default."""
        stored = decode_blob(store.load(SETTINGS_KEY), _PROFILE_ADAPTER, SETTINGS_KEY)
        return cls(store=store, profile=stored or DEFAULT_PROFILE)

    def update(self, profile: ProfileSettings) -> ProfileSettings:
        """Replace the profile and persist it."""
        self.profile = profile
        self.store.save(SETTINGS_KEY, encode_blob(profile, _PROFILE_ADAPTER))
        _logger.info("Profile updated: %s -> %s", profile.start_date, profile.end_date)
        return profile

    def reset(self) -> ProfileSettings:
        """Drop the stored profile and restore defaults."""
        self.store.delete(SETTINGS_KEY)
        self.profile = DEFAULT_PROFILE
        return self.profile
