# engine/state.py
from typing import Any, Dict, List

from ..config import PROFILE_STORAGE_PATH
from ..data_model import Profile, validate_update
from ..logger import get_logger
from .storage import load_profiles, save_profiles

logger = get_logger(__name__)


class ProfileState:
    """Profile documents keyed by profile id, persisted as a single JSON file.

    The in-memory copy only changes after the file was written, so a failed
    save leaves the loaded profiles as they were.
    """

    def __init__(self, storage_path: str = PROFILE_STORAGE_PATH):
        self.storage_path = storage_path
        self.documents: Dict[str, dict] = load_profiles(storage_path)

    def list_ids(self) -> List[str]:
        return sorted(self.documents.keys())

    def get(self, profile_id: str) -> Profile:
        """Normalized profile; unknown ids get a new default profile."""
        return Profile.from_dict(self.documents.get(profile_id))

    def save(self, profile_id: str, profile: Profile) -> Profile:
        self._commit(profile_id, profile.to_dict())
        return profile

    def update(self, profile_id: str, partial: Dict[str, Any]) -> Profile:
        """Merge named fields (e.g. ``{"savings_accounts": [...]}``) into the stored document."""
        try:
            validate_update(partial)
        except ValueError as exc:
            logger.warning("Rejected update for profile %s: %s", profile_id, exc)
            raise
        document = self.get(profile_id).to_dict()
        document.update(partial)
        profile = Profile.from_dict(document)
        self._commit(profile_id, profile.to_dict())
        return profile

    def delete(self, profile_id: str) -> None:
        if profile_id in self.documents:
            documents = {key: doc for key, doc in self.documents.items() if key != profile_id}
            save_profiles(self.storage_path, documents)
            self.documents = documents

    def _commit(self, profile_id: str, document: dict) -> None:
        documents = dict(self.documents)
        documents[profile_id] = document
        save_profiles(self.storage_path, documents)
        self.documents = documents
        logger.info("Saved profile %s", profile_id)
