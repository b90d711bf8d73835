"""Speaker data model."""
from typing import Optional

from src.utils.exceptions import InvalidArgumentError
from src.utils.guard import (
    is_valid_email,
    normalize_or_absent,
    reject_blank,
    reject_non_positive,
    reject_null,
)


class Speaker:
    """Presenter who can lead or join an event."""

    def __init__(self, speaker_id: int, full_name: str, email: str):
        self._speaker_id = reject_non_positive(speaker_id, "speaker_id")
        self._full_name = reject_blank(full_name, "full_name")

        reject_null(email, "email")
        if not is_valid_email(email):
            raise InvalidArgumentError("Email must contain '@' character.", "email")
        self._email = email.strip()

        self._biography: Optional[str] = None
        self._company = ""
        self._linkedin_profile = ""

    @property
    def speaker_id(self) -> int:
        return self._speaker_id

    @property
    def full_name(self) -> str:
        return self._full_name

    @property
    def email(self) -> str:
        return self._email

    @property
    def biography(self) -> Optional[str]:
        return self._biography

    def set_biography(self, biography: Optional[str]) -> None:
        """Store biography as-is, or clear it when blank or None."""
        _, self._biography = normalize_or_absent(biography)

    @property
    def company(self) -> str:
        return self._company

    @company.setter
    def company(self, value: Optional[str]) -> None:
        # Blank collapses to "", unlike Venue.parking_info
        present, text = normalize_or_absent(value)
        self._company = text if present else ""

    @property
    def linkedin_profile(self) -> str:
        return self._linkedin_profile

    @linkedin_profile.setter
    def linkedin_profile(self, value: Optional[str]) -> None:
        present, text = normalize_or_absent(value)
        self._linkedin_profile = text if present else ""

    def __eq__(self, other):
        if not isinstance(other, Speaker):
            return NotImplemented
        return self._speaker_id == other._speaker_id

    def __hash__(self):
        return hash(self._speaker_id)

    def __str__(self):
        return f"Speaker [Id: {self._speaker_id}, Name: {self._full_name}, Email: {self._email}]"
