"""Event data model."""
import logging
import threading
from datetime import datetime, timedelta
from typing import List, Optional, Tuple

from src.models.speaker import Speaker
from src.models.venue import Venue
from src.utils.exceptions import DuplicateEntryError, InvalidArgumentError
from src.utils.guard import (
    normalize_or_absent,
    reject_blank,
    reject_non_positive,
    reject_null,
    reject_past_or_present,
)

logger = logging.getLogger(__name__)

MIN_EVENT_DURATION = timedelta(minutes=30)
DATE_DISPLAY_FORMAT = "%d/%m/%Y"


class Event:
    """
    Scheduled event with a venue, a main speaker and additional speakers.

    Field policies:
        - event_code: None is rejected; stored trimmed, "" until set
        - description: blank or None is stored as None
        - requirements, notes: None reads back as "", other text verbatim
        - venue: resolved to Venue.default() on first read, then cached
    """

    def __init__(
        self,
        event_id: int,
        title: str,
        event_date: datetime,
        duration: timedelta,
        now: Optional[datetime] = None
    ):
        """
        Create an event, validating every required field.

        Args:
            event_id: Positive identifier
            title: Non-blank title (trimmed)
            event_date: Start datetime, strictly after now
            duration: At least MIN_EVENT_DURATION
            now: Reference time for the future-date check (defaults to current time)

        Raises:
            OutOfRangeError: If event_id <= 0
            NullArgumentError: If title, event_date or duration is None
            InvalidArgumentError: If title is blank, event_date is not in the
                future or duration is too short
        """
        self._event_id = reject_non_positive(event_id, "event_id")
        self._title = reject_blank(title, "title")
        self._event_date = reject_past_or_present(event_date, "event_date", now)

        reject_null(duration, "duration")
        if duration < MIN_EVENT_DURATION:
            raise InvalidArgumentError("Duration must be at least 30 minutes.", "duration")
        self._duration = duration

        self._event_code = ""
        self._description: Optional[str] = None
        self._requirements = ""
        self._notes = ""
        self._main_speaker: Optional[Speaker] = None
        self._additional_speakers: List[Speaker] = []

        self._venue: Optional[Venue] = None
        self._venue_lock = threading.Lock()

    @property
    def event_id(self) -> int:
        return self._event_id

    @property
    def title(self) -> str:
        return self._title

    @property
    def event_date(self) -> datetime:
        return self._event_date

    @property
    def duration(self) -> timedelta:
        return self._duration

    @property
    def end_date(self) -> datetime:
        """Datetime at which the event finishes (exclusive)."""
        return self._event_date + self._duration

    @property
    def event_code(self) -> str:
        return self._event_code

    @event_code.setter
    def event_code(self, code: str) -> None:
        self.set_event_code(code)

    def set_event_code(self, code: str) -> None:
        """
        Set the event code.

        Raises:
            NullArgumentError: If code is None
        """
        reject_null(code, "code")
        self._event_code = code.strip()

    @property
    def description(self) -> Optional[str]:
        return self._description

    def set_description(self, description: Optional[str]) -> None:
        """Store description as-is, or clear it when blank or None."""
        _, self._description = normalize_or_absent(description)

    @property
    def requirements(self) -> str:
        return self._requirements

    @requirements.setter
    def requirements(self, value: Optional[str]) -> None:
        self._requirements = value if value is not None else ""

    @property
    def notes(self) -> str:
        return self._notes

    @notes.setter
    def notes(self, value: Optional[str]) -> None:
        self._notes = value if value is not None else ""

    @property
    def venue(self) -> Venue:
        """Venue of the event, defaulting to Venue.default() on first read."""
        if self._venue is None:
            with self._venue_lock:
                if self._venue is None:
                    self._venue = Venue.default()
                    logger.debug("Event %s resolved default venue %s", self._event_id, self._venue)
        return self._venue

    def _assign_venue(self, venue: Venue) -> None:
        """
        Set the venue explicitly; not part of the public contract.

        Raises:
            NullArgumentError: If venue is None
            InvalidArgumentError: If the venue was already read or assigned
        """
        reject_null(venue, "venue")
        with self._venue_lock:
            if self._venue is not None:
                raise InvalidArgumentError("Venue is already set for this event.", "venue")
            self._venue = venue

    @property
    def main_speaker(self) -> Optional[Speaker]:
        return self._main_speaker

    def assign_main_speaker(self, speaker: Speaker) -> None:
        """Replace the main speaker."""
        self._main_speaker = reject_null(speaker, "speaker")

    @property
    def additional_speakers(self) -> Tuple[Speaker, ...]:
        """Additional speakers in insertion order (read-only)."""
        return tuple(self._additional_speakers)

    def add_speaker(self, speaker: Speaker) -> None:
        """
        Append a speaker to the additional speakers.

        Raises:
            NullArgumentError: If speaker is None
            DuplicateEntryError: If an equal speaker is already present
        """
        reject_null(speaker, "speaker")
        if speaker in self._additional_speakers:
            raise DuplicateEntryError("Speaker already added to this event.")
        self._additional_speakers.append(speaker)

    def remove_speaker(self, speaker: Speaker) -> bool:
        """
        Remove a speaker from the additional speakers.

        Returns:
            True if the speaker was present and removed, False otherwise
        """
        reject_null(speaker, "speaker")
        if speaker not in self._additional_speakers:
            return False
        self._additional_speakers.remove(speaker)
        return True

    def has_schedule_conflict_with(self, other_event: "Event") -> bool:
        """
        Check whether two events overlap at the same venue.

        Both venues are resolved (and cached) as part of the check. Events
        that merely touch, one ending exactly when the other starts, do not
        conflict.
        """
        reject_null(other_event, "other_event")
        return (
            self.venue == other_event.venue
            and self._event_date < other_event.end_date
            and other_event.event_date < self.end_date
        )

    def __str__(self):
        return (
            f"Event [Id: {self._event_id}, Title: {self._title}, "
            f"Date: {self._event_date.strftime(DATE_DISPLAY_FORMAT)}, Code: {self._event_code}]"
        )
