"""Venue data model."""
from typing import Optional

from src.utils.guard import normalize_or_absent, reject_blank, reject_non_positive

DEFAULT_VENUE_ID = 1
DEFAULT_VENUE_NAME = "Online Event"
DEFAULT_VENUE_ADDRESS = "Virtual"
DEFAULT_VENUE_CAPACITY = 1000


class Venue:
    """
    Location where an event takes place.

    Identity fields are validated once at construction and are read-only.
    Two venues are equal when their venue_id matches, whatever their other
    fields hold.
    """

    def __init__(self, venue_id: int, name: str, address: str, capacity: int):
        self._venue_id = reject_non_positive(venue_id, "venue_id")
        self._name = reject_blank(name, "name")
        self._address = reject_blank(address, "address")
        self._capacity = reject_non_positive(capacity, "capacity")
        self._description: Optional[str] = None
        self._parking_info = ""

    @classmethod
    def default(cls) -> "Venue":
        """Return the shared venue used when an event has none."""
        return _DEFAULT_VENUE

    @property
    def venue_id(self) -> int:
        return self._venue_id

    @property
    def name(self) -> str:
        return self._name

    @property
    def address(self) -> str:
        return self._address

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def description(self) -> Optional[str]:
        return self._description

    def set_description(self, description: Optional[str]) -> None:
        """Store description as-is, or clear it when blank or None."""
        _, self._description = normalize_or_absent(description)

    @property
    def parking_info(self) -> str:
        return self._parking_info

    @parking_info.setter
    def parking_info(self, value: Optional[str]) -> None:
        # Only None is replaced; blank text is kept verbatim
        self._parking_info = value if value is not None else ""

    def __eq__(self, other):
        if not isinstance(other, Venue):
            return NotImplemented
        return self._venue_id == other._venue_id

    def __hash__(self):
        return hash(self._venue_id)

    def __str__(self):
        return f"Venue [Id: {self._venue_id}, Name: {self._name}, Capacity: {self._capacity}]"


_DEFAULT_VENUE = Venue(
    DEFAULT_VENUE_ID,
    DEFAULT_VENUE_NAME,
    DEFAULT_VENUE_ADDRESS,
    DEFAULT_VENUE_CAPACITY
)
