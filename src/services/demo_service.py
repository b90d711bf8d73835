"""Demonstration report exercising the Speaker, Venue and Event models."""
import logging
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Callable, List, Optional

from src.models.event import Event
from src.models.speaker import Speaker
from src.models.venue import Venue
from src.utils.exceptions import ValidationError

logger = logging.getLogger(__name__)


@dataclass
class DemoLine:
    """One printed result: a success or an expected failure."""

    ok: bool
    text: str


@dataclass
class DemoSection:
    """Titled group of demonstration lines."""

    title: str
    lines: List[DemoLine] = field(default_factory=list)

    def success(self, text: str) -> None:
        self.lines.append(DemoLine(ok=True, text=text))

    def failure(self, text: str) -> None:
        self.lines.append(DemoLine(ok=False, text=text))

    def expect_failure(self, label: str, action: Callable[[], object]) -> None:
        """Run action and record the validation error it raises."""
        try:
            action()
        except ValidationError as e:
            logger.info("Expected validation failure (%s): %s", label, e)
            self.failure(f"{label}: {e}")
        else:
            self.success(f"{label}: accepted")


def _now(now: Optional[datetime]) -> datetime:
    return now if now is not None else datetime.now()


def build_speaker_section() -> DemoSection:
    """Speakers: valid construction, rejected input and optional fields."""
    section = DemoSection("Speakers")

    speaker1 = Speaker(1, "João Silva", "joao.silva@email.com")
    speaker1.set_biography("C# specialist with 10 years of experience")
    speaker1.company = "Microsoft"
    speaker1.linkedin_profile = "https://linkedin.com/in/joaosilva"
    section.success(str(speaker1))

    speaker2 = Speaker(2, "Maria Santos", "maria.santos@tech.com")
    speaker2.set_biography("Software architect and DevOps consultant")
    section.success(str(speaker2))

    section.expect_failure("Speaker id 0", lambda: Speaker(0, "Valid Name", "email@valid.com"))
    section.expect_failure("Blank name", lambda: Speaker(3, "   ", "email@valid.com"))
    section.expect_failure("Invalid email", lambda: Speaker(4, "Valid Name", "invalid-email"))

    speaker3 = Speaker(5, "Carlos Oliveira", "carlos@email.com")
    speaker3.set_biography("   Biography with spaces   ")
    section.success(f"Biography with spaces: '{speaker3.biography}'")
    speaker3.set_biography(None)
    section.success(f"Biography with None: '{speaker3.biography}'")
    speaker3.set_biography("")
    section.success(f"Empty biography: '{speaker3.biography}'")

    speaker4 = Speaker(6, "Ana Costa", "ana@email.com")
    speaker4.company = None
    speaker4.linkedin_profile = None
    section.success(f"Company with None: '{speaker4.company}'")
    section.success(f"LinkedIn profile with None: '{speaker4.linkedin_profile}'")

    return section


def build_venue_section() -> DemoSection:
    """Venues: valid construction, the shared default and optional fields."""
    section = DemoSection("Venues")

    venue1 = Venue(1, "Convention Center", "Main Avenue, 1000", 500)
    venue1.set_description("Modern center with full infrastructure")
    venue1.parking_info = "Underground parking with 200 spots"
    section.success(str(venue1))
    section.success(f"Description: {venue1.description}")
    section.success(f"Parking: {venue1.parking_info}")

    venue2 = Venue(2, "Premium Hotel", "Second Street, 500", 200)
    section.success(str(venue2))

    section.success(f"Default venue: {Venue.default()}")

    venue3 = Venue(3, "Central Auditorium", "Central Square, 50", 150)
    venue3.set_description("   Description with spaces   ")
    section.success(f"Description with spaces: '{venue3.description}'")
    venue3.set_description(None)
    section.success(f"Description with None: '{venue3.description}'")

    venue4 = Venue(4, "Meeting Room", "Flower Lane, 200", 50)
    venue4.parking_info = None
    section.success(f"Parking info with None: '{venue4.parking_info}'")

    section.expect_failure("Capacity 0", lambda: Venue(5, "Tiny Room", "Nowhere", 0))

    return section


def build_event_section(now: Optional[datetime] = None) -> DemoSection:
    """Events: construction, lazy venue, event code and allow-null fields."""
    section = DemoSection("Events")
    now = _now(now)
    future_date = now + timedelta(days=60)

    event1 = Event(1, ".NET Conference 2025", future_date, timedelta(hours=8), now=now)
    event1.set_event_code("DOTNET2025")
    event1.set_description("Largest .NET technology conference in Latin America")
    section.success(str(event1))
    section.success(f"Code: {event1.event_code}")
    section.success(f"Description: {event1.description}")

    event2 = Event(2, "DevOps Workshop", future_date + timedelta(days=7), timedelta(hours=4), now=now)
    section.success(str(event2))

    future_date2 = now + timedelta(days=30)
    event3 = Event(3, "Cloud Computing Meetup", future_date2, timedelta(hours=3), now=now)
    section.success(f"Venue loaded on demand: {event3.venue}")

    event4 = Event(4, "AI Seminar", future_date2 + timedelta(days=14), timedelta(hours=6), now=now)
    event4.set_event_code("AI2025")
    section.success(f"Event code set: {event4.event_code}")
    section.expect_failure("Event code with None", lambda: event4.set_event_code(None))

    event5 = Event(5, "Hackathon", future_date2 + timedelta(days=30), timedelta(hours=24), now=now)
    event5.requirements = None
    event5.notes = "   Notes with spaces   "
    section.success(f"Requirements with None: '{event5.requirements}'")
    section.success(f"Notes with spaces: '{event5.notes}'")

    section.expect_failure(
        "Past date",
        lambda: Event(6, "Yesterday", now - timedelta(days=1), timedelta(hours=1), now=now)
    )
    section.expect_failure(
        "Short duration",
        lambda: Event(7, "Lightning Talk", future_date, timedelta(minutes=29), now=now)
    )

    return section


def build_scenario_section(now: Optional[datetime] = None) -> DemoSection:
    """Complete scenario: an event with speakers, notes and a conflict check."""
    section = DemoSection("Complete scenario")
    now = _now(now)

    speaker = Speaker(10, "Dr. Sofia Fernandes", "sofia.fernandes@tech.com")
    speaker.set_biography("PhD in Computer Science with 15 years of experience")
    speaker.company = "Tech Research Institute"

    venue = Venue(10, "Innovation Center", "Technology Street, 500", 300)
    venue.set_description("Modern space for technology events")

    event = Event(10, "Innovation Conference 2025", now + timedelta(days=90), timedelta(hours=6), now=now)
    event.set_event_code("INNOV2025")
    event.set_description("Annual event about the latest technology trends")
    event.assign_main_speaker(speaker)
    event.requirements = "Basic programming knowledge"
    event.notes = "Bring a laptop for the workshops"

    guest = Speaker(11, "Pedro Lima", "pedro.lima@tech.com")
    event.add_speaker(guest)
    section.expect_failure("Same guest twice", lambda: event.add_speaker(guest))

    main_speaker = event.main_speaker.full_name if event.main_speaker else "To be defined"
    section.success(str(event))
    section.success(f"Venue: {event.venue}")
    section.success(f"Candidate venue: {venue} ({venue.description})")
    section.success(f"Main speaker: {main_speaker}")
    section.success(
        "Additional speakers: " + ", ".join(s.full_name for s in event.additional_speakers)
    )
    section.success(f"Requirements: {event.requirements}")
    section.success(f"Notes: {event.notes}")

    overlapping = Event(
        11,
        "Overlapping Workshop",
        event.event_date + timedelta(hours=1),
        timedelta(hours=2),
        now=now
    )
    section.success(f"Conflicts with '{overlapping.title}': {event.has_schedule_conflict_with(overlapping)}")

    return section


def build_demo_report(now: Optional[datetime] = None) -> List[DemoSection]:
    """
    Build every demonstration section.

    Args:
        now: Reference time used for event dates (defaults to current time)

    Returns:
        List of DemoSection in display order
    """
    now = _now(now)
    return [
        build_speaker_section(),
        build_venue_section(),
        build_event_section(now),
        build_scenario_section(now),
    ]
