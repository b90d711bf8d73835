"""Tests for Venue model."""
import pytest
from src.models.venue import Venue
from src.utils.exceptions import InvalidArgumentError, NullArgumentError, OutOfRangeError


@pytest.fixture
def venue():
    """Create a sample venue for testing."""
    return Venue(1, "Convention Center", "123 Main St", 500)


class TestVenueValidation:
    """Tests for venue construction."""

    def test_create_valid_venue(self, venue):
        assert venue.venue_id == 1
        assert venue.name == "Convention Center"
        assert venue.address == "123 Main St"
        assert venue.capacity == 500

    @pytest.mark.parametrize("venue_id", [0, -1])
    def test_invalid_id_raises_error(self, venue_id):
        with pytest.raises(OutOfRangeError):
            Venue(venue_id, "Convention Center", "123 Main St", 500)

    @pytest.mark.parametrize("capacity", [0, -100])
    def test_invalid_capacity_raises_error(self, capacity):
        with pytest.raises(OutOfRangeError):
            Venue(1, "Convention Center", "123 Main St", capacity)

    def test_none_name_raises_error(self):
        with pytest.raises(NullArgumentError):
            Venue(1, None, "123 Main St", 500)

    @pytest.mark.parametrize("name", ["", "   "])
    def test_blank_name_raises_error(self, name):
        with pytest.raises(InvalidArgumentError, match="Name cannot be empty or whitespace"):
            Venue(1, name, "123 Main St", 500)

    def test_none_address_raises_error(self):
        with pytest.raises(NullArgumentError):
            Venue(1, "Convention Center", None, 500)

    @pytest.mark.parametrize("address", ["", "   "])
    def test_blank_address_raises_error(self, address):
        with pytest.raises(InvalidArgumentError, match="Address cannot be empty or whitespace"):
            Venue(1, "Convention Center", address, 500)

    def test_name_and_address_are_trimmed(self):
        venue = Venue(1, "  Convention Center  ", "  123 Main St ", 500)
        assert venue.name == "Convention Center"
        assert venue.address == "123 Main St"

    def test_identity_fields_are_read_only(self, venue):
        with pytest.raises(AttributeError):
            venue.name = "Other"


class TestVenueOptionalFields:
    """Tests for description and parking info."""

    def test_description_defaults_to_none(self, venue):
        assert venue.description is None

    def test_set_description(self, venue):
        venue.set_description("Modern venue with state-of-the-art facilities")
        assert venue.description == "Modern venue with state-of-the-art facilities"

    def test_description_is_not_trimmed(self, venue):
        venue.set_description("   Description with spaces   ")
        assert venue.description == "   Description with spaces   "

    @pytest.mark.parametrize("description", [None, "", "   "])
    def test_blank_description_clears_it(self, venue, description):
        venue.set_description("Something")
        venue.set_description(description)
        assert venue.description is None

    def test_parking_info_defaults_to_empty(self, venue):
        assert venue.parking_info == ""

    def test_parking_info_none_reads_empty(self, venue):
        venue.parking_info = None
        assert venue.parking_info == ""

    def test_parking_info_keeps_text_verbatim(self, venue):
        venue.parking_info = "  Underground parking  "
        assert venue.parking_info == "  Underground parking  "

    def test_parking_info_keeps_blank_text(self, venue):
        """Documented quirk: blank text is not collapsed, unlike Speaker.company."""
        venue.parking_info = "   "
        assert venue.parking_info == "   "


class TestDefaultVenue:
    """Tests for the shared default venue."""

    def test_default_fields(self):
        default = Venue.default()
        assert default.venue_id == 1
        assert default.name == "Online Event"
        assert default.address == "Virtual"
        assert default.capacity == 1000

    def test_default_is_same_instance(self):
        assert Venue.default() is Venue.default()


class TestVenueEquality:
    """Tests for identity-based equality."""

    def test_same_id_is_equal(self):
        venue1 = Venue(1, "Venue A", "Address A", 100)
        venue2 = Venue(1, "Venue B", "Address B", 200)
        assert venue1 == venue2
        assert hash(venue1) == hash(venue2)

    def test_different_id_is_not_equal(self):
        assert Venue(1, "Venue A", "Address A", 100) != Venue(2, "Venue A", "Address A", 100)

    def test_not_equal_to_other_types(self, venue):
        assert venue != 1
        assert venue != "Convention Center"

    def test_usable_in_set(self):
        venues = {Venue(1, "A", "X", 10), Venue(1, "B", "Y", 20), Venue(2, "C", "Z", 30)}
        assert len(venues) == 2


class TestVenueFormatting:
    """Tests for string representation."""

    def test_str(self, venue):
        assert str(venue) == "Venue [Id: 1, Name: Convention Center, Capacity: 500]"
