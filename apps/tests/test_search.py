"""
Search Tests

Tests for search criteria validation and predicate composition.
"""

from datetime import timedelta

import pytest

from apps.core.models import Flight
from apps.core.validation import SearchCriteria, build_predicate, validate_search


# =============================================================================
# Criteria
# =============================================================================

class TestSearchCriteria:
    """Tests for SearchCriteria."""

    def test_from_mapping_ignores_unknown_keys(self):
        """Test unknown keys are dropped."""
        criteria = SearchCriteria.from_mapping({'airline': 'Jetstar', 'page': 2})

        assert criteria == SearchCriteria(airline='Jetstar')

    def test_blank_values_are_not_populated(self):
        """Test blank strings do not count as criteria."""
        criteria = SearchCriteria(airline='  ', status='')

        assert criteria.is_empty
        assert criteria.populated() == []


# =============================================================================
# Validation
# =============================================================================

class TestValidateSearch:
    """Tests for validate_search."""

    def test_empty_criteria(self, now):
        """Test at least one criterion is required."""
        result = validate_search(SearchCriteria(), now=now)

        assert result.as_dict() == {
            'search_criteria': ["At least one search criterion must be provided."]
        }

    def test_airline_alone_is_valid(self, now):
        """Test a single airline criterion is enough."""
        assert validate_search(SearchCriteria(airline='Air'), now=now).is_valid

    def test_airline_too_short(self, now):
        """Test airline length bounds."""
        result = validate_search(SearchCriteria(airline='A'), now=now)

        assert result.messages_for('airline') == [
            "Airline name must be between 2 and 100 characters."
        ]

    def test_departure_airport_format(self, now):
        """Test departure airport must be an uppercase code."""
        result = validate_search(SearchCriteria(departure_airport='akl'), now=now)

        assert result.messages_for('departure_airport') == [
            "Departure airport code must be 3-4 uppercase letters (e.g., AKL, NZAA)."
        ]

    def test_arrival_airport_format(self, now):
        """Test arrival airport must be an uppercase code."""
        result = validate_search(SearchCriteria(arrival_airport='CHCHC'), now=now)

        assert result.messages_for('arrival_airport') == [
            "Arrival airport code must be 3-4 uppercase letters (e.g., CHC, NZCH)."
        ]

    def test_unknown_status(self, now):
        """Test status must name a known status."""
        result = validate_search(SearchCriteria(status='Boarding'), now=now)

        assert result.messages_for('status') == [
            "Status must be one of: Scheduled, Delayed, Cancelled, InAir, Landed."
        ]

    def test_status_any_case(self, now):
        """Test status matching ignores case."""
        assert validate_search(SearchCriteria(status='landed'), now=now).is_valid

    def test_from_after_to(self, now):
        """Test the window start must precede its end."""
        criteria = SearchCriteria(
            departure_from_date=now + timedelta(days=5),
            departure_to_date=now + timedelta(days=5),
        )

        result = validate_search(criteria, now=now)

        assert result.messages_for('departure_from_date') == [
            "Departure from date must be before departure to date."
        ]

    def test_range_too_wide(self, now):
        """Test the window may not exceed the configured range."""
        criteria = SearchCriteria(
            departure_from_date=now + timedelta(days=10),
            departure_to_date=now + timedelta(days=400),
        )

        result = validate_search(criteria, now=now)

        assert result.as_dict() == {
            'departure_to_date': ["Date range cannot exceed 365 days."]
        }

    def test_from_too_far_in_past(self, now):
        """Test the window start is bounded in the past."""
        criteria = SearchCriteria(departure_from_date=now - timedelta(days=400))

        result = validate_search(criteria, now=now)

        assert result.messages_for('departure_from_date') == [
            "Departure from date cannot be more than 1 year in the past."
        ]

    def test_to_too_far_in_future(self, now):
        """Test the window end is bounded in the future."""
        criteria = SearchCriteria(departure_to_date=now + timedelta(days=800))

        result = validate_search(criteria, now=now)

        assert result.messages_for('departure_to_date') == [
            "Departure to date cannot be more than 2 years in the future."
        ]

    def test_valid_window(self, now):
        """Test a sane departure window passes."""
        criteria = SearchCriteria(
            departure_from_date=now - timedelta(days=1),
            departure_to_date=now + timedelta(days=30),
        )

        assert validate_search(criteria, now=now).is_valid


# =============================================================================
# Predicate
# =============================================================================

@pytest.mark.django_db
class TestBuildPredicate:
    """Tests for build_predicate against stored flights."""

    @pytest.fixture
    def schedule(self, now):
        """Three flights, two of them leaving AKL."""
        return [
            Flight.objects.create(
                flight_number='NZ123',
                airline='Air New Zealand',
                departure_airport='AKL',
                arrival_airport='CHC',
                departure_time=now + timedelta(days=2),
                arrival_time=now + timedelta(days=2, hours=1),
                status='Scheduled',
            ),
            Flight.objects.create(
                flight_number='JQ456',
                airline='Jetstar',
                departure_airport='WLG',
                arrival_airport='AKL',
                departure_time=now + timedelta(days=1),
                arrival_time=now + timedelta(days=1, hours=1),
                status='Delayed',
            ),
            Flight.objects.create(
                flight_number='NZ8',
                airline='Air New Zealand',
                departure_airport='AKL',
                arrival_airport='WLG',
                departure_time=now + timedelta(hours=3),
                arrival_time=now + timedelta(hours=4),
                status='InAir',
            ),
        ]

    def _search(self, **criteria):
        predicate = build_predicate(SearchCriteria(**criteria))
        return [f.flight_number for f in Flight.objects.matching(predicate)]

    def test_departure_airport_ordered(self, schedule):
        """Test matches come back in departure order."""
        assert self._search(departure_airport='AKL') == ['NZ8', 'NZ123']

    def test_airline_substring_any_case(self, schedule):
        """Test airline matches a case-insensitive substring."""
        assert self._search(airline='jet') == ['JQ456']
        assert self._search(airline='ZEALAND') == ['NZ8', 'NZ123']

    def test_airline_non_ascii_any_case(self, schedule, now):
        """Test case folding covers letters outside ASCII."""
        Flight.objects.create(
            flight_number='WF731',
            airline='Ålesund Ørland Air',
            departure_airport='AES',
            arrival_airport='OSL',
            departure_time=now + timedelta(days=4),
            arrival_time=now + timedelta(days=4, hours=1),
            status='Scheduled',
        )

        assert self._search(airline='ålesund') == ['WF731']
        assert self._search(airline='øRLAND') == ['WF731']

    def test_criteria_are_combined(self, schedule):
        """Test populated criteria are AND-ed."""
        assert self._search(airline='Air New Zealand', arrival_airport='CHC') == ['NZ123']

    def test_status_filter(self, schedule):
        """Test status criterion resolves case-insensitively."""
        assert self._search(status='inair') == ['NZ8']

    def test_unparseable_status_adds_no_clause(self, schedule):
        """Test an unknown status leaves the other criteria in charge."""
        assert self._search(airline='Jetstar', status='Boarding') == ['JQ456']

    def test_window_bounds_inclusive(self, schedule, now):
        """Test the departure window includes both ends."""
        jetstar = schedule[1]

        assert self._search(
            departure_from_date=jetstar.departure_time,
            departure_to_date=jetstar.departure_time,
        ) == ['JQ456']

    def test_window_excludes_outside(self, schedule, now):
        """Test flights outside the window are skipped."""
        assert self._search(
            departure_from_date=now + timedelta(hours=12),
            departure_to_date=now + timedelta(days=3),
        ) == ['JQ456', 'NZ123']

    def test_no_match(self, schedule):
        """Test a search with no hits returns nothing."""
        assert self._search(departure_airport='ZQN') == []
