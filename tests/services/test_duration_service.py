"""Tests for DurationService."""

from imperium_calendar.config.settings import ImperiumSettings
from imperium_calendar.domain.dates import ImperialDate
from imperium_calendar.services.duration import DurationService


class TestToDuration:
    def test_duration_of_code(self, settings: ImperiumSettings) -> None:
        result = DurationService(settings).to_duration("3.996.636.M41")
        assert result.ok
        assert result.op == "to_duration"
        assert result.data["duration"] == ImperialDate.from_code("3.996.636.M41").duration

    def test_start_of_calendar(self, settings: ImperiumSettings) -> None:
        assert DurationService(settings).to_duration("001.M1").data["duration"] == 0

    def test_invalid_code(self, settings: ImperiumSettings) -> None:
        result = DurationService(settings).to_duration("M4x")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "INVALID_CODE"
        assert result.error.detail["element"] == "millennium"


class TestFromDuration:
    def test_round_trip_millennium(self, settings: ImperiumSettings) -> None:
        service = DurationService(settings)
        seconds = service.to_duration("3.996.636.M41").data["duration"]
        result = service.from_duration(seconds)
        assert result.ok
        assert result.data["millennium"] == 41
        assert result.data["year"] == 636
        assert result.data["seconds"] == seconds
        assert result.data["check_number"] is None

    def test_zero(self, settings: ImperiumSettings) -> None:
        result = DurationService(settings).from_duration(0)
        assert result.data["code"] == "001.001.M1"
        assert result.warnings == []

    def test_huge_duration(self, settings: ImperiumSettings) -> None:
        result = DurationService(settings).from_duration(10**400)
        assert result.ok
        assert result.data["seconds"] == 10**400
        assert result.data["year"] is not None

    def test_duration_too_long_to_encode(self, settings: ImperiumSettings) -> None:
        result = DurationService(settings).from_duration(10**5000)
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "OUT_OF_RANGE"

    def test_negative_warns_and_clamps(self, settings: ImperiumSettings) -> None:
        result = DurationService(settings).from_duration(-100)
        assert result.ok
        assert result.data["millennium"] == 1
        assert len(result.warnings) == 1
        assert "before the start" in result.warnings[0]

    def test_negative_strict(self, strict_settings: ImperiumSettings) -> None:
        result = DurationService(strict_settings).from_duration(-100)
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "WARNINGS_AS_ERRORS"
