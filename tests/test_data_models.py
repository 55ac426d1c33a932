from datetime import time

import pytest
from pydantic import ValidationError

from betterrest.core.models.data_models import BedtimeRequest, BedtimeResult, WakeTime


class TestWakeTime:

    def test_from_string(self):
        wake = WakeTime.from_string("07:05")
        assert (wake.hour, wake.minute) == (7, 5)
        assert str(wake) == "07:05"
        assert wake.to_time() == time(7, 5)

    def test_to_seconds(self):
        assert WakeTime(hour=7, minute=0).to_seconds() == 25200
        assert WakeTime(hour=23, minute=59).to_seconds() == 86340

    @pytest.mark.parametrize("value", ["7", "07:00:00", "ab:cd", "24:00", "07:60", "7:05", " 7:5 ", " 07:00", "07:5"])
    def test_invalid_strings(self, value):
        with pytest.raises(ValueError):
            WakeTime.from_string(value)

    def test_coerce(self):
        assert WakeTime.coerce(time(6, 30)) == WakeTime(hour=6, minute=30)
        assert WakeTime.coerce({'hour': 6, 'minute': 30}) == WakeTime(hour=6, minute=30)
        with pytest.raises(TypeError):
            WakeTime.coerce(6.5)

    def test_immutable(self):
        wake = WakeTime(hour=7, minute=0)
        with pytest.raises(ValidationError):
            wake.hour = 8


class TestBedtimeRequest:

    def test_parses_wake_time_string(self):
        request = BedtimeRequest(wake_time="06:45", sleep_amount=7.75, coffee_amount=3)
        assert request.wake_time == WakeTime(hour=6, minute=45)

    @pytest.mark.parametrize("sleep_amount", [3.75, 12.25, 8.3])
    def test_rejects_bad_sleep_amount(self, sleep_amount):
        with pytest.raises(ValidationError):
            BedtimeRequest(wake_time="07:00", sleep_amount=sleep_amount, coffee_amount=1)

    @pytest.mark.parametrize("coffee_amount", [0, 21])
    def test_rejects_bad_coffee_amount(self, coffee_amount):
        with pytest.raises(ValidationError):
            BedtimeRequest(wake_time="07:00", sleep_amount=8.0, coffee_amount=coffee_amount)

    def test_rejects_bad_wake_time(self):
        with pytest.raises(ValidationError):
            BedtimeRequest(wake_time="7 am", sleep_amount=8.0, coffee_amount=1)

    @pytest.mark.parametrize("coffee_amount", [True, "2", 2.0])
    def test_coffee_amount_must_be_an_integer(self, coffee_amount):
        with pytest.raises(ValidationError):
            BedtimeRequest(wake_time="07:00", sleep_amount=8.0, coffee_amount=coffee_amount)


class TestBedtimeResult:

    def test_success(self):
        result = BedtimeResult(bedtime="11:48 PM", predicted_sleep_hours=7.2)
        assert result.success
        assert result.display_text == "11:48 PM"
        assert result.model_dump()['success'] is True

    def test_failure(self):
        result = BedtimeResult(error="Error calculating bedtime")
        assert not result.success
        assert result.display_text == "Error calculating bedtime"
        assert result.model_dump()['success'] is False
