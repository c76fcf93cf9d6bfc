from datetime import date

import pytest

from src.platform.exception.exceptions import InvalidFilterError
from src.service.shared_kernel.domain.validators import FilterValidators


class TestEventCode:
    def test_code_is_stripped(self):
        assert FilterValidators.validate_event_code(' E1 ') == 'E1'

    @pytest.mark.parametrize('value', ['', '   ', None, 7])
    def test_blank_or_non_string_is_rejected(self, value):
        with pytest.raises(InvalidFilterError):
            FilterValidators.validate_event_code(value)


class TestPositiveInt:
    def test_positive_value_passes(self):
        assert FilterValidators.validate_positive_int(12, 'min_quantity') == 12

    @pytest.mark.parametrize('value', [0, -3, True, '5', 1.0])
    def test_rejected_values(self, value):
        with pytest.raises(InvalidFilterError, match='min_quantity'):
            FilterValidators.validate_positive_int(value, 'min_quantity')


class TestCalendarDate:
    def test_valid_date(self):
        assert FilterValidators.validate_calendar_date(2025, 2, 19) == date(2025, 2, 19)

    def test_month_out_of_range(self):
        with pytest.raises(InvalidFilterError, match='month'):
            FilterValidators.validate_calendar_date(2025, 13, 1)

    def test_day_out_of_range(self):
        with pytest.raises(InvalidFilterError, match='Invalid date 2025-2-30'):
            FilterValidators.validate_calendar_date(2025, 2, 30)

    def test_non_integer_part(self):
        with pytest.raises(InvalidFilterError, match='day'):
            FilterValidators.validate_calendar_date(2025, 2, '19')


class TestFlag:
    def test_only_booleans_pass(self):
        assert FilterValidators.validate_flag(False, 'friend_member') is False
        with pytest.raises(InvalidFilterError):
            FilterValidators.validate_flag(1, 'friend_member')
