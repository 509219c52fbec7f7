"""띠 계산 테스트"""

import pytest

from dream_lotto import BirthProfile, ZODIAC_ANIMALS, decompose_year, zodiac_index, zodiac_name


class TestZodiacIndex:
    @pytest.mark.parametrize("year, expected", [
        (1984, 1),   # 쥐
        (1990, 7),   # 말
        (1900, 1),
        (2024, 5),   # 용
        (2031, 12),  # 돼지
    ])
    def test_known_years(self, year, expected):
        assert zodiac_index(year) == expected

    def test_cycle_of_twelve(self):
        for year in range(1900, 2101):
            assert zodiac_index(year) == zodiac_index(year + 12)

    def test_always_in_range(self):
        for year in range(1900, 2101):
            assert 1 <= zodiac_index(year) <= 12

    def test_negative_years_use_floored_modulo(self):
        assert zodiac_index(-8) == 1
        assert zodiac_index(-7) == 2


class TestZodiacName:
    def test_names(self):
        assert zodiac_name(1) == '쥐'
        assert zodiac_name(7) == '말'
        assert zodiac_name(12) == '돼지'

    def test_wraps_around(self):
        assert zodiac_name(13) == '쥐'

    def test_twelve_animals(self):
        assert len(ZODIAC_ANIMALS) == 12


class TestDecomposeYear:
    @pytest.mark.parametrize("year, digit_sum, last_two", [
        (1990, 19, 90),
        (1900, 10, 0),
        (2005, 7, 5),
    ])
    def test_decompose(self, year, digit_sum, last_two):
        assert decompose_year(year) == (digit_sum, last_two)


class TestBirthProfile:
    def test_derived_attributes(self):
        profile = BirthProfile(year=1990)
        assert profile.zodiac_index == 7
        assert profile.digit_sum == 19
        assert profile.last_two_digits == 90

    def test_rejects_year_before_1900(self):
        with pytest.raises(ValueError):
            BirthProfile(year=1899)
