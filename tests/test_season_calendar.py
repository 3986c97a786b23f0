"""Tests for season calendar lookups."""

from datetime import date

from labeling.season_calendar import (
    SeasonCalendar,
    competition_week,
    date_range_label,
    iso_week_of_year,
    month_name,
)


class TestIsoWeekOfYear:
    def test_mid_year(self):
        assert iso_week_of_year(date(2016, 3, 2)) == 9

    def test_missing_date(self):
        assert iso_week_of_year(None) == -1


class TestCompetitionWeek:
    def test_first_week(self):
        # Thursday Mar 3 2016 -> Wednesday Mar 2, ISO week 9
        assert competition_week(date(2016, 3, 3)) == 1

    def test_championship_week(self):
        assert competition_week(date(2016, 4, 27)) == 9

    def test_floored_at_zero(self):
        assert competition_week(date(2016, 1, 12)) == 0

    def test_monday_counts_as_previous_week(self):
        # Mon Mar 7 shifts back to Sun Mar 6, still ISO week 9
        assert competition_week(date(2016, 3, 7)) == 1
        assert competition_week(date(2016, 3, 8)) == 2

    def test_missing_date(self):
        assert competition_week(None) == -1

    def test_custom_calendar(self):
        calendar = SeasonCalendar(first_competition_weeks={2016: 5})
        assert competition_week(date(2016, 3, 3), calendar) == 4

    def test_new_years_day_uses_year_of_previous_day(self):
        # Jan 1 2016 shifts back to Dec 31 2015 (ISO week 53), offset from the 2015 table
        calendar = SeasonCalendar(first_competition_weeks={2015: 40, 2016: 45})
        assert competition_week(date(2016, 1, 1), calendar) == 13


class TestSeasonCalendar:
    def test_known_year(self):
        calendar = SeasonCalendar()
        assert calendar.championship_week(2016) == 9

    def test_unknown_year_uses_default(self):
        calendar = SeasonCalendar(championship_weeks={}, default_championship_week=7)
        assert calendar.championship_week(2099) == 7

    def test_instances_do_not_share_tables(self):
        a = SeasonCalendar()
        b = SeasonCalendar()
        a.championship_weeks[2016] = 1
        assert b.championship_week(2016) == 9


class TestMonthName:
    def test_month(self):
        assert month_name(date(2016, 9, 10)) == "September"

    def test_missing_date(self):
        assert month_name(None) == ""


class TestDateRangeLabel:
    def test_single_day(self):
        assert date_range_label(date(2016, 3, 3), date(2016, 3, 3)) == "Mar 3, 2016"

    def test_range(self):
        assert date_range_label(date(2016, 3, 3), date(2016, 3, 5)) == "Mar 3 to Mar 5, 2016"

    def test_missing_either_date(self):
        assert date_range_label(None, date(2016, 3, 5)) == ""
        assert date_range_label(date(2016, 3, 3), None) == ""
