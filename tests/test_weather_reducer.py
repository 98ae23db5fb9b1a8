import pytest

from app.domains.weather.reducer import hourly_keys, reduce_current, reduce_daily, reduce_hourly
from app.domains.weather.schemas import DailySlot
from app.domains.weather.utils import get_weekday, precip_label, round_string_to_int, sky_label
from app.utils.time_utils import format_update_time, get_base_times

from fakes import kst


def fcst(category, time, value, date="20261016"):
    return {"category": category, "fcstDate": date, "fcstTime": time, "fcstValue": value}


def daily(category, date, value):
    return {"category": category, "fcstDate": date, "fcstTime": "0600", "fcstValue": value}


class TestReduceCurrent:
    def test_maps_categories(self):
        items = [
            {"category": "T1H", "obsrValue": "18.3"},
            {"category": "REH", "obsrValue": "62"},
            {"category": "PTY", "obsrValue": "1"},
            {"category": "WSD", "obsrValue": "2.1"},
        ]
        current = reduce_current(items)
        assert current.temp == "18.3"
        assert current.humidity == "62"
        assert current.precip_type == "rainy"

    def test_unknown_precip_code_is_dash(self):
        current = reduce_current([{"category": "PTY", "obsrValue": "9"}])
        assert current.precip_type == "-"

    def test_empty_response(self):
        current = reduce_current([])
        assert current.temp is None
        assert current.temp_display == "--"


class TestReduceHourly:
    def test_window_wraps_past_midnight(self):
        assert hourly_keys(23) == ["2300", "0000", "0100", "0200", "0300", "0400"]

    def test_missing_keys_dropped_order_preserved(self):
        items = [
            fcst("T1H", "0200", "3", date="20261017"),
            fcst("T1H", "2300", "5"),
            fcst("SKY", "0000", "4", date="20261017"),
            fcst("T1H", "0000", "4", date="20261017"),
            fcst("T1H", "1400", "15"),
        ]
        slots = reduce_hourly(items, window_start=23)
        assert [s.time for s in slots] == ["2300", "0000", "0200"]
        assert slots[1].sky == "cloudy"
        assert slots[0].sky is None

    def test_unknown_categories_ignored(self):
        items = [
            fcst("RN1", "1500", "강수없음"),
            fcst("LGT", "1600", "0"),
            fcst("T1H", "1600", "21.5"),
        ]
        slots = reduce_hourly(items, window_start=15)
        # 1500은 모르는 카테고리뿐이라 칸 자체가 없음
        assert [s.time for s in slots] == ["1600"]
        assert slots[0].temp_display == "22"

    def test_unmapped_sky_code_is_none(self):
        slots = reduce_hourly([fcst("SKY", "1500", "2")], window_start=15)
        assert slots[0].sky is None

    def test_window_size(self):
        items = [fcst("T1H", f"{h:02d}00", "10") for h in range(24)]
        assert len(reduce_hourly(items, window_start=10)) == 6
        assert len(reduce_hourly(items, window_start=10, window_size=3)) == 3


class TestReduceDaily:
    def test_drops_today_and_keeps_three_days(self):
        items = []
        for date in ["20261016", "20261017", "20261018", "20261019", "20261020"]:
            items += [
                daily("TMX", date, "22.0"),
                daily("TMN", date, "11.0"),
                daily("POP", date, "30"),
                daily("SKY", date, "3"),
            ]
        slots = reduce_daily(items)
        assert [s.date for s in slots] == ["20261017", "20261018", "20261019"]
        assert slots[0] == DailySlot(date="20261017", max_temp="22.0", min_temp="11.0", pop="30", sky="mostly_cloudy")

    def test_sparse_merge(self):
        items = [
            daily("SKY", "20261016", "1"),
            daily("TMN", "20261017", "9.0"),
            daily("POP", "20261017", "60"),
            daily("TMX", "20261018", "19.0"),
        ]
        slots = reduce_daily(items)
        assert [s.date for s in slots] == ["20261017", "20261018"]
        assert slots[0].max_temp is None
        assert slots[0].min_temp == "9.0"
        assert slots[1].pop is None

    def test_only_today(self):
        assert reduce_daily([daily("TMX", "20261016", "20")]) == []

    def test_weekday_and_display(self):
        slot = DailySlot(date="20261017", max_temp="22.5", min_temp="-3.5")
        assert slot.weekday == "토"
        assert slot.max_display == "23"
        assert slot.min_display == "-4"


class TestRoundStringToInt:
    @pytest.mark.parametrize("value,expected", [
        ("23.6", "24"),
        ("23.4", "23"),
        ("23.5", "24"),
        ("-0.5", "-1"),
        ("-0.4", "0"),
        ("-2.5", "-3"),
        ("7", "7"),
        (" 12.0 ", "12"),
        (5.5, "6"),
    ])
    def test_half_away_from_zero(self, value, expected):
        assert round_string_to_int(value) == expected

    @pytest.mark.parametrize("value", [None, "", "--", "강수없음", "nan", "inf"])
    def test_non_numeric_is_placeholder(self, value):
        assert round_string_to_int(value) == "--"


class TestCodeLabels:
    def test_sky(self):
        assert sky_label("1") == "sunny"
        assert sky_label(3) == "mostly_cloudy"
        assert sky_label("2") is None
        assert sky_label("x") is None

    @pytest.mark.parametrize("code,label", [
        ("0", "sunny"), ("1", "rainy"), ("2", "rainy&snowy"), ("3", "snowy"),
        ("5", "rainy"), ("6", "rainy&snowy"), ("7", "snowy"), ("4", "-"), (None, "-"),
    ])
    def test_precip(self, code, label):
        assert precip_label(code) == label

    def test_weekday_invalid(self):
        assert get_weekday("2026-10-17") == ""


class TestBaseTimes:
    def test_one_hour_before(self):
        base = get_base_times(kst(2026, 10, 16, 14, 5))
        assert base == {
            "base_date": "20261016",
            "base_time": "1300",
            "village_base_date": "20261016",
            "village_base_time": "0200",
        }

    def test_just_after_midnight_uses_previous_day(self):
        base = get_base_times(kst(2026, 10, 16, 0, 30))
        assert base["base_date"] == "20261015"
        assert base["base_time"] == "2300"
        assert base["village_base_date"] == "20261015"

    def test_update_time_format(self):
        assert format_update_time(kst(2026, 10, 16, 9, 7)) == "2026/10/16 09:07"
