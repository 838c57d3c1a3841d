import datetime as dt
import unittest

from forecast_client.domain import ErrorKind, ForecastDay, ForecastResult, RetrievalError, Source
from forecast_client.presentation import (
    NO_CACHE_PROMPT,
    START_PROMPT,
    TEMPERATURE_THEMES,
    WeatherIcon,
    build_forecast_view,
    day_label,
    dominant_temperature,
    source_label,
    temperature_theme,
    weather_icon,
)


def _day(offset: int, high=None, low=None, advice=None) -> ForecastDay:
    return ForecastDay(
        date=dt.date(2024, 7, 1) + dt.timedelta(days=offset),
        high=high,
        low=low,
        advice=advice or [],
    )


class TestDominantTemperature(unittest.TestCase):
    def test_empty_is_none(self):
        self.assertIsNone(dominant_temperature([]))
        self.assertIs(temperature_theme(dominant_temperature([])), TEMPERATURE_THEMES["default"])

    def test_single_day_mean(self):
        avg = dominant_temperature([_day(0, high=30, low=20)])
        self.assertEqual(avg, 25)
        self.assertEqual(temperature_theme(avg).name, "warm")

    def test_scorching_boundary_is_inclusive(self):
        avg = dominant_temperature([_day(0, high=41, low=39), _day(1, high=42, low=38)])
        self.assertEqual(avg, 40)
        self.assertEqual(temperature_theme(avg).name, "scorching")

    def test_missing_values_are_dropped_not_zeroed(self):
        # pooled: (10 + 20 + 30) / 3, not weighted per day
        avg = dominant_temperature([_day(0, high=10, low=None), _day(1, high=30, low=20)])
        self.assertAlmostEqual(avg, 20.0)

    def test_all_values_missing_is_none(self):
        self.assertIsNone(dominant_temperature([_day(0), _day(1)]))

    def test_identical_values_average_exactly(self):
        for v in (-7.3, 0.1, 19.99, 33.3):
            days = [_day(i, high=v, low=v) for i in range(3)]
            self.assertAlmostEqual(dominant_temperature(days), v, places=9)


class TestTemperatureTheme(unittest.TestCase):
    def test_bands(self):
        cases = [
            (None, "default"),
            (55.0, "scorching"),
            (40.0, "scorching"),
            (39.99, "hot"),
            (30.0, "hot"),
            (29.5, "warm"),
            (20.0, "warm"),
            (19.9, "cool"),
            (10.0, "cool"),
            (9.99, "cold"),
            (0.0, "cold"),
            (-25.0, "cold"),
        ]
        for avg, expected in cases:
            with self.subTest(avg=avg):
                self.assertEqual(temperature_theme(avg).name, expected)

    def test_six_named_themes(self):
        self.assertEqual(
            set(TEMPERATURE_THEMES),
            {"scorching", "hot", "warm", "cool", "cold", "default"},
        )
        self.assertEqual(TEMPERATURE_THEMES["default"].label, "Weather")
        self.assertEqual(TEMPERATURE_THEMES["scorching"].emoji, "🔥")


class TestWeatherIcon(unittest.TestCase):
    def test_priority(self):
        cases = [
            (["Bring an umbrella", "It's windy"], WeatherIcon.RAIN),
            (["Bring an umbrella", "Thunderstorm later"], WeatherIcon.STORM),
            (["Windy", "Wear sunscreen"], WeatherIcon.SUN),
            (["Very WINDY afternoon"], WeatherIcon.WIND),
            (["STORM warning"], WeatherIcon.STORM),
            ([], WeatherIcon.PARTLY_CLOUDY),
            (["Nice day"], WeatherIcon.PARTLY_CLOUDY),
        ]
        for advice, expected in cases:
            with self.subTest(advice=advice):
                self.assertIs(weather_icon(advice), expected)


class TestSourceLabel(unittest.TestCase):
    def test_labels(self):
        self.assertEqual((source_label("live").text, source_label("live").color), ("● Live", "#2e7d32"))
        self.assertEqual(source_label(Source.OFFLINE_CACHE).text, "● Cached")
        self.assertEqual(source_label("offline-cache").color, "#e65100")
        for other in ("anything-else", None, Source.NONE, ""):
            with self.subTest(source=other):
                badge = source_label(other)
                self.assertEqual(badge.text, "● No Cache")
                self.assertEqual(badge.color, "#999")


class TestDayLabel(unittest.TestCase):
    def test_labels(self):
        self.assertEqual([day_label(i) for i in range(3)], ["Today", "Tomorrow", "Day After"])
        self.assertEqual(day_label(3), "Day 4")


class TestBuildForecastView(unittest.TestCase):
    def test_no_result_prompts_to_start(self):
        view = build_forecast_view(None)
        self.assertIsNone(view.city)
        self.assertIsNone(view.source_badge)
        self.assertEqual(view.theme.name, "default")
        self.assertEqual(view.empty_message, START_PROMPT)

    def test_empty_result_prompts_for_online_mode(self):
        view = build_forecast_view(ForecastResult.empty("london"))
        self.assertEqual(view.source, "none")
        self.assertEqual(view.source_badge.text, "● No Cache")
        self.assertEqual(view.empty_message, NO_CACHE_PROMPT)

    def test_no_days_prompt_shown_alongside_errors(self):
        for kind in (ErrorKind.FATAL, ErrorKind.ADVISORY):
            with self.subTest(kind=kind):
                err = RetrievalError(kind=kind, message="Backend unreachable. Showing last cached result.")
                view = build_forecast_view(ForecastResult(city="london", source=Source.OFFLINE_CACHE), err)
                self.assertEqual(view.empty_message, NO_CACHE_PROMPT)
                self.assertEqual(view.error.kind, kind)

    def test_error_without_result_has_no_start_prompt(self):
        err = RetrievalError(kind=ErrorKind.FATAL, message="Fetch failed and no cached data found.")
        self.assertIsNone(build_forecast_view(None, err).empty_message)

    def test_only_first_three_days_shown_and_averaged(self):
        days = [
            _day(0, high=30, low=20, advice=["Bring an umbrella"]),
            _day(1, high=30, low=20),
            _day(2, high=30, low=20, advice=["Storm tonight"]),
            _day(3, high=100, low=100),
        ]
        result = ForecastResult(city="london", days=days, source=Source.LIVE)
        view = build_forecast_view(result, loading=True)
        self.assertEqual(len(view.days), 3)
        self.assertEqual(view.average_temperature, 25)
        self.assertEqual(view.theme.name, "warm")
        self.assertTrue(view.loading)
        self.assertEqual(view.source_badge.text, "● Live")
        self.assertEqual(view.days[0].icon, WeatherIcon.RAIN.value)
        self.assertTrue(view.days[1].all_clear)
        self.assertEqual(view.days[2].icon, WeatherIcon.STORM.value)
        self.assertEqual(view.days[2].day_label, "Day After")
        self.assertEqual(view.days[0].date, "2024-07-01")
        self.assertIsNone(view.empty_message)


if __name__ == "__main__":
    unittest.main()
