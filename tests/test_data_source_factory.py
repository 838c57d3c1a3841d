import unittest

from forecast_client.config import Settings
from forecast_client.data_sources import forecast_api_client
from forecast_client.data_sources.base import CallableForecastDataSource
from forecast_client.data_sources.factory import build_data_source


class _Resp:
    status_code = 200

    def json(self):
        return {"city": "Oslo", "days": []}


class TestDataSourceFactory(unittest.TestCase):
    def setUp(self):
        self._orig_session = forecast_api_client.session

    def tearDown(self):
        forecast_api_client.session = self._orig_session

    def test_binds_configured_url_and_timeout(self):
        calls = []

        def fake_get(url, params=None, timeout=None):
            calls.append((url, params, timeout))
            return _Resp()

        forecast_api_client.session = type("S", (), {"get": staticmethod(fake_get)})()
        settings = Settings(api_base_url="http://weather.local:9000/", request_timeout_seconds=4)

        ds = build_data_source(settings)
        self.assertIsInstance(ds, CallableForecastDataSource)
        result = ds.fetch_forecast("oslo")

        self.assertEqual(result.city, "Oslo")
        self.assertEqual(
            calls,
            [("http://weather.local:9000/api/v1/weather/forecast", {"city": "oslo", "offlineMode": "false"}, 4)],
        )


if __name__ == "__main__":
    unittest.main()
