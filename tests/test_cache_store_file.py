import datetime as dt
import tempfile
import unittest
from pathlib import Path

from forecast_client.cache_store.file import FileCacheStore
from forecast_client.domain import CacheEntry, ForecastDay, ForecastResult, Source


def _entry(city: str = "london") -> CacheEntry:
    return CacheEntry(
        result=ForecastResult(
            city=city,
            days=[
                ForecastDay(date=dt.date(2024, 7, 1), high=24.0, low=13.5, advice=["Wear sunscreen"]),
                ForecastDay(date=dt.date(2024, 7, 2), high=None, low=12.0),
            ],
            source=Source.LIVE,
        ),
        stored_at=dt.datetime(2024, 7, 1, 8, 30, tzinfo=dt.timezone.utc),
    )


class TestFileCacheStore(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.path = Path(self._tmp.name) / "nested" / "forecast.json"

    def tearDown(self):
        self._tmp.cleanup()

    def test_missing_file_reads_none(self):
        self.assertIsNone(FileCacheStore(self.path).read())

    def test_survives_new_instance(self):
        FileCacheStore(self.path).write(_entry())
        # a fresh store simulates a process restart
        loaded = FileCacheStore(self.path).read()
        self.assertEqual(loaded, _entry())

    def test_write_overwrites_and_leaves_no_temp_files(self):
        store = FileCacheStore(self.path)
        store.write(_entry("london"))
        store.write(_entry("paris"))
        self.assertEqual(store.read().result.city, "paris")
        self.assertEqual([p.name for p in self.path.parent.iterdir()], ["forecast.json"])

    def test_corrupt_file_reads_none(self):
        self.path.parent.mkdir(parents=True)
        for raw in ("{not json", '{"result": {"days": []}}', "", "[]"):
            with self.subTest(raw=raw):
                self.path.write_text(raw, encoding="utf-8")
                self.assertIsNone(FileCacheStore(self.path).read())


if __name__ == "__main__":
    unittest.main()
