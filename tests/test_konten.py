from datetime import datetime

import requests

from jurnal_ramadhan import konten


class FakeResponse:
    def __init__(self, payload, status_code=200):
        self.payload = payload
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error")

    def json(self):
        return self.payload


def test_countdown_before_maghrib():
    assert konten.countdown_to_maghrib({"Maghrib": "17:59"}, datetime(2026, 2, 20, 16, 30, 15)) == (1, 28, 45)


def test_countdown_after_maghrib_rolls_to_next_day():
    assert konten.countdown_to_maghrib({"Maghrib": "17:59"}, datetime(2026, 2, 20, 18, 0, 0)) == (23, 59, 0)


def test_fetch_prayer_times(monkeypatch):
    calls = {}

    def fake_get(url, params=None, timeout=None):
        calls.update(url=url, params=params, timeout=timeout)
        return FakeResponse({"code": 200, "data": {"timings": {"Maghrib": "17:59"}}})

    monkeypatch.setattr(konten.requests, "get", fake_get)
    assert konten.fetch_prayer_times(timeout=3) == {"Maghrib": "17:59"}
    assert calls["url"].endswith("/timingsByCity")
    assert calls["params"] == {"city": "Ciamis", "country": "Indonesia", "method": 11}
    assert calls["timeout"] == 3


def test_fetch_returns_none_on_bad_code(monkeypatch):
    monkeypatch.setattr(konten.requests, "get", lambda *a, **kw: FakeResponse({"code": 404, "data": "Not found"}))
    assert konten.fetch_surah_detail(200) is None


def test_fetch_returns_none_on_network_error(monkeypatch):
    def boom(*args, **kwargs):
        raise requests.ConnectionError("offline")

    monkeypatch.setattr(konten.requests, "get", boom)
    assert konten.fetch_asmaul_husna() is None


def test_fetch_returns_none_on_http_error(monkeypatch):
    monkeypatch.setattr(konten.requests, "get", lambda *a, **kw: FakeResponse({}, status_code=500))
    assert konten.fetch_surah_list() is None


def test_fetch_surah_list(monkeypatch):
    surah = [{"number": 1, "englishName": "Al-Faatiha"}]
    monkeypatch.setattr(konten.requests, "get", lambda *a, **kw: FakeResponse({"code": 200, "data": surah}))
    assert konten.fetch_surah_list() == surah
