# ======================== KONTEN LUAR (JADWAL SHOLAT & MATERI) ========================
# Klien tipis untuk API jadwal sholat (aladhan.com) dan Al-Quran (alquran.cloud).
# Hasilnya biner: data jika berhasil, None jika gagal. Kegagalan hanya dicatat di log.

import logging
from datetime import datetime, timedelta

import requests

logger = logging.getLogger(__name__)

ALADHAN_URL = "https://api.aladhan.com/v1"
ALQURAN_URL = "https://api.alquran.cloud/v1"
DEFAULT_TIMEOUT = 10


def _get_data(url, params=None, timeout=DEFAULT_TIMEOUT):
    """GET ke API konten; mengembalikan field 'data' bila code == 200."""
    try:
        response = requests.get(url, params=params, timeout=timeout)
        response.raise_for_status()
        payload = response.json()
    except (requests.RequestException, ValueError) as e:
        logger.warning("Gagal mengambil %s: %s", url, e)
        return None

    if not isinstance(payload, dict) or payload.get("code") != 200:
        logger.warning("Respons %s tidak berhasil: %.100r", url, payload)
        return None
    return payload.get("data")


def fetch_prayer_times(city="Ciamis", country="Indonesia", method=11, timeout=DEFAULT_TIMEOUT):
    """Jadwal sholat hari ini untuk sebuah kota, misalnya {'Maghrib': '17:48', ...}."""
    data = _get_data(
        f"{ALADHAN_URL}/timingsByCity",
        params={"city": city, "country": country, "method": method},
        timeout=timeout,
    )
    if not data:
        return None
    return data.get("timings")


def countdown_to_maghrib(timings, now=None):
    """
    Sisa waktu menuju Maghrib berikutnya sebagai (jam, menit, detik).
    Jika Maghrib hari ini sudah lewat, hitung ke Maghrib besok dengan jam yang sama.
    """
    now = now or datetime.now()
    jam, menit = (int(bagian) for bagian in timings["Maghrib"].split(":")[:2])
    target = now.replace(hour=jam, minute=menit, second=0, microsecond=0)
    if now > target:
        target += timedelta(days=1)

    sisa = int((target - now).total_seconds())
    return sisa // 3600, (sisa % 3600) // 60, sisa % 60


def fetch_surah_list(timeout=DEFAULT_TIMEOUT):
    return _get_data(f"{ALQURAN_URL}/surah", timeout=timeout)


def fetch_surah_detail(nomor, timeout=DEFAULT_TIMEOUT):
    return _get_data(f"{ALQURAN_URL}/surah/{nomor}", timeout=timeout)


def fetch_asmaul_husna(timeout=DEFAULT_TIMEOUT):
    return _get_data(f"{ALADHAN_URL}/asmaAlHusna", timeout=timeout)
