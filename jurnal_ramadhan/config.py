# jurnal_ramadhan/config.py
import os
from dotenv import load_dotenv

# Muat variabel lingkungan dari file .env
load_dotenv()


class Config:
    """Konfigurasi dasar."""
    SECRET_KEY = os.getenv('FLASK_SECRET_KEY', 'jurnal-ramadhan-secret')
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    # Database di memori: data hanya bertahan selama proses berjalan
    SQLALCHEMY_DATABASE_URI = os.getenv('DATABASE_URL', 'sqlite://')

    GURU_USERNAME = os.getenv('GURU_USERNAME', 'guru')
    GURU_PASSWORD = os.getenv('GURU_PASSWORD', 'admin123')
    GURU_DISPLAY_NAME = os.getenv('GURU_DISPLAY_NAME', 'Bapak/Ibu Guru')
    SEED_ROSTER = os.getenv('SEED_ROSTER', '1') == '1'

    PRAYER_CITY = os.getenv('PRAYER_CITY', 'Ciamis')
    PRAYER_COUNTRY = os.getenv('PRAYER_COUNTRY', 'Indonesia')
    PRAYER_METHOD = int(os.getenv('PRAYER_METHOD', '11'))
    CONTENT_TIMEOUT = float(os.getenv('CONTENT_TIMEOUT', '10'))

    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')


class DevelopmentConfig(Config):
    """Konfigurasi pengembangan."""
    DEBUG = True


class ProductionConfig(Config):
    """Konfigurasi produksi."""
    DEBUG = False


class TestingConfig(Config):
    """Konfigurasi pengujian: database memori baru tanpa siswa contoh."""
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    SECRET_KEY = 'testing-secret'
    SEED_ROSTER = False
    LOG_LEVEL = 'WARNING'
