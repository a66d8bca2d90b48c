"""Jurnal Ramadhan: jurnal ibadah siswa, penilaian guru, dan papan peringkat kelas."""

__version__ = "1.0.0"
