# ======================== ROSTER SISWA ========================
# Menambah, menghapus, dan mencari siswa. Penghapusan tidak menyentuh jurnal
# maupun nilai; data yatim tetap disimpan.

import logging

from sqlalchemy import func

from .exceptions import DuplicateUsername, InvalidInput, StudentNotFound
from .models import db, Siswa, KELAS

logger = logging.getLogger(__name__)

SISWA_AWAL = [
    ("Ahmad Fauzi", "ahmad", "Kelas 4"),
    ("Siti Aminah", "siti", "Kelas 5"),
    ("Putra Galuh", "putra", "Kelas 5"),
]


def find_by_username(username):
    """
    Mencari siswa berdasarkan username, tanpa membedakan huruf besar/kecil.
    Mengembalikan None jika tidak ditemukan.
    """
    if not username or not isinstance(username, str):
        return None
    return (
        Siswa.query
        .filter(func.lower(Siswa.username) == username.strip().lower())
        .order_by(Siswa.id.asc())
        .first()
    )


def add_student(nama, username, kelas):
    """Menambah siswa baru ke roster. Username wajib unik."""
    if not all(isinstance(v, str) for v in (nama, username, kelas) if v is not None):
        raise InvalidInput("Nama, username, dan kelas siswa harus berupa teks.")
    nama = (nama or "").strip()
    username = (username or "").strip()
    if not nama or not username:
        raise InvalidInput("Nama dan username siswa wajib diisi.")
    if kelas not in KELAS:
        raise InvalidInput(f"Kelas {kelas} tidak dikenal.")
    if find_by_username(username):
        raise DuplicateUsername(f"Username {username} sudah digunakan oleh siswa lain.")

    siswa = Siswa(nama=nama, username=username, kelas=kelas)
    db.session.add(siswa)
    db.session.commit()
    logger.info("Siswa ditambahkan: %s (%s, %s)", siswa.nama, siswa.username, siswa.kelas)
    return siswa


def get_student(siswa_id):
    siswa = db.session.get(Siswa, siswa_id)
    if siswa is None:
        raise StudentNotFound("Siswa tidak ditemukan.")
    return siswa


def remove_student(siswa_id):
    """Menghapus siswa dari roster (hard delete, tanpa cascade)."""
    siswa = get_student(siswa_id)
    nama = siswa.nama
    db.session.delete(siswa)
    db.session.commit()
    logger.info("Siswa dihapus: %s (id=%s)", nama, siswa_id)


def all_students():
    return Siswa.query.order_by(Siswa.id.asc()).all()


def students_in_class(kelas):
    return Siswa.query.filter_by(kelas=kelas).order_by(Siswa.id.asc()).all()


def seed_roster():
    """Mengisi roster dengan siswa contoh bila roster masih kosong."""
    if Siswa.query.count():
        return
    for nama, username, kelas in SISWA_AWAL:
        db.session.add(Siswa(nama=nama, username=username, kelas=kelas))
    db.session.commit()
    logger.info("Roster awal dimuat: %d siswa", len(SISWA_AWAL))
