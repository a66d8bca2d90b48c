# ======================== JURNAL SISWA & GURU ========================
# Penyimpanan jurnal ibadah siswa dan jurnal harian guru.
# Semua daftar jurnal siswa diurutkan dari yang terbaru.

import logging
from datetime import date, datetime

from .exceptions import InvalidInput, JournalNotFound
from .models import db, JurnalSiswa, JurnalGuru, KELAS, AMALAN, STATUS_PENDING

logger = logging.getLogger(__name__)

NAMA_HARI = ['Senin', 'Selasa', 'Rabu', 'Kamis', 'Jumat', 'Sabtu', 'Minggu']
NAMA_BULAN = [
    'Januari', 'Februari', 'Maret', 'April', 'Mei', 'Juni',
    'Juli', 'Agustus', 'September', 'Oktober', 'November', 'Desember'
]

FIELD_JURNAL_GURU = ['tema', 'tujuan', 'aktivitas', 'metode', 'hasil', 'refleksi']


def format_tanggal(waktu):
    """
    Memformat tanggal ke bentuk panjang bahasa Indonesia.
    Misalnya: date(2026, 10, 18) -> 'Minggu, 18 Oktober 2026'
    """
    hari = NAMA_HARI[waktu.weekday()]
    bulan = NAMA_BULAN[waktu.month - 1]
    return f"{hari}, {waktu.day} {bulan} {waktu.year}"


def _cek_kelas(kelas):
    if kelas not in KELAS:
        raise InvalidInput(f"Kelas {kelas} tidak dikenal.")


def submit_journal(nama_siswa, kelas, checklist, catatan, siswa_id=None, now=None):
    """
    Menyimpan jurnal baru dengan status Pending dan poin 0.
    Amalan di checklist harus berasal dari AMALAN; duplikat digabung.
    """
    if not nama_siswa:
        raise InvalidInput("Nama siswa wajib diisi.")
    _cek_kelas(kelas)

    if checklist is not None and not isinstance(checklist, (list, tuple)):
        raise InvalidInput("Checklist amalan harus berupa daftar.")
    amalan = []
    for item in checklist or []:
        if item not in AMALAN:
            raise InvalidInput(f"Amalan '{item}' tidak dikenal.")
        if item not in amalan:
            amalan.append(item)

    now = now or datetime.now()
    jurnal = JurnalSiswa(
        siswa_id=siswa_id,
        nama_siswa=nama_siswa,
        kelas=kelas,
        tanggal=format_tanggal(now),
        checklist=amalan,
        catatan=catatan or "",
        poin=0,
        catatan_guru="",
        status=STATUS_PENDING,
        dibuat_pada=now,
    )
    db.session.add(jurnal)
    db.session.commit()
    logger.info("Jurnal baru dari %s (%s), id=%s", nama_siswa, kelas, jurnal.id)
    return jurnal


def _terbaru_dulu(query):
    return query.order_by(JurnalSiswa.id.desc()).all()


def all_journals():
    return _terbaru_dulu(JurnalSiswa.query)


def filter_by_class(kelas):
    return _terbaru_dulu(JurnalSiswa.query.filter_by(kelas=kelas))


def filter_by_student(nama_siswa):
    return _terbaru_dulu(JurnalSiswa.query.filter_by(nama_siswa=nama_siswa))


def get_journal(journal_id):
    jurnal = db.session.get(JurnalSiswa, journal_id)
    if jurnal is None:
        raise JournalNotFound("Jurnal tidak ditemukan.")
    return jurnal


# --- Jurnal guru ---
def submit_teacher_journal(kelas, nama_guru, tanggal=None, **fields):
    """Menyimpan jurnal harian guru. Tanggal default hari ini (YYYY-MM-DD)."""
    _cek_kelas(kelas)
    unknown = set(fields) - set(FIELD_JURNAL_GURU)
    if unknown:
        raise InvalidInput(f"Kolom jurnal guru tidak dikenal: {', '.join(sorted(unknown))}")

    jurnal = JurnalGuru(
        kelas=kelas,
        nama_guru=nama_guru,
        tanggal=tanggal or date.today().isoformat(),
        **{field: fields.get(field) or "" for field in FIELD_JURNAL_GURU}
    )
    db.session.add(jurnal)
    db.session.commit()
    logger.info("Jurnal guru baru untuk %s oleh %s", kelas, nama_guru)
    return jurnal


def teacher_journals(kelas=None):
    query = JurnalGuru.query
    if kelas:
        query = query.filter_by(kelas=kelas)
    return query.order_by(JurnalGuru.id.desc()).all()
