# ======================== DAFTAR NILAI ========================
# Lembar nilai dibuat saat kolom pertama diisi, lalu dilengkapi sedikit demi sedikit.

import logging

from .exceptions import InvalidInput
from .models import db, Nilai, KATEGORI_NILAI

logger = logging.getLogger(__name__)

FIELD_NILAI = KATEGORI_NILAI + ['catatan']


def grade_for(siswa_id):
    return Nilai.query.filter_by(siswa_id=siswa_id).first()


def all_grades():
    return Nilai.query.order_by(Nilai.id.asc()).all()


def update_grade(siswa_id, field, value):
    """
    Mengisi satu kolom nilai siswa. Nilai disimpan apa adanya,
    termasuk isian yang bukan angka.
    """
    if field not in FIELD_NILAI:
        raise InvalidInput(f"Kolom nilai '{field}' tidak dikenal.")

    nilai = grade_for(siswa_id)
    if nilai is None:
        nilai = Nilai(siswa_id=siswa_id)
        db.session.add(nilai)

    setattr(nilai, field, None if value is None else str(value))
    db.session.commit()
    logger.info("Nilai %s siswa id=%s diperbarui", field, siswa_id)
    return nilai


def get_grade_value(siswa_id, field):
    """Isi kolom nilai siswa, atau string kosong jika belum diisi."""
    if field not in FIELD_NILAI:
        raise InvalidInput(f"Kolom nilai '{field}' tidak dikenal.")
    nilai = grade_for(siswa_id)
    if nilai is None:
        return ""
    value = getattr(nilai, field)
    return "" if value is None else value
