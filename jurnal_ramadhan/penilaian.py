# ======================== PENILAIAN JURNAL ========================
# Alur status jurnal siswa: Pending -> Dinilai.
# Jurnal yang sudah Dinilai boleh dinilai ulang (poin dan catatan ditimpa),
# tetapi tidak bisa dikembalikan ke Pending.

import logging
import re

from .exceptions import InvalidInput
from .jurnal import get_journal
from .models import db, STATUS_DINILAI

logger = logging.getLogger(__name__)


def open_grading(journal_id):
    """Menyiapkan isian form penilaian dari nilai jurnal saat ini."""
    jurnal = get_journal(journal_id)
    return {
        "journal_id": jurnal.id,
        "poin": jurnal.poin or 0,
        "catatan_guru": jurnal.catatan_guru or "",
        "is_regrade": jurnal.status == STATUS_DINILAI,
    }


def _parse_poin(poin):
    if isinstance(poin, bool):
        raise InvalidInput("Poin harus berupa bilangan bulat.")
    if isinstance(poin, int):
        return poin
    if isinstance(poin, str) and re.fullmatch(r"-?[0-9]+", poin.strip()):
        return int(poin.strip())
    raise InvalidInput("Poin harus berupa bilangan bulat.")


def grade_journal(journal_id, poin, catatan_guru):
    """
    Memberi (atau mengubah) nilai satu jurnal siswa.
    Poin wajib bilangan bulat dan catatan guru wajib diisi.
    """
    poin = _parse_poin(poin)
    if catatan_guru is not None and not isinstance(catatan_guru, str):
        raise InvalidInput("Catatan guru harus berupa teks.")
    catatan_guru = (catatan_guru or "").strip()
    if not catatan_guru:
        raise InvalidInput("Catatan guru wajib diisi.")

    jurnal = get_journal(journal_id)
    regrade = jurnal.status == STATUS_DINILAI

    jurnal.poin = poin
    jurnal.catatan_guru = catatan_guru
    jurnal.status = STATUS_DINILAI
    db.session.commit()

    if regrade:
        logger.info("Nilai jurnal id=%s diubah menjadi %s poin", jurnal.id, poin)
    else:
        logger.info("Jurnal id=%s dinilai %s poin", jurnal.id, poin)
    return jurnal
