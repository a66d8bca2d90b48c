# ======================== PAPAN PERINGKAT & NILAI AKHIR ========================
# Fungsi murni di atas potret data jurnal dan nilai. Tidak ada yang disimpan;
# semuanya dihitung ulang setiap kali dibaca.

import math
from decimal import Decimal, ROUND_HALF_UP

from .models import KELAS, KATEGORI_NILAI, STATUS_DINILAI


def to_number(value):
    """
    Mengubah isian nilai menjadi angka.
    Kosong, None, bukan angka, NaN, atau tak hingga dianggap 0.
    """
    if isinstance(value, bool):
        return float(value)
    try:
        angka = float(value)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(angka):
        return 0.0
    return angka


def _kunci_siswa(jurnal):
    if jurnal.siswa_id is not None:
        return ("id", jurnal.siswa_id)
    return ("nama", jurnal.nama_siswa)


def compute_leaderboard(journals, kelas_list=KELAS):
    """
    Menghitung siswa terbaik tiap kelas dari jurnal yang sudah dinilai.

    Poin seorang siswa adalah jumlah poin semua jurnalnya yang berstatus
    Dinilai di kelas tersebut. Siswa dengan jumlah terbesar menjadi juara
    kelas; bila sama besar, siswa yang lebih dulu muncul di `journals` menang.
    Kelas tanpa jurnal yang dinilai tidak dimasukkan.

    Returns:
        list of {"kelas": str, "top_student": {"nama": str, "poin": int}}
    """
    journals = list(journals)
    leaderboard = []

    for kelas in kelas_list:
        total = {}
        nama = {}
        for jurnal in journals:
            if jurnal.kelas != kelas or jurnal.status != STATUS_DINILAI:
                continue
            kunci = _kunci_siswa(jurnal)
            total[kunci] = total.get(kunci, 0) + (jurnal.poin or 0)
            nama.setdefault(kunci, jurnal.nama_siswa)

        top_student = None
        for kunci, poin in total.items():
            if top_student is None or poin > top_student["poin"]:
                top_student = {"nama": nama[kunci], "poin": poin}

        if top_student is not None:
            leaderboard.append({"kelas": kelas, "top_student": top_student})

    return leaderboard


def compute_overall_winner(leaderboard):
    """
    Juara umum: entri leaderboard dengan poin tertinggi.
    Bila beberapa kelas sama tinggi, kelas yang lebih dulu di leaderboard menang.
    """
    winner = None
    for entry in leaderboard:
        if winner is None or entry["top_student"]["poin"] > winner["top_student"]["poin"]:
            winner = entry
    return winner


def compute_final_grade(siswa_id, grade_records):
    """
    Nilai akhir = jumlah tujuh kategori dibagi 7, dibulatkan satu desimal.
    Kategori yang belum diisi tetap dihitung sebagai 0.
    """
    record = next((g for g in grade_records if g.siswa_id == siswa_id), None)
    if record is None:
        return 0.0

    total = sum(to_number(getattr(record, field, None)) for field in KATEGORI_NILAI)
    rata_rata = Decimal(str(total)) / Decimal(len(KATEGORI_NILAI))
    return float(rata_rata.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))
