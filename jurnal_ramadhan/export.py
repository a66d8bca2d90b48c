# ======================== REKAP EXCEL ========================
# Menyusun baris rekap (jurnal siswa, jurnal guru, daftar nilai) dan
# menuliskannya ke file Excel dengan pandas.

import io

import pandas as pd

from .aggregation import compute_final_grade
from .models import KATEGORI_NILAI

KOLOM_JURNAL_SISWA = [
    'No', 'Nama Siswa', 'Tanggal', 'Amalan', 'Catatan Siswa', 'Poin', 'Catatan Guru', 'Status'
]
KOLOM_JURNAL_GURU = [
    'No', 'Tanggal', 'Tema', 'Tujuan', 'Aktivitas', 'Metode', 'Hasil', 'Refleksi'
]

# Judul kolom untuk tiap kategori nilai, urutannya sama dengan KATEGORI_NILAI
JUDUL_KATEGORI = {
    'sholat': 'Sholat Dhuha',
    'tadarus': 'Tadarus',
    'doa': 'Hafalan Doa',
    'asmaul': 'Asmaul Husna',
    'btq': 'BTQ',
    'akhlak': 'Akhlak',
    'peduli': 'Kepedulian',
}
KOLOM_NILAI = (
    ['No', 'Nama Murid']
    + [JUDUL_KATEGORI[field] for field in KATEGORI_NILAI]
    + ['Nilai Akhir', 'Catatan Guru']
)

NAMA_FILE = {
    'jurnal-siswa': 'Rekap_Jurnal_Siswa_{kelas}.xlsx',
    'jurnal-guru': 'Rekap_Jurnal_Guru_{kelas}.xlsx',
    'nilai': 'Rekap_Daftar_Nilai_{kelas}.xlsx',
}


def journal_rows(journals):
    return [
        {
            'No': i,
            'Nama Siswa': j.nama_siswa,
            'Tanggal': j.tanggal,
            'Amalan': ', '.join(j.checklist or []),
            'Catatan Siswa': j.catatan,
            'Poin': j.poin,
            'Catatan Guru': j.catatan_guru,
            'Status': j.status,
        }
        for i, j in enumerate(journals, start=1)
    ]


def teacher_journal_rows(teacher_journals):
    return [
        {
            'No': i,
            'Tanggal': tj.tanggal,
            'Tema': tj.tema,
            'Tujuan': tj.tujuan,
            'Aktivitas': tj.aktivitas,
            'Metode': tj.metode,
            'Hasil': tj.hasil,
            'Refleksi': tj.refleksi,
        }
        for i, tj in enumerate(teacher_journals, start=1)
    ]


def grade_rows(students, grade_records):
    """
    Satu baris per siswa di roster. Nilai kategori ditampilkan apa adanya
    (kosong jika belum diisi); nilai akhir dihitung ulang.
    """
    grade_records = list(grade_records)
    per_siswa = {g.siswa_id: g for g in grade_records}
    rows = []
    for i, siswa in enumerate(students, start=1):
        record = per_siswa.get(siswa.id)
        row = {'No': i, 'Nama Murid': siswa.nama}
        for field in KATEGORI_NILAI:
            value = getattr(record, field, None) if record is not None else None
            row[JUDUL_KATEGORI[field]] = "" if value is None else value
        row['Nilai Akhir'] = compute_final_grade(siswa.id, grade_records)
        row['Catatan Guru'] = (record.catatan or "") if record is not None else ""
        rows.append(row)
    return rows


def to_excel(rows, columns, sheet_name="Rekap"):
    """Menulis baris rekap ke file Excel (satu sheet) dan mengembalikan isinya sebagai bytes."""
    df = pd.DataFrame(rows, columns=columns)
    output = io.BytesIO()
    df.to_excel(output, index=False, sheet_name=sheet_name)
    return output.getvalue()
