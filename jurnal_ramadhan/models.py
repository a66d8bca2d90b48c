# ======================== DATABASE MODELS ========================
# Berkas ini mendefinisikan struktur tabel (models) untuk database menggunakan SQLAlchemy.
# Database berjalan di memori (sqlite://), semua data hilang ketika proses berhenti.

from flask_sqlalchemy import SQLAlchemy
from datetime import datetime

# Inisialisasi objek SQLAlchemy
db = SQLAlchemy()

# Daftar kelas yang tetap
KELAS = ['Kelas 1', 'Kelas 2', 'Kelas 3', 'Kelas 4', 'Kelas 5', 'Kelas 6']

# Kosakata checklist ibadah harian siswa
AMALAN = ['Shalat 5 Waktu', 'Puasa', 'Tadarus', 'Shalat Tarawih', 'Shalat Dhuha', 'Sedekah']

STATUS_PENDING = 'Pending'
STATUS_DINILAI = 'Dinilai'

# Tujuh kategori nilai akhir, urutannya mengikuti kolom rekap nilai
KATEGORI_NILAI = ['sholat', 'tadarus', 'doa', 'asmaul', 'btq', 'akhlak', 'peduli']


# --- Model untuk data Siswa ---
class Siswa(db.Model):
    """
    Model ini merepresentasikan tabel 'siswa' di database.
    Username dipakai untuk login siswa (tidak peka huruf besar/kecil).
    """
    id = db.Column(db.Integer, primary_key=True)  # Kunci utama, diberikan berurutan
    nama = db.Column(db.String(100), nullable=False)  # Nama tampilan siswa
    username = db.Column(db.String(50), nullable=False)  # Username login
    kelas = db.Column(db.String(20), nullable=False)  # Salah satu dari KELAS

    def to_dict(self):
        return {"id": self.id, "nama": self.nama, "username": self.username, "kelas": self.kelas}


# --- Model untuk Jurnal Ibadah Siswa ---
class JurnalSiswa(db.Model):
    """
    Satu catatan ibadah harian siswa.
    siswa_id sengaja tidak dibuat ForeignKey: siswa yang dihapus dari roster
    tetap meninggalkan jurnalnya, dengan nama_siswa sebagai potret nama saat mengirim.
    """
    __tablename__ = 'jurnal_siswa'
    id = db.Column(db.Integer, primary_key=True)
    siswa_id = db.Column(db.Integer, nullable=True)  # Id siswa saat mengirim (boleh yatim)
    nama_siswa = db.Column(db.String(100), nullable=False)  # Nama siswa saat mengirim
    kelas = db.Column(db.String(20), nullable=False)
    tanggal = db.Column(db.String(50), nullable=False)  # Tanggal dalam format Indonesia
    checklist = db.Column(db.JSON, nullable=False, default=list)  # Daftar amalan yang dikerjakan
    catatan = db.Column(db.Text, default="")  # Refleksi siswa
    poin = db.Column(db.Integer, nullable=False, default=0)
    catatan_guru = db.Column(db.Text, nullable=False, default="")
    status = db.Column(db.String(20), nullable=False, default=STATUS_PENDING)  # Pending / Dinilai
    dibuat_pada = db.Column(db.DateTime, default=datetime.now)

    def to_dict(self):
        return {
            "id": self.id,
            "siswa_id": self.siswa_id,
            "nama_siswa": self.nama_siswa,
            "kelas": self.kelas,
            "tanggal": self.tanggal,
            "checklist": list(self.checklist or []),
            "catatan": self.catatan,
            "poin": self.poin,
            "catatan_guru": self.catatan_guru,
            "status": self.status,
        }


# --- Model untuk Jurnal Harian Guru ---
class JurnalGuru(db.Model):
    """Catatan pembelajaran guru per kelas. Tidak diubah setelah dibuat."""
    __tablename__ = 'jurnal_guru'
    id = db.Column(db.Integer, primary_key=True)
    kelas = db.Column(db.String(20), nullable=False)
    nama_guru = db.Column(db.String(100), nullable=False)
    tanggal = db.Column(db.String(20), nullable=False)  # YYYY-MM-DD
    tema = db.Column(db.Text, default="")
    tujuan = db.Column(db.Text, default="")
    aktivitas = db.Column(db.Text, default="")
    metode = db.Column(db.Text, default="")
    hasil = db.Column(db.Text, default="")
    refleksi = db.Column(db.Text, default="")

    def to_dict(self):
        return {
            "id": self.id,
            "kelas": self.kelas,
            "nama_guru": self.nama_guru,
            "tanggal": self.tanggal,
            "tema": self.tema,
            "tujuan": self.tujuan,
            "aktivitas": self.aktivitas,
            "metode": self.metode,
            "hasil": self.hasil,
            "refleksi": self.refleksi,
        }


# --- Model untuk Daftar Nilai ---
class Nilai(db.Model):
    """
    Lembar nilai per siswa. Dibuat saat nilai pertama diisi dan boleh terisi sebagian.
    Nilai disimpan apa adanya (teks dari input guru); konversi ke angka dilakukan
    saat menghitung nilai akhir.
    """
    id = db.Column(db.Integer, primary_key=True)
    siswa_id = db.Column(db.Integer, unique=True, nullable=False)
    sholat = db.Column(db.String(20))  # Sholat Dhuha
    tadarus = db.Column(db.String(20))
    doa = db.Column(db.String(20))  # Hafalan Doa
    asmaul = db.Column(db.String(20))  # Asmaul Husna
    btq = db.Column(db.String(20))  # Baca Tulis Quran
    akhlak = db.Column(db.String(20))
    peduli = db.Column(db.String(20))  # Kepedulian
    catatan = db.Column(db.Text)

    def to_dict(self):
        data = {"siswa_id": self.siswa_id, "catatan": self.catatan or ""}
        for field in KATEGORI_NILAI:
            value = getattr(self, field)
            data[field] = "" if value is None else value
        return data
