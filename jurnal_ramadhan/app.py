# ======================== IMPORTS & SETUP APLIKASI ========================
import io
import logging
import os

from flask import (
    Blueprint,
    Flask,
    current_app,
    jsonify,
    request,
    send_file,
    session,
)

from . import konten
from .aggregation import compute_final_grade, compute_leaderboard, compute_overall_winner
from .config import DevelopmentConfig, ProductionConfig, TestingConfig
from .exceptions import JurnalError
from .export import (
    KOLOM_JURNAL_GURU,
    KOLOM_JURNAL_SISWA,
    KOLOM_NILAI,
    NAMA_FILE,
    grade_rows,
    journal_rows,
    teacher_journal_rows,
    to_excel,
)
from .jurnal import (
    FIELD_JURNAL_GURU,
    all_journals,
    filter_by_class,
    filter_by_student,
    submit_journal,
    submit_teacher_journal,
    teacher_journals,
)
from .kartu import card_png
from .models import db, AMALAN, KELAS
from .nilai import FIELD_NILAI, all_grades, update_grade
from .penilaian import grade_journal, open_grading
from .roster import (
    add_student,
    find_by_username,
    get_student,
    remove_student,
    seed_roster,
    students_in_class,
    all_students,
)

logger = logging.getLogger(__name__)

bp = Blueprint('jurnal_ramadhan', __name__)


def create_app(config_object=None):
    app = Flask(__name__)

    # Pilih konfigurasi sesuai FLASK_ENV
    if config_object is None:
        env = os.getenv("FLASK_ENV", "development")
        if env == "production":
            config_object = ProductionConfig
        elif env == "testing":
            config_object = TestingConfig
        else:
            config_object = DevelopmentConfig
    app.config.from_object(config_object)

    logging.basicConfig(
        level=app.config.get('LOG_LEVEL', 'INFO'),
        format='%(asctime)s - %(levelname)s - %(name)s - %(message)s',
    )

    db.init_app(app)
    with app.app_context():
        db.create_all()
        if app.config.get('SEED_ROSTER'):
            seed_roster()

    app.register_blueprint(bp)
    app.register_error_handler(JurnalError, handle_jurnal_error)
    return app


# ======================== FUNGSI HELPER ========================
def handle_jurnal_error(error):
    return jsonify({'status': 'danger', 'message': str(error)}), error.status_code


def form_data():
    """Data kiriman, baik JSON maupun form biasa."""
    data = request.get_json(silent=True)
    if isinstance(data, dict):
        return data
    return request.form.to_dict()


def check_guru_session():
    """
    Fungsi helper untuk memeriksa apakah guru sudah login.
    Jika belum, mengembalikan respons 401.
    """
    if "guru" not in session:
        return jsonify({'status': 'danger', 'message': 'Silahkan login sebagai guru.'}), 401
    return None


def check_siswa_session():
    if "siswa_nama" not in session:
        return jsonify({'status': 'danger', 'message': 'Silahkan login sebagai siswa.'}), 401
    return None


def pilih_kelas():
    """Kelas dari query string, default Kelas 1."""
    return request.args.get("kelas") or KELAS[0]


# ======================== AUTENTIKASI ========================
@bp.route("/login/siswa", methods=["POST"])
def login_siswa():
    """Login siswa cukup dengan username yang terdaftar di roster."""
    siswa = find_by_username(form_data().get("username"))
    if not siswa:
        logger.warning("Login siswa gagal: username tidak ditemukan")
        return jsonify({
            'status': 'danger',
            'message': 'Username tidak ditemukan. Silahkan hubungi guru.'
        }), 401

    session.clear()
    session["siswa_id"] = siswa.id
    session["siswa_nama"] = siswa.nama
    session["siswa_kelas"] = siswa.kelas
    return jsonify({'status': 'success', 'message': f"Halo, {siswa.nama}", 'siswa': siswa.to_dict()})


@bp.route("/login/guru", methods=["POST"])
def login_guru():
    # Peringatan: password dibandingkan apa adanya, tanpa hash
    data = form_data()
    username = data.get("username")
    username = username.strip().lower() if isinstance(username, str) else ""
    if username == current_app.config['GURU_USERNAME'].lower() and \
            data.get("password") == current_app.config['GURU_PASSWORD']:
        session.clear()
        session["guru"] = current_app.config['GURU_DISPLAY_NAME']
        return jsonify({'status': 'success', 'message': f"Halo, {session['guru']}"})

    logger.warning("Login guru gagal untuk username %r", username)
    return jsonify({'status': 'danger', 'message': 'Username atau password guru salah.'}), 401


@bp.route("/logout")
def logout():
    """Rute untuk logout, menghapus session."""
    session.clear()
    return jsonify({'status': 'success', 'message': 'Berhasil keluar.'})


# ======================== BERANDA ========================
@bp.route("/")
def beranda():
    """Papan peringkat per kelas dan juara umum, dihitung ulang setiap kali dibuka."""
    leaderboard = compute_leaderboard(all_journals())
    return jsonify({
        'leaderboard': leaderboard,
        'juara_umum': compute_overall_winner(leaderboard),
    })


# ======================== JURNAL SISWA ========================
@bp.route("/jurnal", methods=["GET", "POST"])
def jurnal_siswa():
    """
    - GET: Menampilkan jurnal milik siswa yang sedang login.
    - POST: Mengirim jurnal harian baru.
    """
    auth_check = check_siswa_session()
    if auth_check:
        return auth_check

    nama = session["siswa_nama"]
    if request.method == "POST":
        data = form_data()
        checklist = data.get("checklist") or []
        if isinstance(checklist, str):
            checklist = [item.strip() for item in checklist.split(",") if item.strip()]

        jurnal = submit_journal(
            nama_siswa=nama,
            kelas=data.get("kelas") or session["siswa_kelas"],
            checklist=checklist,
            catatan=data.get("catatan"),
            siswa_id=session.get("siswa_id"),
        )
        return jsonify({
            'status': 'success',
            'message': 'Jurnal berhasil dikirim',
            'jurnal': jurnal.to_dict()
        }), 201

    return jsonify({
        'nama': nama,
        'amalan': AMALAN,
        'jurnal': [j.to_dict() for j in filter_by_student(nama)],
    })


# ======================== KELOLA SISWA ========================
@bp.route("/guru/siswa", methods=["GET", "POST"])
def guru_siswa():
    auth_check = check_guru_session()
    if auth_check:
        return auth_check

    if request.method == "POST":
        data = form_data()
        siswa = add_student(data.get("nama"), data.get("username"), data.get("kelas") or KELAS[0])
        return jsonify({
            'status': 'success',
            'message': 'Data siswa berhasil ditambahkan',
            'siswa': siswa.to_dict()
        }), 201

    kelas = request.args.get("kelas")
    siswa = students_in_class(kelas) if kelas else all_students()
    return jsonify({'siswa': [s.to_dict() for s in siswa]})


@bp.route("/guru/siswa/<int:siswa_id>", methods=["DELETE"])
def hapus_siswa(siswa_id):
    """Menghapus data siswa berdasarkan ID. Jurnal dan nilainya tetap disimpan."""
    auth_check = check_guru_session()
    if auth_check:
        return auth_check

    remove_student(siswa_id)
    return jsonify({'status': 'success', 'message': 'Data siswa berhasil dihapus'})


@bp.route("/guru/siswa/<int:siswa_id>/kartu")
def kartu_siswa(siswa_id):
    """Mengunduh kartu login siswa (QR code username)."""
    auth_check = check_guru_session()
    if auth_check:
        return auth_check

    siswa = get_student(siswa_id)
    return send_file(
        card_png(siswa.username, siswa.nama),
        mimetype='image/png',
        as_attachment=True,
        download_name=f"{siswa.nama}_{siswa.username}.png"
    )


# ======================== PENILAIAN JURNAL SISWA ========================
@bp.route("/guru/jurnal-siswa")
def guru_jurnal_siswa():
    auth_check = check_guru_session()
    if auth_check:
        return auth_check

    kelas = pilih_kelas()
    return jsonify({'kelas': kelas, 'jurnal': [j.to_dict() for j in filter_by_class(kelas)]})


@bp.route("/guru/jurnal-siswa/<int:journal_id>/nilai", methods=["GET", "POST"])
def nilai_jurnal(journal_id):
    """
    - GET: Isian awal form penilaian (poin & catatan saat ini).
    - POST: Menyimpan poin dan catatan guru, status menjadi Dinilai.
    """
    auth_check = check_guru_session()
    if auth_check:
        return auth_check

    if request.method == "POST":
        data = form_data()
        jurnal = grade_journal(journal_id, data.get("poin"), data.get("catatan_guru"))
        return jsonify({
            'status': 'success',
            'message': f"Jurnal {jurnal.nama_siswa} berhasil dinilai",
            'jurnal': jurnal.to_dict()
        })

    return jsonify(open_grading(journal_id))


# ======================== JURNAL GURU ========================
@bp.route("/guru/jurnal-guru", methods=["GET", "POST"])
def guru_jurnal_guru():
    auth_check = check_guru_session()
    if auth_check:
        return auth_check

    if request.method == "POST":
        data = form_data()
        jurnal = submit_teacher_journal(
            kelas=data.get("kelas") or KELAS[0],
            nama_guru=session["guru"],
            tanggal=data.get("tanggal"),
            **{field: data.get(field) for field in FIELD_JURNAL_GURU}
        )
        return jsonify({
            'status': 'success',
            'message': 'Jurnal guru berhasil disimpan',
            'jurnal': jurnal.to_dict()
        }), 201

    kelas = pilih_kelas()
    return jsonify({'kelas': kelas, 'jurnal': [tj.to_dict() for tj in teacher_journals(kelas)]})


# ======================== DAFTAR NILAI ========================
@bp.route("/guru/nilai")
def guru_nilai():
    auth_check = check_guru_session()
    if auth_check:
        return auth_check

    kelas = pilih_kelas()
    grades = all_grades()
    per_siswa = {g.siswa_id: g for g in grades}
    data = []
    for siswa in students_in_class(kelas):
        record = per_siswa.get(siswa.id)
        data.append({
            'siswa': siswa.to_dict(),
            'nilai': record.to_dict() if record else {},
            'nilai_akhir': compute_final_grade(siswa.id, grades),
        })
    return jsonify({'kelas': kelas, 'nilai': data})


@bp.route("/guru/nilai/<int:siswa_id>", methods=["POST"])
def ubah_nilai(siswa_id):
    """Mengisi satu atau beberapa kolom nilai siswa."""
    auth_check = check_guru_session()
    if auth_check:
        return auth_check

    get_student(siswa_id)
    data = form_data()
    unknown = [field for field in data if field not in FIELD_NILAI]
    if unknown:
        return jsonify({'status': 'danger', 'message': f"Kolom nilai '{unknown[0]}' tidak dikenal."}), 400

    for field, value in data.items():
        update_grade(siswa_id, field, value)

    return jsonify({
        'status': 'success',
        'message': 'Nilai berhasil disimpan',
        'nilai_akhir': compute_final_grade(siswa_id, all_grades()),
    })


# ======================== EKSPOR REKAP EXCEL ========================
@bp.route("/guru/rekap/<jenis>/<kelas>")
def rekap_excel(jenis, kelas):
    """Mengunduh rekap jurnal siswa, jurnal guru, atau daftar nilai satu kelas."""
    auth_check = check_guru_session()
    if auth_check:
        return auth_check

    if jenis not in NAMA_FILE:
        return jsonify({'status': 'danger', 'message': f"Rekap '{jenis}' tidak dikenal."}), 404
    if kelas not in KELAS:
        return jsonify({'status': 'danger', 'message': f"Kelas {kelas} tidak dikenal."}), 404

    if jenis == 'jurnal-siswa':
        isi = to_excel(journal_rows(filter_by_class(kelas)), KOLOM_JURNAL_SISWA)
    elif jenis == 'jurnal-guru':
        isi = to_excel(teacher_journal_rows(teacher_journals(kelas)), KOLOM_JURNAL_GURU)
    else:
        isi = to_excel(grade_rows(students_in_class(kelas), all_grades()), KOLOM_NILAI)

    logger.info("Rekap %s %s diunduh", jenis, kelas)
    return send_file(
        io.BytesIO(isi),
        mimetype='application/vnd.openxmlformats-officedocument.spreadsheetml.sheet',
        as_attachment=True,
        download_name=NAMA_FILE[jenis].format(kelas=kelas.replace(' ', '_'))
    )


# ======================== KONTEN LUAR ========================
def gagal_konten():
    return jsonify({'status': 'danger', 'message': 'Gagal mengambil data. Coba lagi nanti.'}), 502


@bp.route("/api/jadwal-sholat")
def jadwal_sholat():
    timings = konten.fetch_prayer_times(
        city=current_app.config['PRAYER_CITY'],
        country=current_app.config['PRAYER_COUNTRY'],
        method=current_app.config['PRAYER_METHOD'],
        timeout=current_app.config['CONTENT_TIMEOUT'],
    )
    if not timings:
        return gagal_konten()

    jam, menit, detik = konten.countdown_to_maghrib(timings)
    return jsonify({
        'timings': timings,
        'menuju_maghrib': {'jam': jam, 'menit': menit, 'detik': detik},
    })


@bp.route("/api/surah")
def daftar_surah():
    data = konten.fetch_surah_list(timeout=current_app.config['CONTENT_TIMEOUT'])
    if data is None:
        return gagal_konten()
    return jsonify(data)


@bp.route("/api/surah/<int:nomor>")
def detail_surah(nomor):
    data = konten.fetch_surah_detail(nomor, timeout=current_app.config['CONTENT_TIMEOUT'])
    if data is None:
        return gagal_konten()
    return jsonify(data)


@bp.route("/api/asmaul-husna")
def asmaul_husna():
    data = konten.fetch_asmaul_husna(timeout=current_app.config['CONTENT_TIMEOUT'])
    if data is None:
        return gagal_konten()
    return jsonify(data)


# ======================== MAIN ========================
def main():
    """Menjalankan server: `jurnal-ramadhan` atau `python -m jurnal_ramadhan.app`."""
    create_app().run(debug=True, host="0.0.0.0")


if __name__ == "__main__":
    main()
