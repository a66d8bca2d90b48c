from types import SimpleNamespace

from jurnal_ramadhan.aggregation import (
    compute_final_grade,
    compute_leaderboard,
    compute_overall_winner,
    to_number,
)


def jurnal(nama, kelas, poin, status="Dinilai", siswa_id=None):
    return SimpleNamespace(nama_siswa=nama, kelas=kelas, poin=poin, status=status, siswa_id=siswa_id)


def nilai(siswa_id, **fields):
    base = dict.fromkeys(["sholat", "tadarus", "doa", "asmaul", "btq", "akhlak", "peduli"])
    base.update(fields)
    return SimpleNamespace(siswa_id=siswa_id, **base)


def test_leaderboard_sums_points_per_student():
    journals = [jurnal("Ahmad", "Kelas 4", 10), jurnal("Ahmad", "Kelas 4", 15), jurnal("Budi", "Kelas 4", 20)]
    assert compute_leaderboard(journals) == [
        {"kelas": "Kelas 4", "top_student": {"nama": "Ahmad", "poin": 25}}
    ]


def test_leaderboard_ignores_pending_entries_and_omits_empty_classes():
    journals = [
        jurnal("Siti", "Kelas 5", 90, status="Pending"),
        jurnal("Putra", "Kelas 5", 5),
        jurnal("Rina", "Kelas 2", 50, status="Pending"),
    ]
    leaderboard = compute_leaderboard(journals)
    assert [entry["kelas"] for entry in leaderboard] == ["Kelas 5"]
    assert leaderboard[0]["top_student"] == {"nama": "Putra", "poin": 5}


def test_leaderboard_first_seen_wins_on_tie():
    journals = [jurnal("Siti", "Kelas 5", 30), jurnal("Putra", "Kelas 5", 30)]
    assert compute_leaderboard(journals)[0]["top_student"]["nama"] == "Siti"


def test_leaderboard_counts_graded_zero_points():
    leaderboard = compute_leaderboard([jurnal("Ahmad", "Kelas 1", 0)])
    assert leaderboard == [{"kelas": "Kelas 1", "top_student": {"nama": "Ahmad", "poin": 0}}]


def test_leaderboard_groups_by_student_id_when_present():
    journals = [
        jurnal("Ahmad F.", "Kelas 4", 10, siswa_id=1),
        jurnal("Ahmad Fauzi", "Kelas 4", 10, siswa_id=1),
        jurnal("Ahmad Fauzi", "Kelas 4", 15, siswa_id=2),
    ]
    top = compute_leaderboard(journals)[0]["top_student"]
    assert top == {"nama": "Ahmad F.", "poin": 20}


def test_leaderboard_skips_unknown_class():
    assert compute_leaderboard([jurnal("Ahmad", "Kelas 9", 100)]) == []


def test_leaderboard_is_deterministic():
    journals = [jurnal("Ahmad", "Kelas 4", 10), jurnal("Siti", "Kelas 5", 12)]
    assert compute_leaderboard(journals) == compute_leaderboard(journals)


def test_overall_winner_picks_highest_points():
    leaderboard = compute_leaderboard([
        jurnal("Ahmad", "Kelas 4", 10),
        jurnal("Siti", "Kelas 5", 40),
        jurnal("Rina", "Kelas 1", 25),
    ])
    assert compute_overall_winner(leaderboard)["kelas"] == "Kelas 5"


def test_overall_winner_tie_goes_to_first_class():
    leaderboard = compute_leaderboard([jurnal("Siti", "Kelas 5", 40), jurnal("Rina", "Kelas 2", 40)])
    assert compute_overall_winner(leaderboard)["kelas"] == "Kelas 2"


def test_overall_winner_empty_leaderboard():
    assert compute_overall_winner([]) is None


def test_final_grade_divides_by_seven():
    records = [nilai(1, sholat="100", tadarus="100")]
    assert compute_final_grade(1, records) == 28.6


def test_final_grade_full_sheet():
    records = [nilai(3, sholat="80", tadarus="90", doa="85", asmaul="70", btq="75", akhlak="95", peduli="100")]
    assert compute_final_grade(3, records) == 85.0


def test_final_grade_coerces_invalid_values_to_zero():
    records = [nilai(2, sholat="abc", tadarus="", doa=None, asmaul="70")]
    assert compute_final_grade(2, records) == 10.0


def test_final_grade_without_record_is_zero():
    assert compute_final_grade(99, [nilai(1, sholat="100")]) == 0.0


def test_final_grade_is_idempotent():
    records = [nilai(1, sholat="77", btq="64")]
    assert compute_final_grade(1, records) == compute_final_grade(1, records)


def test_final_grade_rounds_half_up():
    # 2.45 / 7 = 0.35
    records = [nilai(1, sholat="2.45")]
    assert compute_final_grade(1, records) == 0.4


def test_to_number():
    assert to_number("85") == 85.0
    assert to_number("8.5") == 8.5
    assert to_number("") == 0.0
    assert to_number(None) == 0.0
    assert to_number("nan") == 0.0
    assert to_number("inf") == 0.0
