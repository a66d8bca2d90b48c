"""Kesalahan yang dilempar oleh store dan alur penilaian."""


class JurnalError(Exception):
    """Kesalahan dasar; pesan dapat langsung ditampilkan ke pengguna."""

    status_code = 400


class InvalidInput(JurnalError):
    pass


class StudentNotFound(JurnalError):
    status_code = 404


class JournalNotFound(JurnalError):
    status_code = 404


class DuplicateUsername(JurnalError):
    status_code = 409
