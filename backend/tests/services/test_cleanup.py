# backend/tests/services/test_cleanup.py
from ledger.services.cleanup import CleanupService


def test_delete_stored_file(uploads_dir, stored_file):
    name = stored_file("report.pdf")
    service = CleanupService(uploads_dir)

    assert service.delete_stored_file(name) is True
    assert not (uploads_dir / name).exists()


def test_delete_missing_stored_file_is_tolerated(uploads_dir):
    assert CleanupService(uploads_dir).delete_stored_file("never-written.png") is True


def test_delete_stays_inside_uploads_dir(temp_storage_dir, uploads_dir):
    outside = temp_storage_dir / "secret.txt"
    outside.write_text("keep me")

    CleanupService(uploads_dir).delete_stored_file("../secret.txt")

    assert outside.exists()


def test_delete_stored_files_reports_failures(uploads_dir, stored_file):
    # A directory cannot be unlinked, so it stands in for an undeletable file
    (uploads_dir / "stuck").mkdir()
    good = stored_file("good.png")

    failed = CleanupService(uploads_dir).delete_stored_files(["stuck", good])

    assert failed == ["stuck"]
    assert not (uploads_dir / good).exists()
