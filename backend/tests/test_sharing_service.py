"""Tests for the sharing service: registry and blob store kept in step."""

import logging

import pytest

from sharebox.exceptions import Forbidden, InvalidCredentials, NotFound, StorageWriteError, UnknownOwner

from tests.conftest import ADMIN


@pytest.fixture
def sharing(services):
    services.credentials.create("alice@x.com", "pw")
    services.credentials.create("bob@x.com", "pw")
    return services.sharing


class TestAccounts:
    def test_login(self, sharing):
        assert sharing.login("alice@x.com", "pw").email == "alice@x.com"

    def test_login_wrong_password(self, sharing):
        with pytest.raises(InvalidCredentials):
            sharing.login("alice@x.com", "nope")


class TestUpload:
    def test_upload_registers_private_record(self, sharing, services):
        record = sharing.upload("alice@x.com", b"data", "a.txt", "text/plain")
        assert record.is_public is False
        assert record.size_bytes == 4
        assert services.uploads.resolve(record.storage_key).read_bytes() == b"data"
        assert services.registry.get(record.storage_key) is record

    def test_unknown_owner_writes_nothing(self, sharing, services):
        with pytest.raises(UnknownOwner):
            sharing.upload("ghost@x.com", b"data", "a.txt")
        assert len(services.registry) == 0
        assert list(services.uploads.root.iterdir()) == []

    def test_default_mime_type(self, sharing):
        record = sharing.upload("alice@x.com", b"", "blob")
        assert record.mime_type == "application/octet-stream"

    def test_failed_write_adds_no_record(self, sharing, services, monkeypatch):
        def _fail(data, name):
            raise StorageWriteError()

        monkeypatch.setattr(services.uploads, "store", _fail)
        with pytest.raises(StorageWriteError):
            sharing.upload("alice@x.com", b"data", "a.txt")
        assert len(services.registry) == 0


class TestDelete:
    def test_delete_removes_record_and_blob(self, sharing, services):
        record = sharing.upload("alice@x.com", b"data", "a.txt")
        sharing.delete_file(record.storage_key, "alice@x.com")
        assert len(services.registry) == 0
        assert services.uploads.exists(record.storage_key) is False

    def test_non_owner_keeps_blob(self, sharing, services):
        record = sharing.upload("alice@x.com", b"data", "a.txt")
        with pytest.raises(Forbidden):
            sharing.delete_file(record.storage_key, "bob@x.com")
        assert services.uploads.exists(record.storage_key) is True

    def test_missing_blob_is_logged_not_fatal(self, sharing, services, caplog):
        record = sharing.upload("alice@x.com", b"data", "a.txt")
        services.uploads.resolve(record.storage_key).unlink()

        with caplog.at_level(logging.WARNING):
            sharing.delete_file(record.storage_key, "alice@x.com")

        assert len(services.registry) == 0
        assert "already missing" in caplog.text

    def test_delete_unknown_key(self, sharing):
        with pytest.raises(NotFound):
            sharing.delete_file("nope", "alice@x.com")


class TestClearAll:
    def test_admin_clears_all_blobs(self, sharing, services):
        keys = [
            sharing.upload("alice@x.com", b"1", "a.txt").storage_key,
            sharing.upload("bob@x.com", b"2", "b.txt").storage_key,
        ]
        removed = sharing.clear_all(ADMIN)
        assert [r.storage_key for r in removed] == keys
        assert all(not services.uploads.exists(k) for k in keys)

    def test_clear_tolerates_missing_blobs(self, sharing, services):
        first = sharing.upload("alice@x.com", b"1", "a.txt")
        second = sharing.upload("bob@x.com", b"2", "b.txt")
        services.uploads.delete(first.storage_key)

        assert len(sharing.clear_all(ADMIN)) == 2
        assert services.uploads.exists(second.storage_key) is False

    def test_non_admin_keeps_everything(self, sharing, services):
        record = sharing.upload("alice@x.com", b"1", "a.txt")
        with pytest.raises(Forbidden):
            sharing.clear_all("alice@x.com")
        assert len(services.registry) == 1
        assert services.uploads.exists(record.storage_key) is True


class TestOpenUpload:
    def test_owner_opens_private(self, sharing):
        record = sharing.upload("alice@x.com", b"data", "a.txt")
        found, path = sharing.open_upload(record.storage_key, "alice@x.com")
        assert found is record
        assert path.read_bytes() == b"data"

    def test_private_hidden_from_others(self, sharing):
        record = sharing.upload("alice@x.com", b"data", "a.txt")
        with pytest.raises(Forbidden):
            sharing.open_upload(record.storage_key, "bob@x.com")

    def test_unregistered_blob(self, sharing, services):
        (services.uploads.root / "stray.bin").write_bytes(b"orphan")
        with pytest.raises(NotFound):
            sharing.open_upload("stray.bin", "alice@x.com")
