"""Tests for the ownership / visibility rules."""

from sharebox.models.file_record import FileRecord
from sharebox.services.access_policy import can_modify, can_view, is_admin


def _record(is_public: bool = False) -> FileRecord:
    return FileRecord(
        storage_key="1-abc.txt",
        original_name="a.txt",
        owner="alice@x.com",
        mime_type="text/plain",
        is_public=is_public,
    )


class TestCanView:
    def test_owner_sees_private(self):
        assert can_view(_record(), "alice@x.com") is True

    def test_other_cannot_see_private(self):
        assert can_view(_record(), "bob@x.com") is False

    def test_anyone_sees_public(self):
        assert can_view(_record(is_public=True), "bob@x.com") is True
        assert can_view(_record(is_public=True), None) is True

    def test_anonymous_cannot_see_private(self):
        assert can_view(_record(), None) is False


class TestCanModify:
    def test_owner_only(self):
        assert can_modify(_record(), "alice@x.com") is True
        assert can_modify(_record(is_public=True), "bob@x.com") is False

    def test_email_match_is_case_sensitive(self):
        assert can_modify(_record(), "Alice@x.com") is False


class TestIsAdmin:
    def test_exact_match(self):
        assert is_admin("root@x.com", "root@x.com") is True

    def test_other_email(self):
        assert is_admin("alice@x.com", "root@x.com") is False

    def test_none(self):
        assert is_admin(None, "root@x.com") is False
