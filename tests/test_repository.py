"""Unit tests for ProviderDirectory - recipient lookups against the marketplace tables."""

from __future__ import annotations

import pytest
from sqlalchemy.exc import OperationalError

from app.domain.notifications.repository import ProviderDirectory
from app.models import Doctor, MedicalStore, Nurse, Profile


@pytest.mark.unit
class TestProviderDirectory:
    """Unit tests for ProviderDirectory."""

    @pytest.mark.parametrize(
        "kind, provider_id, expected",
        [
            ("doctor", "doc-1", "dr.ayesha@example.com"),
            ("doctor", "doc-2", None),
            ("nurse", "nurse-1", "sara@example.com"),
            ("pharmacy", "store-1", "orders@citypharmacy.example.com"),
            ("doctor", "missing", None),
            ("doctor", None, None),
            ("doctor", "", None),
            ("lab", "doc-1", None),
        ],
    )
    def test_get_provider_email(self, db_session, kind, provider_id, expected) -> None:
        assert ProviderDirectory(db_session).get_provider_email(kind, provider_id) == expected

    def test_emergency_nurses_are_approved_available_with_email(self, db_session) -> None:
        emails = ProviderDirectory(db_session).get_emergency_nurse_emails()

        assert emails == ["sara@example.com", "hina@example.com"]

    def test_get_user_email(self, db_session) -> None:
        directory = ProviderDirectory(db_session)

        assert directory.get_user_email("user-1") == "usman@example.com"
        assert directory.get_user_email("nobody") is None
        assert directory.get_user_email(None) is None

    def test_query_errors_mean_no_recipient(self, db_session, monkeypatch) -> None:
        def broken_query(*args, **kwargs):
            raise OperationalError("SELECT", {}, Exception("database is locked"))

        monkeypatch.setattr(db_session, "query", broken_query)
        directory = ProviderDirectory(db_session)

        assert directory.get_provider_email("doctor", "doc-1") is None
        assert directory.get_emergency_nurse_emails() == []
        with pytest.raises(OperationalError):
            directory.get_user_email("user-1")


@pytest.mark.unit
class TestDirectoryTables:
    """Only the columns the lookups read are mapped."""

    @pytest.mark.parametrize(
        "model, columns",
        [
            (Doctor, {"id", "full_name", "email", "status"}),
            (Nurse, {"id", "full_name", "email", "status", "emergency_available"}),
            (MedicalStore, {"id", "name", "email", "status"}),
            (Profile, {"user_id", "full_name", "email"}),
        ],
    )
    def test_mapped_columns(self, model, columns) -> None:
        assert set(model.__table__.columns.keys()) == columns
