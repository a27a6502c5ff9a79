"""Tests for shared/repository.py."""

from datetime import datetime, timezone, timedelta
from unittest.mock import MagicMock

from shared.repository import BaseRepository, to_db_value


class ThingRepository(BaseRepository[dict]):
    table_name = "things"


class TestToDbValue:
    def test_aware_datetime(self):
        value = datetime(2020, 5, 9, 7, 36, 14, tzinfo=timezone.utc)
        assert to_db_value(value) == "2020-05-09T07:36:14+00:00"

    def test_naive_datetime_is_utc(self):
        assert to_db_value(datetime(2020, 5, 9, 7, 36, 14)) == "2020-05-09T07:36:14+00:00"

    def test_keeps_offset(self):
        value = datetime(2020, 5, 9, 14, 36, 14, tzinfo=timezone(timedelta(hours=7)))
        assert to_db_value(value) == "2020-05-09T14:36:14+07:00"

    def test_other_values_pass_through(self):
        assert to_db_value("x") == "x"
        assert to_db_value(None) is None
        assert to_db_value(3) == 3


class TestBaseRepository:
    def test_init_stores_db_client(self):
        """Should store the database client in _db attribute."""
        mock_db = MagicMock()
        repo = ThingRepository(mock_db)
        assert repo._db is mock_db

    def test_select_where(self):
        mock_db = MagicMock()
        chain = mock_db.table.return_value.select.return_value.eq.return_value.limit.return_value
        chain.execute.return_value.data = [{"id": 1}]

        rows = ThingRepository(mock_db)._select_where("id", 1)

        assert rows == [{"id": 1}]
        mock_db.table.assert_called_once_with("things")
        mock_db.table.return_value.select.assert_called_once_with("*")
        mock_db.table.return_value.select.return_value.eq.return_value.limit.assert_called_once_with(1)

    def test_select_where_without_rows(self):
        mock_db = MagicMock()
        chain = mock_db.table.return_value.select.return_value.eq.return_value.limit.return_value
        chain.execute.return_value.data = None

        assert ThingRepository(mock_db)._select_where("id", 1) == []

    def test_insert_returns_stored_row(self):
        mock_db = MagicMock()
        mock_db.table.return_value.insert.return_value.execute.return_value.data = [{"id": 9}]
        created_at = datetime(2020, 5, 9, tzinfo=timezone.utc)

        row = ThingRepository(mock_db)._insert({"created_at": created_at})

        assert row == {"id": 9}
        mock_db.table.return_value.insert.assert_called_once_with(
            {"created_at": "2020-05-09T00:00:00+00:00"}
        )

    def test_update_where_returns_row_count(self):
        mock_db = MagicMock()
        mock_db.table.return_value.update.return_value.eq.return_value.execute.return_value.data = [
            {"id": 1},
        ]

        count = ThingRepository(mock_db)._update_where("id", 1, {"name": "x"})

        assert count == 1
        mock_db.table.return_value.update.assert_called_once_with({"name": "x"})
