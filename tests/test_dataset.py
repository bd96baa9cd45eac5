import json
import tempfile
import unittest
from pathlib import Path

from sqlite_utils import Database

from search_box.dataset import filter_records, import_records, load_records, sample_records
from search_box.errors import DatasetError
from search_box.models import Record


class DatasetTests(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.tmp = Path(self._tmp.name)

    def tearDown(self):
        self._tmp.cleanup()

    def _write_json(self, name: str, payload) -> Path:
        p = self.tmp / name
        p.write_text(json.dumps(payload), encoding="utf-8")
        return p

    def test_builtin_dataset(self):
        records = load_records(None)
        self.assertEqual(records, sample_records())
        self.assertEqual(len({r.id for r in records}), len(records))

    def test_json_dataset(self):
        p = self._write_json("data.json", [{"id": 1, "name": "Alpha"}, {"id": "b", "name": "Beta"}])
        self.assertEqual(load_records(p), [Record("1", "Alpha"), Record("b", "Beta")])

    def test_json_errors(self):
        with self.assertRaises(DatasetError):
            load_records(self._write_json("obj.json", {"id": 1}))
        with self.assertRaises(DatasetError):
            load_records(self._write_json("missing.json", [{"id": 1}]))
        with self.assertRaises(DatasetError):
            load_records(self._write_json("dup.json", [{"id": 1, "name": "a"}, {"id": "1", "name": "b"}]))
        bad = self.tmp / "bad.json"
        bad.write_text("[{", encoding="utf-8")
        with self.assertRaises(DatasetError):
            load_records(bad)

    def test_missing_or_unsupported(self):
        with self.assertRaises(DatasetError):
            load_records(self.tmp / "nope.json")
        txt = self.tmp / "data.txt"
        txt.write_text("x", encoding="utf-8")
        with self.assertRaises(DatasetError):
            load_records(txt)

    def test_sqlite_round_trip_keeps_order(self):
        db_path = self.tmp / "records.db"
        src = [Record("z", "Zucchini"), Record("a", "Artichoke")]
        self.assertEqual(import_records(src, db_path), 2)
        self.assertEqual(load_records(db_path), src)

        # upsert by id does not duplicate
        import_records([Record("z", "Zucchini 2")], db_path)
        db = Database(db_path)
        self.assertEqual(db["records"].count, 2)
        db.conn.close()

    def test_sqlite_missing_table(self):
        db_path = self.tmp / "empty.sqlite"
        db = Database(db_path)
        db["other"].insert({"x": 1})
        db.conn.close()
        with self.assertRaises(DatasetError):
            load_records(db_path)

    def test_sqlite_table_without_name_column(self):
        db_path = self.tmp / "titles.db"
        db = Database(db_path)
        db["records"].insert({"id": "1", "title": "Apple"}, pk="id")
        db.conn.close()
        with self.assertRaises(DatasetError):
            load_records(db_path)

    def test_text_file_with_db_extension(self):
        p = self.tmp / "fake.db"
        p.write_text("just some notes, not sqlite at all\n" * 20, encoding="utf-8")
        with self.assertRaises(DatasetError):
            load_records(p)

    def test_sqlite_null_name(self):
        db_path = self.tmp / "nulls.db"
        db = Database(db_path)
        db["records"].create({"id": str, "name": str}, pk="id")
        db["records"].insert({"id": "1", "name": None})
        db.conn.close()
        with self.assertRaises(DatasetError):
            load_records(db_path)

    def test_json_invalid_utf8(self):
        p = self.tmp / "latin.json"
        p.write_bytes(b"[\xff\xfe]")
        with self.assertRaises(DatasetError):
            load_records(p)

    def test_json_null_fields(self):
        with self.assertRaises(DatasetError):
            load_records(self._write_json("null_name.json", [{"id": 1, "name": None}]))
        with self.assertRaises(DatasetError):
            load_records(self._write_json("null_id.json", [{"id": None, "name": "Apple"}]))

    def test_filter_preserves_order(self):
        records = [Record("1", "Pear"), Record("2", "Apple"), Record("3", "Peach")]
        self.assertEqual([r.id for r in filter_records(records, "pe")], ["1", "3"])
        self.assertEqual(filter_records(records, "xyz"), [])


if __name__ == "__main__":
    unittest.main()
