"""Tests for the migration runner helpers."""

from run_migrations import MIGRATIONS_DIR, Migration, load_migrations, pending_migrations


class TestLoadMigrations:
    def test_ships_table_and_seed_migrations(self):
        names = [m.name for m in load_migrations()]
        assert names == sorted(names)
        assert any("seed_tips" in name for name in names)

    def test_seed_covers_first_three_days(self):
        seed = next(MIGRATIONS_DIR.glob("*seed_tips.sql")).read_text()
        for text in ("tip number one", "tip number two", "tip number three"):
            assert text in seed

    def test_missing_directory(self, tmp_path):
        assert load_migrations(tmp_path / "nope") == []


class TestPendingMigrations:
    def test_skips_applied(self, tmp_path):
        first = tmp_path / "001_a.sql"
        second = tmp_path / "002_b.sql"
        first.write_text("SELECT 1;")
        second.write_text("SELECT 2;")
        migrations = [Migration.from_file(first), Migration.from_file(second)]

        pending = pending_migrations(migrations, {"001_a.sql": migrations[0].checksum})

        assert [m.name for m in pending] == ["002_b.sql"]

    def test_changed_migration_is_not_rerun(self, tmp_path):
        path = tmp_path / "001_a.sql"
        path.write_text("SELECT 1;")
        migration = Migration.from_file(path)

        assert pending_migrations([migration], {"001_a.sql": "different"}) == []
