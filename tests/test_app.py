"""
App-level tests: storage failures are reported on the page instead of crashing.
"""

from pathlib import Path

from streamlit.testing.v1 import AppTest

APP_PATH = str(Path(__file__).resolve().parents[1] / "app.py")


def _run_app(monkeypatch, data_dir: Path) -> AppTest:
    monkeypatch.setenv("FLEET_DATA_DIR", str(data_dir))
    monkeypatch.setenv("FLEET_SEED_ON_START", "true")
    app = AppTest.from_file(APP_PATH, default_timeout=30)
    return app.run()


class TestStorageFailures:
    """Test the app turns store errors into an error message."""

    def test_corrupt_login_record(self, monkeypatch, tmp_path):
        """Test an unreadable user record shows an error, not a traceback."""
        data_dir = tmp_path / "corrupt_user"
        data_dir.mkdir()
        (data_dir / "user.json").write_text("{bad", encoding="utf-8")

        app = _run_app(monkeypatch, data_dir)

        assert not app.exception
        assert "could not be read or written" in app.error[0].value

    def test_unwritable_data_dir(self, monkeypatch, tmp_path):
        """Test a seeding failure shows an error, not a traceback."""
        blocker = tmp_path / "blocker"
        blocker.write_text("a file, not a directory", encoding="utf-8")

        app = _run_app(monkeypatch, blocker / "store")

        assert not app.exception
        assert "could not be read or written" in app.error[0].value

    def test_healthy_store_shows_login(self, monkeypatch, tmp_path):
        """Test a fresh directory is seeded and the login form is shown."""
        app = _run_app(monkeypatch, tmp_path / "fresh")

        assert not app.exception
        assert not app.error
        assert (tmp_path / "fresh" / "ships.json").exists()
