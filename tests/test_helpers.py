"""Unit tests for path helpers: home expansion and parent directory creation."""

from pathlib import Path

import pytest

from urlbot.utils.helpers import SystemDirs, ensure_parent_dir, expand_home


class TestExpandHome:
    """Tests for expand_home."""

    def test_absolute_path_unchanged(self, fake_dirs):
        assert expand_home("/", fake_dirs) == Path("/")
        assert expand_home("/abs/path", fake_dirs) == Path("/abs/path")

    def test_relative_path_unchanged(self, fake_dirs):
        assert expand_home("data/hist.db", fake_dirs) == Path("data/hist.db")

    def test_tilde_mid_path_unchanged(self, fake_dirs):
        assert expand_home("/abc/~def/ghi/", fake_dirs) == Path("/abc/~def/ghi/")
        assert expand_home("abc/~/ghi", fake_dirs) == Path("abc/~/ghi")

    def test_tilde_user_unchanged(self, fake_dirs):
        """Only a bare `~` component is a home-directory marker."""
        assert expand_home("~alice/x", fake_dirs) == Path("~alice/x")

    def test_tilde_prefix_expanded(self, fake_dirs):
        home = fake_dirs.home_dir()
        assert expand_home("~/", fake_dirs) == home
        assert expand_home("~/sub", fake_dirs) == home / "sub"
        assert expand_home("~/ac/df/gi/", fake_dirs) == home / "ac" / "df" / "gi"

    def test_accepts_path_objects(self, fake_dirs):
        assert expand_home(Path("~") / "sub", fake_dirs) == fake_dirs.home_dir() / "sub"

    def test_unresolvable_home_leaves_path(self, homeless_dirs):
        assert expand_home("~/sub", homeless_dirs) == Path("~/sub")

    def test_system_dirs_default(self):
        home = SystemDirs().home_dir()
        if home is None:
            pytest.skip("home directory not resolvable")
        assert expand_home("~/sub") == home / "sub"


class TestEnsureParentDir:
    """Tests for ensure_parent_dir."""

    def test_creates_missing_parent_once(self, tmp_path):
        target = tmp_path / "test" / "test.file"

        assert ensure_parent_dir(target) is True
        assert (tmp_path / "test").is_dir()
        assert ensure_parent_dir(target) is False
        assert ensure_parent_dir(target) is False

    def test_creates_ancestors(self, tmp_path):
        target = tmp_path / "a" / "b" / "c" / "file"

        assert ensure_parent_dir(target) is True
        assert (tmp_path / "a" / "b" / "c").is_dir()

    def test_existing_parent(self, tmp_path):
        assert ensure_parent_dir(tmp_path / "file") is False

    def test_file_in_cwd(self):
        """The working directory always exists, so nothing is created."""
        assert ensure_parent_dir(Path("test.f")) is False
        assert ensure_parent_dir(Path("./test.f")) is False

    def test_does_not_create_the_file(self, tmp_path):
        target = tmp_path / "dir" / "file"
        ensure_parent_dir(target)
        assert not target.exists()

    def test_relative_paths(self, tmp_path, monkeypatch):
        subdir = tmp_path / "subdir"
        subdir.mkdir()
        monkeypatch.chdir(subdir)

        assert ensure_parent_dir(Path("../dir/file")) is True
        assert ensure_parent_dir(Path("../dir/file")) is False
        assert ensure_parent_dir(Path("./dir/file")) is True
        assert ensure_parent_dir(Path("./dir/file")) is False
        assert ensure_parent_dir(Path("dir2/file")) is True
        assert ensure_parent_dir(Path("dir2/file")) is False
        assert ensure_parent_dir(Path("./dir3/file")) is True
        assert ensure_parent_dir(Path("dir3/file2")) is False

        assert (tmp_path / "dir").is_dir()
        assert (subdir / "dir").is_dir()

    def test_logs_creation(self, tmp_path, caplog):
        ensure_parent_dir(tmp_path / "logged" / "file")
        assert "doesn't exist, creating it" in caplog.text

    def test_parent_is_a_file(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("x")

        with pytest.raises(OSError):
            ensure_parent_dir(blocker / "sub" / "file")

    def test_parent_itself_is_a_file(self, tmp_path):
        """A regular file where the directory should be is an error, not "already exists"."""
        blocker = tmp_path / "blocker"
        blocker.write_text("x")

        with pytest.raises(OSError):
            ensure_parent_dir(blocker / "file")

        assert blocker.is_file()


class TestSystemDirs:
    """Tests for the platform directory provider."""

    def test_xdg_config_home(self, monkeypatch, tmp_path):
        monkeypatch.setattr("sys.platform", "linux")
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))

        assert SystemDirs().config_dir() == tmp_path / "xdg"

    def test_linux_fallback(self, monkeypatch, tmp_path):
        monkeypatch.setattr("sys.platform", "linux")
        monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
        monkeypatch.setattr(Path, "home", classmethod(lambda cls: tmp_path))

        assert SystemDirs().config_dir() == tmp_path / ".config"

    def test_windows_appdata(self, monkeypatch, tmp_path):
        monkeypatch.setattr("sys.platform", "win32")
        monkeypatch.setenv("APPDATA", str(tmp_path / "Roaming"))

        assert SystemDirs().config_dir() == tmp_path / "Roaming"
