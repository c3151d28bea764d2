"""Tests for installation state detection."""

import pytest

from wbvm.installs import InstallationTracker


@pytest.fixture
def tracker(settings, root):
    return InstallationTracker(root, settings.executable_name, reserved=("bin", ".staging"))


def test_installed_iff_executable_present(tracker, root, settings):
    version_dir = root / "2.0.0"
    version_dir.mkdir()
    assert not tracker.is_installed("2.0.0")

    executable = version_dir / settings.executable_name
    executable.write_text("binary")
    assert tracker.is_installed("2.0.0")

    executable.unlink()
    assert not tracker.is_installed("2.0.0")


def test_executable_as_directory_is_not_installed(tracker, root, settings):
    (root / "2.0.0" / settings.executable_name).mkdir(parents=True)
    assert not tracker.is_installed("2.0.0")


def test_executable_must_be_direct_child(tracker, root, settings):
    nested = root / "2.0.0" / "nested"
    nested.mkdir(parents=True)
    (nested / settings.executable_name).write_text("binary")
    assert not tracker.is_installed("2.0.0")


def test_missing_version(tracker):
    assert not tracker.is_installed("9.9.9")


@pytest.mark.parametrize("version", ["", ".", "..", "bin", ".staging", "a/b", "..\\x"])
def test_invalid_names_never_installed(tracker, version):
    assert not tracker.is_installed(version)
    assert not tracker.is_valid_version(version)


def test_list_installed(tracker, root, install_version):
    install_version("1.0.0")
    install_version("2.0.0")
    (root / "3.0.0").mkdir()
    (root / "releases.json").write_text("[]")
    (root / "bin").symlink_to(root / "2.0.0", target_is_directory=True)

    assert tracker.list_installed() == {"1.0.0", "2.0.0"}


def test_list_installed_without_root(settings):
    tracker = InstallationTracker(settings.root_dir / "missing", settings.executable_name)
    assert tracker.list_installed() == set()


@pytest.mark.parametrize("version", ["1.0.0", "2.0.0-rc.1", "10.2.3"])
def test_valid_version_names(tracker, version):
    assert tracker.is_valid_version(version)
