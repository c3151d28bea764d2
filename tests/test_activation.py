"""Tests for the default alias."""

import pytest

from wbvm.errors import FilesystemFailed, VersionNotInstalled
from wbvm.installs import ActivationManager, InstallationTracker


@pytest.fixture
def activation(settings, root):
    tracker = InstallationTracker(root, settings.executable_name, reserved=("bin", ".staging"))
    return ActivationManager(settings.alias_path, tracker)


def test_set_then_get(activation, install_version, settings):
    version_dir = install_version("2.0.0")
    activation.set_default("2.0.0")

    assert activation.get_default() == "2.0.0"
    assert settings.alias_path.is_symlink()
    assert settings.alias_path.resolve() == version_dir.resolve()


def test_switch_default(activation, install_version):
    install_version("1.0.0")
    install_version("2.0.0")
    activation.set_default("1.0.0")
    activation.set_default("2.0.0")
    assert activation.get_default() == "2.0.0"


def test_not_installed_leaves_alias_untouched(activation, install_version, settings, root):
    install_version("1.0.0")
    activation.set_default("1.0.0")
    (root / "2.0.0").mkdir()

    with pytest.raises(VersionNotInstalled) as exc_info:
        activation.set_default("2.0.0")

    assert exc_info.value.version == "2.0.0"
    assert activation.get_default() == "1.0.0"


def test_not_installed_without_prior_alias(activation, settings):
    with pytest.raises(VersionNotInstalled):
        activation.set_default("1.0.0")
    assert not settings.alias_path.is_symlink()


def test_absent_alias(activation):
    assert activation.get_default() is None


def test_stale_alias(activation, install_version, settings):
    version_dir = install_version("1.0.0")
    activation.set_default("1.0.0")
    (version_dir / settings.executable_name).unlink()
    assert activation.get_default() is None


def test_alias_outside_root(activation, settings, tmp_path):
    elsewhere = tmp_path / "elsewhere" / "1.0.0"
    elsewhere.mkdir(parents=True)
    (elsewhere / settings.executable_name).write_text("binary")
    settings.alias_path.symlink_to(elsewhere, target_is_directory=True)
    assert activation.get_default() is None


def test_refuses_to_replace_real_directory(activation, install_version, settings):
    install_version("1.0.0")
    settings.alias_path.mkdir()

    with pytest.raises(FilesystemFailed):
        activation.set_default("1.0.0")
    assert settings.alias_path.is_dir()
