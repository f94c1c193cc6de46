import dataclasses

import pytest

from workspace_paths.models import AppSettings, ResolvedConfig, WorkspaceRoot


def test_resolved_config_defaults():
    config = ResolvedConfig()
    assert config.to_dict() == {
        "root": None,
        "paths": [],
        "packageEntry": "main:src",
        "development": True,
        "production": True,
    }


def test_resolved_config_is_frozen():
    with pytest.raises(dataclasses.FrozenInstanceError):
        ResolvedConfig().root = "/repo"  # type: ignore[misc]


def test_defaults_do_not_share_paths():
    assert ResolvedConfig().paths is not ResolvedConfig().paths


def test_with_settings_only_overrides_present_keys():
    config = ResolvedConfig().with_settings(AppSettings(production=False))
    assert config.production is False
    assert config.development is True
    assert config.package_entry == "main:src"


def test_app_settings_from_dict():
    settings = AppSettings.from_dict({"development": "", "package-entry": "module:lib"})
    assert settings == AppSettings(development=False, production=None, package_entry="module:lib")


def test_workspace_root_requires_manifest_in_root(tmp_path):
    with pytest.raises(ValueError):
        WorkspaceRoot(root=tmp_path, manifest=tmp_path / "sub" / "package.json", declaration=[])
