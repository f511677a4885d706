from __future__ import annotations

from pathlib import Path

from archzoom.config import Config, read_config


def test_defaults_without_config_files(tmp_path: Path) -> None:
    assert read_config(tmp_path) == Config()


def test_reads_archzoom_toml(tmp_path: Path) -> None:
    (tmp_path / ".archzoom.toml").write_text(
        "[archzoom]\nprune_empty_packages = true\nindent = 2\n", encoding="utf-8"
    )

    assert read_config(tmp_path) == Config(prune_empty_packages=True, indent=2)


def test_falls_back_to_pyproject(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text(
        '[project]\nname = "demo"\n\n[tool.archzoom]\nindent = 4\n', encoding="utf-8"
    )

    assert read_config(tmp_path) == Config(indent=4)


def test_archzoom_toml_wins_over_pyproject(tmp_path: Path) -> None:
    (tmp_path / ".archzoom.toml").write_text(
        "[archzoom]\nprune_empty_packages = true\n", encoding="utf-8"
    )
    (tmp_path / "pyproject.toml").write_text(
        "[tool.archzoom]\nindent = 4\n", encoding="utf-8"
    )

    assert read_config(tmp_path) == Config(prune_empty_packages=True)


def test_invalid_values_are_ignored(tmp_path: Path) -> None:
    (tmp_path / ".archzoom.toml").write_text(
        '[archzoom]\nprune_empty_packages = "yes"\nindent = -1\n', encoding="utf-8"
    )

    assert read_config(tmp_path) == Config()


def test_unparseable_config_falls_back_to_defaults(tmp_path: Path) -> None:
    (tmp_path / ".archzoom.toml").write_text("[archzoom\n", encoding="utf-8")

    assert read_config(tmp_path) == Config()
