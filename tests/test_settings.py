"""
Tests for YAML settings loading.
"""
from pathlib import Path

import pytest

from blurify import (
    BlurOptions,
    ConfigurationError,
    FilterKind,
    InvalidFilter,
    PaddingPolicy,
    load_options,
    load_settings,
)

REPO_SETTINGS = Path(__file__).resolve().parent.parent / "settings.yaml"


def write(tmp_path: Path, text: str) -> str:
    path = tmp_path / "settings.yaml"
    path.write_text(text, encoding="utf-8")
    return str(path)


def test_load_options(tmp_path):
    path = write(tmp_path, """
blur:
  kernel_size: 7
  filter: moving_avg
  padding: edge_clamp
  preserve_alpha: true
  workers: 2
""")
    opts = load_options(path)
    assert opts.kernel_size == 7
    assert opts.filter is FilterKind.MOVING_AVERAGE
    assert opts.padding is PaddingPolicy.EDGE_CLAMP
    assert opts.preserve_alpha is True
    assert opts.workers == 2
    assert opts.sigma == 1.0


def test_missing_section_uses_defaults(tmp_path):
    path = write(tmp_path, "other: 1\n")
    assert load_options(path) == BlurOptions()


def test_empty_section_uses_defaults():
    assert BlurOptions.from_settings({"blur": None}) == BlurOptions()


def test_shipped_settings_file():
    opts = load_options(str(REPO_SETTINGS))
    assert opts.kernel_size == 5
    assert opts.filter is FilterKind.GAUSSIAN


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_settings(str(tmp_path / "nope.yaml"))


def test_top_level_must_be_mapping(tmp_path):
    path = write(tmp_path, "- 1\n- 2\n")
    with pytest.raises(ConfigurationError):
        load_settings(path)


def test_invalid_yaml(tmp_path):
    path = write(tmp_path, "blur: [unclosed\n")
    with pytest.raises(ConfigurationError):
        load_settings(path)


def test_unknown_filter(tmp_path):
    path = write(tmp_path, "blur:\n  filter: sharpen\n")
    with pytest.raises(InvalidFilter):
        load_options(path)


@pytest.mark.parametrize("section", [
    {"kernel_size": "abc"},
    {"sigma": "wide"},
    {"workers": None},
])
def test_malformed_values(section):
    with pytest.raises(ConfigurationError):
        BlurOptions.from_settings({"blur": section})


def test_section_must_be_mapping():
    with pytest.raises(ConfigurationError):
        BlurOptions.from_settings({"blur": [3, 5]})
