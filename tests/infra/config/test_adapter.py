from pathlib import Path

import pytest

from msgkit.errors import ConfigError
from msgkit.infra.config.adapter import ConfigAdapter
from msgkit.schemas import DEFAULT_KEYWORDS


@pytest.fixture
def sample_config(tmp_path) -> dict:
    """Construct a representative configuration mapping for tests."""
    return {
        "name": "My-App",
        "version": "0.42",
        "root": tmp_path,
        "authors": ["Jane Doe <jane@example.com>"],
        "plugins": {
            "LocaleTextDomain": {
                "textdomain": "my-app",
                "lang_dir": "share/po",
                "lang_file_suffix": ".pot",
                "source_dirs": ["lib", "bin"],
                "keywords": "_ tr:1",
            },
        },
    }


def test_get_dist_config(sample_config, tmp_path):
    dist = ConfigAdapter(sample_config).get_dist_config()

    assert dist.name == "My-App"
    assert dist.version == "0.42"
    assert dist.root == tmp_path
    assert dist.authors == ("Jane Doe <jane@example.com>",)
    assert dist.copyright_holder is None
    assert "LocaleTextDomain" in dist.plugins


def test_user_config_fills_gaps(sample_config):
    user = {"copyright_holder": "Jane Doe", "version": "9.9"}
    dist = ConfigAdapter(sample_config, user).get_dist_config()

    assert dist.copyright_holder == "Jane Doe"
    # distribution values win
    assert dist.version == "0.42"


def test_single_author_string(tmp_path):
    cfg = {"name": "a", "root": tmp_path, "authors": "Jane <jane@example.com>"}
    dist = ConfigAdapter(cfg).get_dist_config()
    assert dist.authors == ("Jane <jane@example.com>",)


def test_missing_name_raises(tmp_path):
    with pytest.raises(ConfigError):
        ConfigAdapter({"root": tmp_path}).get_dist_config()


def test_plugins_must_be_table(tmp_path):
    with pytest.raises(ConfigError):
        ConfigAdapter({"name": "a", "plugins": ["LocaleTextDomain"]}).get_dist_config()


def test_locale_textdomain_config(sample_config, tmp_path):
    cfg = ConfigAdapter(sample_config).get_locale_textdomain_config()

    assert cfg.textdomain == "my-app"
    assert cfg.lang_dir == tmp_path / "share" / "po"
    assert cfg.lang_file_suffix == "pot"
    assert cfg.source_dirs == (tmp_path / "lib", tmp_path / "bin")
    assert cfg.keywords == ("_", "tr:1")


def test_locale_textdomain_defaults(tmp_path):
    adapter = ConfigAdapter(
        {"name": "My-App", "root": tmp_path, "plugins": {"LocaleTextDomain": {}}}
    )
    cfg = adapter.get_locale_textdomain_config()

    assert cfg.textdomain == "My-App"
    assert cfg.lang_dir == tmp_path / "po"
    assert cfg.lang_file_suffix == "po"
    assert cfg.source_dirs == (tmp_path / "src",)
    assert cfg.keywords == DEFAULT_KEYWORDS
    assert isinstance(cfg.lang_dir, Path)
