import pytest

from msgkit.errors import (
    InvalidCountryCodeError,
    InvalidEncodingError,
    InvalidLanguageCodeError,
    ToolNotFoundError,
    UsageError,
)
from msgkit.plugins.utils.options import (
    default_tool_name,
    parse_language,
    resolve_encoding,
    resolve_options,
    resolve_tool,
)
from msgkit.schemas import LanguageRequest, RawMsgInitOptions

# ================================================================
# Tool defaults
# ================================================================


@pytest.mark.parametrize("tool", ["xgettext", "msginit"])
def test_default_tool_name_windows(tool):
    assert default_tool_name(tool, "win32") == f"{tool}.exe"


@pytest.mark.parametrize("platform", ["linux", "darwin", "cygwin"])
def test_default_tool_name_other_platforms(platform):
    assert default_tool_name("msginit", platform) == "msginit"


def test_resolve_options_defaults(tools_available):
    opts = resolve_options(RawMsgInitOptions(), ["fr"], platform="win32")

    assert opts.xgettext == "xgettext.exe"
    assert opts.msginit == "msginit.exe"
    assert opts.encoding == "UTF-8"
    assert opts.pot_file is None


def test_resolve_options_keeps_explicit_values(tools_available, tmp_path):
    raw = RawMsgInitOptions(
        xgettext="/opt/gettext/bin/xgettext",
        msginit="/opt/gettext/bin/msginit",
        encoding="ISO-8859-1",
        pot_file=tmp_path / "x.pot",
        copyright_holder="Jane",
        bugs_email="bugs@example.com",
    )
    opts = resolve_options(raw, ["fr", "de"], platform="linux")

    assert opts.xgettext == "/opt/gettext/bin/xgettext"
    assert opts.msginit == "/opt/gettext/bin/msginit"
    assert opts.encoding == "ISO-8859-1"
    assert opts.pot_file == tmp_path / "x.pot"
    assert opts.copyright_holder == "Jane"
    assert opts.bugs_email == "bugs@example.com"
    assert [lang.token for lang in opts.languages] == ["fr", "de"]


def test_resolve_tool_not_found(monkeypatch):
    monkeypatch.setattr(
        "msgkit.plugins.utils.options.can_run", lambda prog: prog != "msginit"
    )

    assert resolve_tool("xgettext", platform="linux") == "xgettext"
    with pytest.raises(ToolNotFoundError) as exc:
        resolve_tool("msginit", platform="linux")

    assert exc.value.tool == "msginit"
    assert "GNU gettext" in str(exc.value)


def test_missing_xgettext_checked_first(monkeypatch):
    monkeypatch.setattr("msgkit.plugins.utils.options.can_run", lambda prog: False)

    with pytest.raises(ToolNotFoundError) as exc:
        resolve_options(RawMsgInitOptions(), [], platform="linux")

    assert exc.value.tool == "xgettext"


# ================================================================
# Encodings
# ================================================================


def test_resolve_encoding_default():
    assert resolve_encoding(None) == "UTF-8"
    assert resolve_encoding("") == "UTF-8"


def test_resolve_encoding_invalid():
    with pytest.raises(InvalidEncodingError) as exc:
        resolve_encoding("klingon-8")

    assert exc.value.encoding == "klingon-8"
    assert "klingon-8" in str(exc.value)


def test_resolve_options_invalid_encoding(tools_available):
    with pytest.raises(InvalidEncodingError):
        resolve_options(RawMsgInitOptions(encoding="klingon-8"), ["fr"])


# ================================================================
# Language arguments
# ================================================================


def test_no_languages_is_usage_error(tools_available):
    with pytest.raises(UsageError):
        resolve_options(RawMsgInitOptions(), [])


@pytest.mark.parametrize(
    "token, expected",
    [
        ("fr", LanguageRequest("fr", "fr")),
        ("pt-BR", LanguageRequest("pt-BR", "pt", "BR")),
        ("de_AT", LanguageRequest("de_AT", "de", "AT")),
        ("ja.EUC-JP", LanguageRequest("ja.EUC-JP", "ja", None, "EUC-JP")),
        ("fr-CA.UTF-8", LanguageRequest("fr-CA.UTF-8", "fr", "CA", "UTF-8")),
    ],
)
def test_parse_language(token, expected):
    assert parse_language(token) == expected


def test_language_request_name_strips_encoding():
    assert parse_language("fr-CA.ISO-8859-1").name == "fr-CA"
    assert parse_language("de").name == "de"


def test_invalid_language_code():
    with pytest.raises(InvalidLanguageCodeError) as exc:
        parse_language("zz")

    assert exc.value.code == "zz"
    assert str(exc.value) == '"zz" is not a valid language code'


def test_invalid_country_code():
    with pytest.raises(InvalidCountryCodeError) as exc:
        parse_language("fr-AA")

    assert exc.value.code == "AA"


def test_invalid_token_encoding():
    with pytest.raises(InvalidEncodingError) as exc:
        parse_language("fr.klingon-8")

    assert exc.value.encoding == "klingon-8"


def test_language_checked_before_country():
    with pytest.raises(InvalidLanguageCodeError):
        parse_language("zz-AA")


def test_first_invalid_argument_wins(tools_available):
    with pytest.raises(InvalidCountryCodeError) as exc:
        resolve_options(RawMsgInitOptions(), ["fr", "de-AA", "zz"])

    assert exc.value.code == "AA"
