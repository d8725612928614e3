import pytest

from msgkit.libs.locale import is_country_code, is_encoding, is_language_code


@pytest.mark.parametrize("code", ["fr", "de", "pt", "ja", "FR", "fil"])
def test_known_language_codes(code):
    assert is_language_code(code)


@pytest.mark.parametrize(
    "code",
    ["zz", "", "f", "english", "und", "mul", "zxx", "mis"],
)
def test_unknown_language_codes(code):
    assert not is_language_code(code)


@pytest.mark.parametrize("code", ["FR", "BR", "us", "At"])
def test_known_country_codes(code):
    assert is_country_code(code)


@pytest.mark.parametrize(
    "code",
    ["AA", "", "USA", "001", "ZZ", "EU", "EZ", "UN", "QO", "XA", "XB"],
)
def test_unknown_country_codes(code):
    assert not is_country_code(code)


@pytest.mark.parametrize("name", ["UTF-8", "utf8", "ISO-8859-1", "EUC-JP", "cp1252"])
def test_known_encodings(name):
    assert is_encoding(name)


@pytest.mark.parametrize("name", ["", "no-such-encoding", "UTF-99"])
def test_unknown_encodings(name):
    assert not is_encoding(name)
