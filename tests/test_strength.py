import pytest

from secutil import CharClass, check_password, classify_char, validate_password


@pytest.mark.parametrize(
    "password, expected",
    [
        ("Passw0rd1!", True),  # upper, lower, symbol, number
        ("passw0rd!", False),
        ("123456789@", False),
        ("PASSWORD123!", False),
        ("Aa1!1224", True),  # exactly the minimum length
        ("password", False),  # no uppercase
        ("PASSWORD", False),  # no lowercase
        ("1234567890", False),  # no symbol
        ("qwertyuiop", False),  # no number
        ("!@#$%^&*()", False),  # no letter
        ("short", False),  # below minimum length
        ("", False),
        ("Aa1!123", False),  # one short
    ],
)
def test_validate_password(password, expected):
    assert validate_password(password, 8) is expected


@pytest.mark.parametrize(
    "password",
    ["Passw0rd 1!", "Passw0rd1!\n", "\tPassw0rd1!", "Passw0rd1!\x00", "Pass w0rd1!"],
)
def test_whitespace_and_control_characters_reject(password):
    assert validate_password(password, 1) is False


def test_disallowed_character_rejects_even_when_everything_else_passes():
    report = check_password("Passw0rd 1!", 8)
    assert report.ok is False
    assert report.disallowed == " "
    assert report.missing() == ["disallowed character ' '"]


def test_scan_stops_at_first_disallowed_character():
    report = check_password("Ab1! xyz", 1)
    assert report.classified_count == 4
    assert report.disallowed == " "


def test_report_lists_missing_requirements():
    report = check_password("short", 8)
    assert report.has_lower
    assert report.classified_count == 5
    assert report.missing() == ["uppercase letter", "digit", "symbol", "at least 8 characters"]


def test_report_ok_has_no_missing():
    report = check_password("Passw0rd1!", 8)
    assert report.ok
    assert report.missing() == []
    assert report.classified_count == 10


def test_default_minimum_length_is_eight():
    assert validate_password("Aa1!1224")
    assert not validate_password("Aa1!122")


@pytest.mark.parametrize(
    "ch, expected",
    [
        ("A", CharClass.UPPER),
        ("É", CharClass.UPPER),
        ("z", CharClass.LOWER),
        ("ß", CharClass.LOWER),
        ("7", CharClass.DIGIT),
        ("٣", CharClass.DIGIT),  # Arabic-Indic three
        ("½", CharClass.DIGIT),  # vulgar fraction one half
        ("!", CharClass.SYMBOL),
        ("€", CharClass.SYMBOL),
        ("+", CharClass.SYMBOL),
        (" ", CharClass.OTHER),
        ("\x07", CharClass.OTHER),
        ("中", CharClass.OTHER),  # CJK ideograph, no case
        ("\u01c5", CharClass.OTHER),  # titlecase letter
        ("\u0301", CharClass.OTHER),  # combining acute accent
    ],
)
def test_classify_char(ch, expected):
    assert classify_char(ch) is expected


def test_unicode_password_accepted():
    assert validate_password("Été٣€abcd", 8)


def test_long_password_count_does_not_wrap():
    password = "Aa1!" * 70
    report = check_password(password, 280)
    assert report.classified_count == 280
    assert report.ok
    assert not validate_password(password, 281)
