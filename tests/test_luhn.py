import pytest

from katas.luhn import is_valid


@pytest.mark.parametrize(
    "code, expected",
    [
        ("1", False),
        ("0", False),
        ("059", True),
        ("59", True),
        ("055 444 285", True),
        ("055 444 286", False),
        ("8273 1232 7352 0569", False),
        ("095 245 88", True),
        ("055a 444 285", False),
        ("055-444-285", False),
        ("055£ 444$ 285", False),
        (" 0", False),
        ("0000 0", True),
        ("091", True),
        (":9", False),
        ("059a", False),
        ("055# 444$ 285", False),
        ("055b 444 285", False),
        ("234 567 891 234", True),
        ("59%59", False),
        ("1249①", False),
    ],
)
def test_is_valid(code, expected):
    assert is_valid(code) is expected