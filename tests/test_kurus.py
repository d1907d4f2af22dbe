from decimal import Decimal

import pytest

from arabulucu.smm.kurus import (
    GecersizTutarHatasi,
    kurus_format,
    kurus_normalize,
    kurus_to_tl,
    tl_format,
)


def test_normalize_strips_separators():
    assert kurus_normalize("1.234,56") == "123456"
    assert kurus_normalize("₺ 1.000,00 TL") == "100000"


def test_normalize_without_digits_is_empty():
    assert kurus_normalize("abc") == ""
    assert kurus_normalize("") == ""
    assert kurus_normalize(None) == ""


def test_normalize_is_idempotent():
    once = kurus_normalize("12.3a4,5")
    assert kurus_normalize(once) == once


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("5", "0,05"),
        ("50", "0,50"),
        ("100", "1,00"),
        ("100000", "1.000,00"),
        ("123456789", "1.234.567,89"),
        ("00012", "0,12"),
        ("0", "0,00"),
    ],
)
def test_format(raw, expected):
    assert kurus_format(raw) == expected


def test_to_tl():
    assert kurus_to_tl("100000") == Decimal("1000")
    assert kurus_to_tl("5") == Decimal("0.05")
    assert kurus_to_tl("1.234,56") == Decimal("1234.56")


def test_to_tl_rejects_missing_digits():
    with pytest.raises(GecersizTutarHatasi):
        kurus_to_tl("")
    with pytest.raises(GecersizTutarHatasi):
        kurus_to_tl("abc")


def test_format_normalize_keeps_value():
    # yazarken oluşan baştaki sıfırlar değeri değiştirmez
    for raw in ["7", "0042", "999999", "100000000001"]:
        assert int(kurus_normalize(kurus_format(raw))) == int(raw)
        assert kurus_to_tl(kurus_normalize(kurus_format(raw))) == kurus_to_tl(raw)


def test_tl_format():
    assert tl_format(None) == "-"
    assert tl_format(Decimal("1234.5")) == "₺1.234,50"
    assert tl_format(Decimal("0.05")) == "₺0,05"
    assert tl_format(Decimal("-10")) == "-₺10,00"


def test_to_tl_keeps_long_inputs_exact():
    # 28 haneden uzun: bölme yok, yuvarlanmaz
    assert kurus_to_tl("1" * 30) == Decimal("1" * 28 + ".11")
    assert kurus_to_tl("9" * 5000) == Decimal("9" * 4998 + ".99")


def test_format_normalize_keeps_long_values():
    for raw in ["1" * 30, "1234567890" * 3 + "5", "9" * 5000]:
        assert kurus_normalize(kurus_format(raw)) == raw
        assert kurus_to_tl(kurus_normalize(kurus_format(raw))) == kurus_to_tl(raw)
