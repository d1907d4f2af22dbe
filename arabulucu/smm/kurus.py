from decimal import Decimal


class GecersizTutarHatasi(ValueError):
    """Ücret girişi hesaplamaya uygun değil (boş, sayısal değil, pozitif değil)."""


def kurus_normalize(text: str) -> str:
    """
    Ekrandaki metinden ham kuruş string'i üretir.
    - "1.234,56" -> "123456"
    - "₺ 12,5"   -> "125"
    - "" / None / "abc" -> ""
    Rakam dışındaki her şey atılır, kalan rakamlar doğrudan kuruştur.
    """
    if text is None:
        return ""
    return "".join(ch for ch in str(text) if ch in "0123456789")


def kurus_format(raw: str) -> str:
    """
    Ham kuruş -> TR gösterim:
    - "5"         -> "0,05"
    - "100000"    -> "1.000,00"
    - "123456789" -> "1.234.567,89"
    Boş değer için çağıran taraf boş alan gösterir, burada özel durum yok.
    """
    digits = raw.rjust(3, "0")
    lira, kurus = digits[:-2], digits[-2:]
    lira = lira.lstrip("0") or "0"

    gruplar = []
    while len(lira) > 3:
        gruplar.insert(0, lira[-3:])
        lira = lira[:-3]
    gruplar.insert(0, lira)

    return ".".join(gruplar) + "," + kurus


def kurus_to_tl(raw: str) -> Decimal:
    """
    "100000" -> Decimal("1000.00")
    Rakam yoksa GecersizTutarHatasi; sessizce 0 dönmez.
    """
    digits = kurus_normalize(raw)
    if digits == "":
        raise GecersizTutarHatasi("Lütfen arabuluculuk ücreti için geçerli bir sayısal değer giriniz.")
    # int() yerine string: uzunluk sınırı yok, 28 hane hassasiyetinde yuvarlanmaz
    digits = digits.rjust(3, "0")
    return Decimal(f"{digits[:-2]}.{digits[-2:]}")


def tl_format(amount) -> str:
    # tablo hücresi: None -> "-", 1234.5 -> "₺1.234,50"
    if amount is None:
        return "-"
    kurus = (Decimal(amount) * 100).quantize(Decimal("1"))
    isaret = "-" if kurus < 0 else ""
    return f"{isaret}₺{kurus_format(str(abs(kurus)))}"
