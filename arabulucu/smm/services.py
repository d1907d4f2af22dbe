from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from enum import Enum
from typing import Optional

from .kurus import GecersizTutarHatasi, kurus_normalize, kurus_to_tl

# Serbest meslek: KDV %20, GVK 94/2-b stopaj %20
KDV_ORANI = Decimal("0.20")
STOPAJ_ORANI = Decimal("0.20")

PERSON_TYPE_TUZEL = "Tüzel Kişi"
PERSON_TYPE_GERCEK = "Gerçek Kişi"


class SMMHesaplamaTuru(Enum):
    KDV_HARIC_STOPAJ_DAHIL = "KDV Hariç, Stopaj Dahil"
    KDV_DAHIL_STOPAJ_DAHIL = "KDV Dahil, Stopaj Dahil"
    KDV_HARIC_STOPAJ_HARIC = "KDV Hariç, Stopaj Hariç"
    KDV_DAHIL_STOPAJ_HARIC = "KDV Dahil, Stopaj Hariç"
    KDV_HARIC_STOPAJ_YOK = "KDV Hariç, Stopaj Yok"
    KDV_DAHIL_STOPAJ_YOK = "KDV Dahil, Stopaj Yok"

    @property
    def label(self) -> str:
        return self.value


VARSAYILAN_HESAPLAMA_TURU = SMMHesaplamaTuru.KDV_DAHIL_STOPAJ_YOK


def smm_hesaplama_turu_secenekleri() -> list[tuple[str, str]]:
    """Seçim butonları için (value, label) listesi, enum sırasıyla."""
    return [(tur.name, tur.label) for tur in SMMHesaplamaTuru]


def hesaplama_turu_coz(name: str) -> SMMHesaplamaTuru:
    try:
        return SMMHesaplamaTuru[name]
    except KeyError:
        raise ValueError(f"Bilinmeyen hesaplama türü: {name!r}") from None


@dataclass(frozen=True)
class HesaplamaKurali:
    """
    kdv_dahil:    girilen ücret KDV'yi içeriyor mu
    stopaj_dahil: girilen ücret stopaj öncesi (brüt) mü; False ise net ücret
    stopaj_tuzel / stopaj_gercek: o kişi türü için stopaj kesiliyor mu
    """
    kdv_dahil: bool
    stopaj_dahil: bool
    stopaj_tuzel: bool
    stopaj_gercek: bool = False
    kdv_orani: Decimal = KDV_ORANI
    stopaj_orani: Decimal = STOPAJ_ORANI


HESAPLAMA_KURALLARI = {
    SMMHesaplamaTuru.KDV_HARIC_STOPAJ_DAHIL: HesaplamaKurali(kdv_dahil=False, stopaj_dahil=True, stopaj_tuzel=True),
    SMMHesaplamaTuru.KDV_DAHIL_STOPAJ_DAHIL: HesaplamaKurali(kdv_dahil=True, stopaj_dahil=True, stopaj_tuzel=True),
    SMMHesaplamaTuru.KDV_HARIC_STOPAJ_HARIC: HesaplamaKurali(kdv_dahil=False, stopaj_dahil=False, stopaj_tuzel=True),
    SMMHesaplamaTuru.KDV_DAHIL_STOPAJ_HARIC: HesaplamaKurali(kdv_dahil=True, stopaj_dahil=False, stopaj_tuzel=True),
    SMMHesaplamaTuru.KDV_HARIC_STOPAJ_YOK: HesaplamaKurali(kdv_dahil=False, stopaj_dahil=True, stopaj_tuzel=False),
    SMMHesaplamaTuru.KDV_DAHIL_STOPAJ_YOK: HesaplamaKurali(kdv_dahil=True, stopaj_dahil=True, stopaj_tuzel=False),
}


@dataclass(frozen=True)
class SMMSatiri:
    label: str
    tuzel_kisi_tutari: Optional[Decimal]
    gercek_kisi_tutari: Optional[Decimal]


@dataclass(frozen=True)
class SMMSonucu:
    hesaplama_turu: SMMHesaplamaTuru
    ucret: Decimal
    rows: tuple[SMMSatiri, ...]

    def as_dict(self) -> dict:
        def _s(v):
            return None if v is None else str(v)

        return {
            "hesaplama_turu": self.hesaplama_turu.name,
            "ucret": str(self.ucret),
            "rows": [
                {
                    "label": r.label,
                    "tuzel_kisi_tutari": _s(r.tuzel_kisi_tutari),
                    "gercek_kisi_tutari": _s(r.gercek_kisi_tutari),
                }
                for r in self.rows
            ],
        }


def _q(x: Optional[Decimal]) -> Optional[Decimal]:
    if x is None:
        return None
    return x.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)


def _yuzde(oran: Decimal) -> str:
    return f"%{(oran * 100).normalize():f}"


def _kalemler(ucret: Decimal, kural: HesaplamaKurali, stopaj_var: bool) -> dict:
    """Tek kişi türü için yuvarlanmamış kalemler."""
    kdv_orani = kural.kdv_orani
    stopaj_orani = kural.stopaj_orani if stopaj_var else Decimal("0")

    bolen = Decimal("1")
    if kural.kdv_dahil:
        bolen += kdv_orani
    if not kural.stopaj_dahil:
        bolen -= stopaj_orani

    brut = ucret / bolen
    kdv = brut * kdv_orani
    stopaj = brut * stopaj_orani
    net = brut - stopaj

    return {
        "brut": brut,
        "kdv": kdv,
        "toplam": brut + kdv,
        "stopaj": stopaj if stopaj_var else None,
        "net": net,
        "tahsil": net + kdv,
    }


def smm_hesapla(ucret: Decimal, tur: SMMHesaplamaTuru) -> SMMSonucu:
    """
    Arabuluculuk ücretinin tüzel / gerçek kişi için SMM dökümü.
    ucret pozitif kabul edilir, kontrol ucret_dogrula'da.
    Yuvarlama sadece satır oluşturulurken yapılır.
    """
    kural = HESAPLAMA_KURALLARI[tur]
    if not isinstance(ucret, Decimal):
        ucret = Decimal(str(ucret))

    tuzel = _kalemler(ucret, kural, kural.stopaj_tuzel)
    gercek = _kalemler(ucret, kural, kural.stopaj_gercek)

    sira = [
        ("brut", "Brüt Ücret"),
        ("kdv", f"KDV ({_yuzde(kural.kdv_orani)})"),
        ("toplam", "Toplam (KDV Dahil)"),
        ("stopaj", f"Stopaj ({_yuzde(kural.stopaj_orani)})"),
        ("net", "Net Ücret"),
        ("tahsil", "Tahsil Edilecek Tutar"),
    ]
    rows = tuple(SMMSatiri(label, _q(tuzel[key]), _q(gercek[key])) for key, label in sira)

    return SMMSonucu(hesaplama_turu=tur, ucret=ucret, rows=rows)


def _gosterim_uzunlugu(tl: Decimal) -> int:
    # kurus_format çıktısının uzunluğu: lira haneleri + gruplama noktaları + ",xx"
    lira_hane = max(tl.adjusted() + 1, 1)
    return lira_hane + (lira_hane - 1) // 3 + 3


def ucret_dogrula(ucret, max_uzunluk: Optional[int] = None) -> Decimal:
    """
    Hesapla öncesi kontrol. Geçersizse GecersizTutarHatasi (mesaj kullanıcıya gösterilir).
    - str: ekranda yazılan metin ya da ham kuruş ("1.000,00" / "100000")
    - int / float / Decimal: TL değeri (1000 -> 1000 TL)
    max_uzunluk: TR gösterimin ("1.000,00") en fazla karakter sayısı
    """
    if isinstance(ucret, bool) or not isinstance(ucret, (str, int, float, Decimal, type(None))):
        raise GecersizTutarHatasi("Lütfen arabuluculuk ücreti için geçerli bir sayısal değer giriniz.")

    if isinstance(ucret, int):
        tl = Decimal(ucret)
    elif isinstance(ucret, (float, Decimal)):
        tl = Decimal(str(ucret))
    elif ucret is None or ucret.strip() == "":
        raise GecersizTutarHatasi("Lütfen arabuluculuk ücretini boş bırakmayınız.")
    else:
        tl = kurus_to_tl(kurus_normalize(ucret))

    if not tl.is_finite() or tl <= 0:
        raise GecersizTutarHatasi("Arabuluculuk ücreti pozitif bir değer olmalıdır.")
    if max_uzunluk and _gosterim_uzunlugu(tl) > max_uzunluk:
        raise GecersizTutarHatasi(f"Arabuluculuk ücreti en fazla {max_uzunluk} karakter olabilir.")
    return tl
