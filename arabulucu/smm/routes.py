from flask import Blueprint, render_template, request, flash, current_app, jsonify

from ..extensions import csrf
from .kurus import GecersizTutarHatasi, kurus_normalize, kurus_format, tl_format
from .services import (
    smm_hesapla,
    ucret_dogrula,
    hesaplama_turu_coz,
    smm_hesaplama_turu_secenekleri,
    VARSAYILAN_HESAPLAMA_TURU,
    PERSON_TYPE_TUZEL,
    PERSON_TYPE_GERCEK,
)

smm_bp = Blueprint("smm", __name__, url_prefix="")


def _ekran(ucret_raw="", secili=VARSAYILAN_HESAPLAMA_TURU, sonuc=None):
    return render_template(
        "smm.html",
        app_title=current_app.config["APP_TITLE"],
        app_subtitle=current_app.config["APP_SUBTITLE"],
        max_uzunluk=current_app.config["UCRET_MAX_UZUNLUK"],
        # boş ham değer format'a gönderilmez, alan boş kalır
        ucret_display=kurus_format(ucret_raw) if ucret_raw else "",
        secenekler=smm_hesaplama_turu_secenekleri(),
        secili=secili.name,
        sonuc=sonuc,
        tuzel_baslik=PERSON_TYPE_TUZEL,
        gercek_baslik=PERSON_TYPE_GERCEK,
        tl_format=tl_format,
    )


@smm_bp.get("/")
def smm_ekrani():
    return _ekran()


@smm_bp.post("/hesapla")
def hesapla():
    ucret_raw = kurus_normalize(request.form.get("ucret"))
    tur_raw = (request.form.get("hesaplama_turu") or VARSAYILAN_HESAPLAMA_TURU.name).strip()

    try:
        tur = hesaplama_turu_coz(tur_raw)
    except ValueError as e:
        current_app.logger.warning("SMM: %s", e)
        flash("Hesaplama türü geçersiz.", "danger")
        return _ekran(ucret_raw=ucret_raw), 400

    try:
        ucret = ucret_dogrula(ucret_raw, current_app.config["UCRET_MAX_UZUNLUK"])
    except GecersizTutarHatasi as e:
        current_app.logger.warning("SMM: ücret reddedildi (%r)", ucret_raw)
        flash(str(e), "warning")
        return _ekran(ucret_raw=ucret_raw, secili=tur), 400

    sonuc = smm_hesapla(ucret, tur)
    current_app.logger.info("SMM hesaplandı: tur=%s ucret=%s", tur.name, ucret)
    return _ekran(ucret_raw=ucret_raw, secili=tur, sonuc=sonuc)


# ----------------- JSON -----------------

@smm_bp.post("/api/tutar")
@csrf.exempt
def api_tutar():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = {}
    raw = kurus_normalize(data.get("text"))
    return jsonify(raw=raw, display=kurus_format(raw) if raw else "")


@smm_bp.get("/api/secenekler")
def api_secenekler():
    return jsonify([{"value": value, "label": label} for value, label in smm_hesaplama_turu_secenekleri()])


@smm_bp.post("/api/hesapla")
@csrf.exempt
def api_hesapla():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = {}

    try:
        tur = hesaplama_turu_coz(str(data.get("hesaplama_turu") or VARSAYILAN_HESAPLAMA_TURU.name))
        ucret = ucret_dogrula(data.get("ucret"), current_app.config["UCRET_MAX_UZUNLUK"])
    except ValueError as e:
        current_app.logger.warning("SMM API: %s", e)
        return jsonify(error=str(e)), 400

    sonuc = smm_hesapla(ucret, tur)
    current_app.logger.info("SMM hesaplandı (api): tur=%s ucret=%s", tur.name, ucret)
    return jsonify(sonuc.as_dict())
