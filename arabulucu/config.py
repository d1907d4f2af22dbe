import os

class Config:
    SECRET_KEY = os.environ.get("SECRET_KEY", "dev-secret-change-me")

    APP_TITLE = "Arabuluculuk | SMM Hesaplama"
    APP_SUBTITLE = "Arabuluculuk ücretinin tüzel ve gerçek kişi için KDV / stopaj dökümü."

    # Ücret alanı karakter sınırı; sunucu da aynı sınırla reddeder
    UCRET_MAX_UZUNLUK = int(os.environ.get("UCRET_MAX_UZUNLUK", "18"))

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
    WTF_CSRF_ENABLED = True
