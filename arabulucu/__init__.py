from flask import Flask
from dotenv import load_dotenv

from .extensions import csrf


def create_app(test_config=None):
    load_dotenv()

    # Config ortam değişkenlerini import anında okur, .env yüklendikten sonra import edilmeli
    from .config import Config

    app = Flask(__name__, template_folder="templates")
    app.config.from_object(Config)
    if test_config:
        app.config.update(test_config)

    app.logger.setLevel(app.config["LOG_LEVEL"])

    # Extensions
    csrf.init_app(app)

    from flask_wtf.csrf import generate_csrf

    @app.context_processor
    def inject_csrf_token():
        return dict(csrf_token=generate_csrf)

    # Blueprints
    from .smm.routes import smm_bp

    app.register_blueprint(smm_bp)

    return app
