import os

from dotenv import load_dotenv
from flask import Flask
from flask_sqlalchemy import SQLAlchemy
from sqlalchemy.engine import make_url

db = SQLAlchemy()


def create_app(test_config=None):
    load_dotenv()

    app = Flask(__name__)

    # MySQL by default, override with DATABASE_URL
    app.config["SQLALCHEMY_DATABASE_URI"] = os.environ.get(
        "DATABASE_URL", "mysql+pymysql://root@localhost/finance_db"
    )
    app.config["SQLALCHEMY_TRACK_MODIFICATIONS"] = False
    app.config["SECRET_KEY"] = os.environ.get("SECRET_KEY", "finance_secret_key")

    if test_config is not None:
        app.config.update(test_config)

    db.init_app(app)

    from . import models  # noqa: F401
    from .routes import main
    app.register_blueprint(main)

    # create missing tables
    with app.app_context():
        db.create_all()

    app.logger.info(
        "Application created using database %s",
        make_url(app.config["SQLALCHEMY_DATABASE_URI"]).render_as_string(hide_password=True),
    )

    return app
