from flask import Blueprint, Flask

api_bp = Blueprint('api', __name__, url_prefix='/api')

from watersort.api import routes  # noqa: E402,F401


def create_app(settings=None):
    """Flask application factory."""
    from watersort.settings import DEFAULT_SETTINGS

    app = Flask(__name__)

    config = DEFAULT_SETTINGS.copy()
    config.update(settings or {})
    app.config['SOLVER_SETTINGS'] = config

    app.register_blueprint(api_bp)

    return app
