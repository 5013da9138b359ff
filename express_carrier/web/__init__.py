from flask import Blueprint

home_bp = Blueprint("home", __name__)

from express_carrier.web import home as home  # noqa: E402
