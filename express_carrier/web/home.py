import logging

from express_carrier.domain.views import ViewDirective
from express_carrier.web import home_bp

log = logging.getLogger("home")

INDEX_VIEW = "index"


def show_index() -> ViewDirective:
    return ViewDirective(INDEX_VIEW)


@home_bp.route("/", methods=["GET"])
def index():
    directive = show_index()
    log.debug(f"Rendering {directive.template_name}")
    return directive.render()
