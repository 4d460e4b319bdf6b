# finance/routes.py

from flask import Blueprint, current_app, render_template

main = Blueprint("main", __name__)

INDEX_VIEW = "index"
JOIN_VIEW = "join"


def _render_view(view):
    current_app.logger.debug("Rendering view %s", view)
    return render_template(f"{view}.html")


# ---------------------- HOME ---------------------- #
@main.route("/")
def home_view():
    return _render_view(INDEX_VIEW)


# ---------------------- JOIN ---------------------- #
@main.route("/view/join")
def join_view():
    return _render_view(JOIN_VIEW)
