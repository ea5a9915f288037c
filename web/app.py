"""
Idea Board - Web Application

Flask app serving the idea pages and the JSON endpoints under /api/ideas/.

Run with: python main.py
Or: flask --app "web.app:create_app()" run
"""

import logging
from typing import Any, Dict, List, Optional

from flask import (
    Blueprint,
    Flask,
    current_app,
    flash,
    jsonify,
    redirect,
    render_template,
    request,
    url_for,
)

from ideabox.api.service import IdeaService
from ideabox.config import DEBUG, IDEAS_TABLE, SECRET_KEY
from ideabox.errors import IdeaError, InvalidInput
from ideabox.models.record import RecordId
from ideabox.storage import RecordStore, create_store
from ideabox.views import IdeaDevelopmentView, IdeaFormView, IdeaListView

logger = logging.getLogger(__name__)

bp = Blueprint("ideas", __name__)

EXTENSION_KEY = "ideabox"


def create_app(
    store: Optional[RecordStore] = None,
    table: str = None,
    config: Optional[Dict[str, Any]] = None,
) -> Flask:
    """
    Build the Flask application around one record store.

    Args:
        store: Record store to serve. Defaults to the configured backend.
        table: Ideas collection name. Defaults to config.IDEAS_TABLE.
        config: Extra Flask config values (e.g. {"TESTING": True}).
    """
    app = Flask(__name__)
    app.config["SECRET_KEY"] = SECRET_KEY
    app.config["DEBUG"] = DEBUG
    if config:
        app.config.update(config)

    store = store if store is not None else create_store()
    app.extensions[EXTENSION_KEY] = IdeaService(store, table or IDEAS_TABLE)

    app.register_blueprint(bp)
    app.add_template_filter(statement_count)

    logger.info("Serving ideas from %s", store)
    return app


def get_service() -> IdeaService:
    """The IdeaService of the running app."""
    return current_app.extensions[EXTENSION_KEY]


# =============================================================================
# Request Parsing
# =============================================================================

_MISSING = object()


def _json_body() -> Dict[str, Any]:
    """Decode the request body; an empty body counts as {}."""
    data = request.get_json(silent=True)
    if data is None:
        if request.get_data():
            raise InvalidInput("Request body must be JSON")
        return {}
    if not isinstance(data, dict):
        raise InvalidInput("Request body must be a JSON object")
    return data


def _str_field(data: Dict[str, Any], name: str, default: Any = _MISSING) -> str:
    value = data.get(name, default)
    if value is _MISSING:
        raise InvalidInput(f"Missing field: {name}")
    if not isinstance(value, str):
        raise InvalidInput(f"Field {name} must be a string")
    return value


def _list_field(data: Dict[str, Any], name: str, default: Any = _MISSING) -> List[str]:
    value = data.get(name, default)
    if value is _MISSING:
        raise InvalidInput(f"Missing field: {name}")
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise InvalidInput(f"Field {name} must be a list of strings")
    return value


# =============================================================================
# Idea API Endpoints
# =============================================================================

@bp.route("/api/ideas/submit", methods=["POST"])
def api_submit():
    """Store a new idea."""
    data = _json_body()
    idea = get_service().submit(
        _str_field(data, "title"),
        _str_field(data, "description", ""),
        _list_field(data, "tags", []),
    )
    return jsonify(idea.to_dict())


@bp.route("/api/ideas/all", methods=["POST"])
def api_all():
    """Every stored idea."""
    ideas = get_service().list_all()
    return jsonify([idea.to_dict() for idea in ideas])


@bp.route("/api/ideas/get", methods=["POST"])
def api_get():
    """One idea by id."""
    data = _json_body()
    idea = get_service().get(_str_field(data, "id"))
    return jsonify(idea.to_dict())


@bp.route("/api/ideas/update", methods=["POST"])
def api_update():
    """Replace every field of an idea."""
    data = _json_body()
    idea = get_service().update(
        _str_field(data, "id"),
        _str_field(data, "title"),
        _str_field(data, "description"),
        _list_field(data, "tags"),
        _list_field(data, "what_must_be_true"),
        _str_field(data, "development_notes"),
    )
    return jsonify(idea.to_dict())


@bp.route("/api/ideas/delete", methods=["POST"])
def api_delete():
    """Delete an idea; an already-deleted idea is not an error."""
    data = _json_body()
    get_service().delete(_str_field(data, "id"))
    return jsonify({"success": True})


@bp.app_errorhandler(IdeaError)
def handle_idea_error(error: IdeaError):
    """Map IdeaError to a JSON body for the API, an error page elsewhere."""
    if error.http_status >= 500:
        logger.error("%s %s failed: %s", request.method, request.path, error)

    if request.path.startswith("/api/"):
        return jsonify(error.to_dict()), error.http_status
    return render_template("error.html", message=error.message), error.http_status


# =============================================================================
# Pages
# =============================================================================

def _render_home(form: IdeaFormView, status: int = 200):
    ideas = IdeaListView(get_service())
    ideas.load()
    return render_template("index.html", form=form, ideas=ideas), status


@bp.route("/")
def index():
    """Home page: the submit form and the list of ideas."""
    return _render_home(IdeaFormView(get_service()))


@bp.route("/ideas", methods=["POST"])
def submit_idea():
    """Form submission; redirects home on success."""
    form = IdeaFormView(get_service())
    form.title = request.form.get("title", "")
    form.description = request.form.get("description", "")
    form.tags_input = request.form.get("tags", "")

    if form.submit() is None:
        return _render_home(form, status=400)

    flash(form.message)
    return redirect(url_for("ideas.index"))


@bp.route("/ideas/<id>")
def develop_idea(id):
    """Development page for one idea."""
    view = IdeaDevelopmentView(get_service(), id)
    view.load()
    status = 200 if view.idea is not None else 404
    return render_template("development.html", view=view), status


@bp.route("/ideas/<id>/delete", methods=["GET"])
def confirm_delete(id):
    """Ask before deleting."""
    idea = get_service().get(id)
    return render_template("confirm_delete.html", idea=idea)


@bp.route("/ideas/<id>/delete", methods=["POST"])
def delete_idea(id):
    """Delete after confirmation and go back home."""
    RecordId.parse(id)

    view = IdeaListView(get_service())
    view.load()

    idea = view.find(id)
    if idea is None:
        flash("idea already deleted")
        return redirect(url_for("ideas.index"))

    view.request_delete(idea)
    if view.confirm_delete():
        flash(f"deleted \"{idea.title}\"")
    else:
        flash(view.error)
    return redirect(url_for("ideas.index"))


def statement_count(idea) -> str:
    """Return "1 statement" / "N statements" for an idea's checklist."""
    count = len(idea.what_must_be_true)
    return f"{count} statement" if count == 1 else f"{count} statements"


if __name__ == "__main__":
    app = create_app()
    print("=" * 50)
    print("Idea Board")
    print("=" * 50)
    print("Open http://localhost:5001 in your browser")
    print("Press Ctrl+C to stop")
    print("=" * 50)
    app.run(debug=True, port=5001)
