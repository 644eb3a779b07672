"""
Startup Idea Generator - Web API

Flask JSON API for generating startup ideas and managing saved favourites.
The idea store and generator are built once per application and injected
through create_app(), so tests can pass their own.

Run with: python main.py
Or: flask --app web.app run
"""

import logging
import re
from typing import Optional

from flask import Blueprint, Flask, current_app, jsonify, request
from werkzeug.exceptions import HTTPException

from ideagen.config import APP_ENV, DEBUG, HOST, PORT, SESSION_SECRET
from ideagen.exceptions import (
    GenerationError,
    IdeaGenError,
    InternalError,
    NotFoundError,
    ValidationError,
)
from ideagen.models.idea import IdeaDraft
from ideagen.services.idea_generator import IdeaGenerator
from ideagen.storage import IdeaStore, MemoryIdeaStore

logger = logging.getLogger(__name__)

api = Blueprint("api", __name__, url_prefix="/api")

# Plain ASCII digits; ids are never negative
ID_PATTERN = re.compile(r"[0-9]+")


# =============================================================================
# Application Factory
# =============================================================================

def create_app(
    store: Optional[IdeaStore] = None,
    generator: Optional[IdeaGenerator] = None,
) -> Flask:
    """
    Build the Flask application.

    Args:
        store: Idea store to use (default: a fresh MemoryIdeaStore).
        generator: Idea generator to use (default: one built from config).
    """
    app = Flask(__name__)
    app.config["SECRET_KEY"] = SESSION_SECRET
    app.config["APP_ENV"] = APP_ENV

    app.extensions["idea_store"] = store if store is not None else MemoryIdeaStore()
    app.extensions["idea_generator"] = generator if generator is not None else IdeaGenerator()

    app.register_blueprint(api)
    register_error_handlers(app)

    logger.info(
        "Application created (env=%s, store=%s)", APP_ENV, app.extensions["idea_store"].name
    )
    return app


def get_store() -> IdeaStore:
    """Get the idea store of the current application."""
    return current_app.extensions["idea_store"]


def get_generator() -> IdeaGenerator:
    """Get the idea generator of the current application."""
    return current_app.extensions["idea_generator"]


def parse_idea_id(raw_id: str) -> int:
    """Parse an idea id from the URL, rejecting anything but an integer."""
    if not ID_PATTERN.fullmatch(raw_id):
        raise ValidationError("Invalid ID")
    return int(raw_id)


# =============================================================================
# Error Handlers
# =============================================================================

def register_error_handlers(app: Flask) -> None:
    """Translate application errors into JSON responses."""

    @app.errorhandler(GenerationError)
    def handle_generation_error(e: GenerationError):
        logger.warning("Generation failed: %s", e.message)
        return jsonify({
            "message": GenerationError.PREFIX,
            "error": e.message,
        }), e.status_code

    @app.errorhandler(IdeaGenError)
    def handle_app_error(e: IdeaGenError):
        return jsonify({
            "message": e.message,
            "error": e.error_code,
        }), e.status_code

    @app.errorhandler(Exception)
    def handle_unexpected_error(e: Exception):
        # Routing errors (404/405) keep Flask's own responses
        if isinstance(e, HTTPException):
            return e

        logger.exception("Unhandled error on %s %s", request.method, request.path)
        error = InternalError(original_error=e)
        return jsonify({
            "message": error.message,
            "error": error.error_code,
        }), error.status_code


# =============================================================================
# Generation Endpoint
# =============================================================================

@api.route("/generate", methods=["POST"])
def generate_idea():
    """Generate a new (unsaved) startup idea for a topic."""
    data = request.get_json(silent=True)
    topic = data.get("topic") if isinstance(data, dict) else None

    if not isinstance(topic, str) or not topic.strip():
        raise ValidationError("Topic is required")

    draft = get_generator().generate(topic)
    return jsonify(draft.to_dict()), 200


# =============================================================================
# Saved Ideas Endpoints
# =============================================================================

@api.route("/ideas", methods=["POST"])
@api.route("/save", methods=["POST"])
def save_idea():
    """Save an idea and return it with its assigned id."""
    draft = IdeaDraft.from_dict(request.get_json(silent=True))
    idea = get_store().save(draft)
    return jsonify(idea.to_dict()), 201


@api.route("/ideas", methods=["GET"])
def list_ideas():
    """Return all saved ideas, oldest first."""
    ideas = get_store().get_all()
    return jsonify([idea.to_dict() for idea in ideas]), 200


@api.route("/ideas/<idea_id>", methods=["GET"])
def get_idea(idea_id):
    """Return a single saved idea."""
    parsed_id = parse_idea_id(idea_id)
    idea = get_store().get_by_id(parsed_id)

    if idea is None:
        raise NotFoundError(parsed_id)

    return jsonify(idea.to_dict()), 200


@api.route("/ideas/<idea_id>", methods=["PUT"])
def update_idea(idea_id):
    """Replace all editable fields of a saved idea."""
    parsed_id = parse_idea_id(idea_id)
    draft = IdeaDraft.from_dict(request.get_json(silent=True))
    idea = get_store().update(parsed_id, draft)

    if idea is None:
        raise NotFoundError(parsed_id)

    return jsonify(idea.to_dict()), 200


@api.route("/ideas/<idea_id>", methods=["DELETE"])
def delete_idea(idea_id):
    """Delete a saved idea."""
    parsed_id = parse_idea_id(idea_id)

    if not get_store().delete(parsed_id):
        raise NotFoundError(parsed_id)

    return jsonify({
        "success": True,
        "message": "Idea deleted successfully",
    }), 200


@api.route("/status")
def api_status():
    """Report generator availability and store size."""
    generator = get_generator()
    return jsonify({
        "generator_available": generator.is_available(),
        "model": generator.model if generator.is_available() else None,
        "idea_count": get_store().count(),
        "environment": current_app.config["APP_ENV"],
    })


def serve(host: Optional[str] = None, port: Optional[int] = None) -> None:
    """Run the development server."""
    host = host or HOST
    port = port or PORT

    print("=" * 50)
    print("Startup Idea Generator API")
    print("=" * 50)
    print(f"Listening on http://{host}:{port}")
    print("Press Ctrl+C to stop")
    print("=" * 50)
    create_app().run(host=host, port=port, debug=DEBUG)


if __name__ == "__main__":
    serve()
