"""Flask blueprints for Satellite Watcher."""

from __future__ import annotations


def register_blueprints(app):
    """Register all route blueprints with the Flask app."""
    from .passes import passes_bp

    app.register_blueprint(passes_bp)
