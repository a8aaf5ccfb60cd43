"""
Dashboard web service (Flask).

Routes:
- GET /              rendered jail dashboard
- GET /static/<path> packaged static assets
- GET /api/status    snapshot metadata and records as JSON

Handlers only read the Snapshot; they never wait on the poller.
"""

import logging
from typing import Any, Dict, Mapping

from flask import Flask, Response, jsonify, render_template, send_file
from jinja2 import TemplateError

from jaildash.assets import resolve_asset
from jaildash.errors import AssetNotFound, AssetTypeUnknown, RenderError
from jaildash.models import ViewRecord
from jaildash.snapshot import Snapshot

logger = logging.getLogger(__name__)

TEMPLATE_INDEX = "index.html"


def snapshot_context(records: Mapping[str, ViewRecord]) -> Dict[str, Dict[str, Any]]:
    """Plain, id-sorted dict view of the records for templates and JSON."""
    return {jail_id: records[jail_id].model_dump() for jail_id in sorted(records)}


def create_app(snapshot: Snapshot) -> Flask:
    # Own /static route below, so Flask's default one is disabled
    app = Flask(__name__, static_folder=None)

    @app.route('/')
    def index():
        status = snapshot.status()
        try:
            html = render_template(
                TEMPLATE_INDEX,
                jails=snapshot_context(status.records),
                refreshed_at=status.refreshed_at,
                last_error=status.last_error,
            )
        except TemplateError as e:
            raise RenderError(f"Failed to render {TEMPLATE_INDEX}: {e}") from e
        return Response(html, mimetype="text/html")

    @app.route('/static/<path:filename>')
    def static_file(filename):
        path, content_type = resolve_asset(filename)
        return send_file(path, mimetype=content_type)

    @app.route('/api/status')
    def api_status():
        status = snapshot.status()
        return jsonify({
            "generation": status.generation,
            "refreshed_at": status.refreshed_at.isoformat() if status.refreshed_at else None,
            "last_error": status.last_error,
            "jail_count": status.jail_count,
            "jails": snapshot_context(status.records),
        })

    @app.errorhandler(AssetNotFound)
    def asset_not_found(e):
        return Response("Not Found", status=404, mimetype="text/plain")

    @app.errorhandler(AssetTypeUnknown)
    def asset_type_unknown(e):
        return Response(str(e), status=400, mimetype="text/plain")

    @app.errorhandler(RenderError)
    def render_failed(e):
        logger.error("Dashboard render failed: %s", e)
        return Response("Internal Server Error", status=500, mimetype="text/plain")

    return app
