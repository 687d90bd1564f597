# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
HTTP upload endpoint for accessibility audits.

``POST /upload`` accepts a multipart form with one HTML file and responds with
the accessibility report as JSON. Uploaded content is read from the request
and never written to disk.
"""

from typing import Any, Dict, Optional

from flask import Flask, current_app, jsonify, request

from html_accessibility_checker.api import analyze
from html_accessibility_checker.remediate.fix_providers import FixProvider
from html_accessibility_checker.utils.config import config_manager
from html_accessibility_checker.utils.logging_helper import log_exception, setup_logger

# Set up module-level logger
logger = setup_logger(__name__)


def create_app(
    options: Optional[Dict[str, Any]] = None,
    fix_provider: Optional[FixProvider] = None,
) -> Flask:
    """
    Application factory for the upload endpoint.

    Args:
        options: Audit options passed to every analysis
        fix_provider: Provider to use for every analysis instead of the
            configured one

    Returns:
        The Flask application
    """
    app = Flask(__name__)
    app.json.sort_keys = False

    server_config = config_manager.get_config(section="server")
    app.config["UPLOAD_FIELD"] = server_config.get("upload_field", "htmlFile")
    app.config["AUDIT_OPTIONS"] = dict(options or {})
    app.config["FIX_PROVIDER"] = fix_provider

    app.add_url_rule("/upload", "upload", upload, methods=["POST"])
    return app


def upload():
    """Audit an uploaded HTML file."""
    uploaded = request.files.get(current_app.config["UPLOAD_FIELD"])
    if uploaded is None:
        return jsonify({"error": "No file uploaded."}), 400

    try:
        html = uploaded.read().decode("utf-8")
        report = analyze(
            html,
            options=current_app.config["AUDIT_OPTIONS"],
            fix_provider=current_app.config["FIX_PROVIDER"],
        )
    except Exception as e:
        log_exception(logger, e, f"Error processing uploaded file {uploaded.filename!r}")
        return jsonify({"error": "Error processing the file."}), 500

    logger.info(
        "Audited upload %r: score %s, %d issues",
        uploaded.filename,
        report.formatted_score,
        len(report.issues),
    )
    return jsonify(report.to_dict())


def run_server(host: Optional[str] = None, port: Optional[int] = None) -> None:
    """
    Run the upload endpoint on the Flask development server.

    Args:
        host: Interface to bind (default: from the ``server`` configuration)
        port: Port to listen on (default: from the ``server`` configuration)
    """
    server_config = config_manager.get_config(section="server")
    host = host or server_config["host"]
    port = port or server_config["port"]

    app = create_app()
    logger.info(f"Serving uploads on http://{host}:{port}/upload")
    app.run(host=host, port=int(port))
