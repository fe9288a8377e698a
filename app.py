"""
GitHub Profile Explorer (Flask)

What it does:
- Accepts a GitHub username
- Fetches the public profile, up to 100 repositories and the 30 most recent events
- Renders profile cards, top repositories, language / stars / growth charts and an activity timeline
- Falls back to deterministic mock data when the repository or event lookups fail

Setup:
  pip install -e .

Run:
  python app.py
  open http://localhost:5000

Endpoints:
  GET  /                        -> dashboard page (add ?username=octocat to search)
  GET  /api/dashboard?username=  -> returns the dashboard view model as JSON
  POST /api/dashboard            -> accepts form-data or JSON { "username": "..." }
  GET  /healthz                  -> liveness probe
"""

from __future__ import annotations

import logging
import os
import re
from typing import Optional

from flask import Flask, jsonify, render_template, request

from dashboard import FETCH_ERROR_MESSAGE, UiState, error_view, run_search
from github_api import GITHUB_API_BASE

logger = logging.getLogger(__name__)

# -----------------------------
# Flask app
# -----------------------------
app = Flask(__name__)

# -----------------------------
# Config
# -----------------------------
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

CHART_COLORS = [
    "#4facfe", "#00f2fe", "#43e97b", "#38f9d7",
    "#ffecd2", "#fcb69f", "#a8edea", "#fed6e3",
]

EXAMPLE_USERNAMES = ["octocat", "torvalds", "gaearon", "sindresorhus", "addyosmani"]

# Username validation (GitHub allows alnum and hyphen; max length 39)
USERNAME_RE = re.compile(r"^[A-Za-z0-9-]{1,39}$")
INVALID_USERNAME = "Invalid GitHub username format."


def _get_username_from_request() -> Optional[str]:
    if request.method == "GET":
        return (request.args.get("username") or "").strip()
    if request.is_json:
        payload = request.get_json(silent=True)
        if not isinstance(payload, dict):
            payload = {}
        return (str(payload.get("username") or "")).strip()
    return (request.form.get("username") or "").strip()


# -----------------------------
# Flask routes
# -----------------------------
@app.route("/", methods=["GET"])
def home():
    username = _get_username_from_request()
    view = None
    status = 200

    if username:
        if USERNAME_RE.match(username):
            try:
                view, status = run_search(username)
            except Exception:
                logger.exception("Unexpected error while searching %s", username)
                view, status = error_view(FETCH_ERROR_MESSAGE), 500
        else:
            view, status = error_view(INVALID_USERNAME), 400

    return (
        render_template(
            "index.html",
            username=username,
            view=view,
            states=UiState,
            chart_colors=CHART_COLORS,
            examples=EXAMPLE_USERNAMES,
        ),
        status,
    )


@app.route("/api/dashboard", methods=["GET", "POST"])
def api_dashboard():
    username = _get_username_from_request()

    if not username:
        return jsonify({"error": "Missing 'username'."}), 400

    if not USERNAME_RE.match(username):
        return jsonify({"error": INVALID_USERNAME}), 400

    try:
        view, status = run_search(username)
        return jsonify(view), status
    except Exception as e:
        logger.exception("Unexpected error while searching %s", username)
        return jsonify({"error": f"Unexpected server error: {e}"}), 500


@app.route("/healthz", methods=["GET"])
def healthz():
    return jsonify({"ok": True, "api_base": GITHUB_API_BASE})


if __name__ == "__main__":
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    port = int(os.getenv("PORT", "5000"))
    app.run(host="0.0.0.0", port=port, debug=os.getenv("FLASK_DEBUG", "0") == "1")
