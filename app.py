#!/usr/bin/env python3
"""
Recent-Article Matcher - HTTP service
Matches short source headlines to independently published news articles
found through Google News RSS search within a recent time window.

Endpoints:
- /health   (service status and active search defaults)
- /match    (GET ?q=<headline>&window_min=&lang=&region=)
- /resolve  (POST JSON headline row or list of rows; ?window_min=&lang=&region=)
"""

from flask import Flask, jsonify, request
import logging
import os
from datetime import datetime
import pytz

from config.loader import get_config
from processing.matcher import find_recent_article
from processing.pipeline import configured_collaborators, resolve_headlines

app = Flask(__name__)
logger = logging.getLogger(__name__)

ET_TZ = pytz.timezone('US/Eastern')


def _serialize(value):
    """Render datetimes inside match/resolve payloads as ISO strings"""
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, dict):
        return {k: _serialize(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_serialize(v) for v in value]
    return value


def _bad_request(message):
    return jsonify({"error": message}), 400


# ============================================================================
# ROUTES
# ============================================================================

@app.route("/health", methods=["GET"])
def health_check():
    """Health check"""
    config = get_config()
    now = datetime.now(ET_TZ)
    return jsonify({
        "status": "healthy",
        "timestamp": now.strftime("%Y-%m-%d %I:%M:%S %p %Z"),
        "search_window_min": config['SEARCH_WINDOW_MIN'],
        "search_lang": config['SEARCH_LANG'],
        "search_region": config['SEARCH_REGION'],
        "data_source": "Google News RSS search",
    }), 200


@app.route("/match", methods=["GET"])
def match_headline():
    """Find the best recent article for one headline"""
    query = (request.args.get("q") or "").strip()
    if not query:
        return _bad_request("Missing query parameter 'q'")

    config = get_config()
    try:
        window_min = int(request.args.get("window_min", config['SEARCH_WINDOW_MIN']))
    except ValueError:
        return _bad_request("window_min must be an integer")
    if window_min <= 0:
        return _bad_request("window_min must be positive")

    match_config, search_fn = configured_collaborators(config)
    match = find_recent_article(
        query,
        window_min=window_min,
        lang=request.args.get("lang") or config['SEARCH_LANG'],
        region=request.args.get("region") or config['SEARCH_REGION'],
        match_config=match_config,
        search_fn=search_fn,
    )
    return jsonify({"query": query, "match": _serialize(match)}), 200


@app.route("/resolve", methods=["POST"])
def resolve():
    """Resolve headline rows to article links, falling back to the headline"""
    payload = request.get_json(silent=True)
    if isinstance(payload, dict):
        payload = [payload]
    if not isinstance(payload, list) or not payload:
        return _bad_request("Body must be a headline row or a non-empty list of rows")
    if not all(isinstance(row, dict) and (row.get("title") or "").strip() for row in payload):
        return _bad_request("Every headline row needs a non-empty 'title'")

    window_min = request.args.get("window_min")
    if window_min is not None:
        try:
            window_min = int(window_min)
        except ValueError:
            return _bad_request("window_min must be an integer")
        if window_min <= 0:
            return _bad_request("window_min must be positive")

    result = resolve_headlines(
        payload,
        window_min=window_min,
        lang=request.args.get("lang") or None,
        region=request.args.get("region") or None,
    )
    logger.info("Resolved %d headlines (%d matched)",
                result['match_stats']['headlines'], result['match_stats']['matched'])
    return jsonify(_serialize(result)), 200


# ============================================================================
# MAIN
# ============================================================================

if __name__ == "__main__":
    PORT = int(os.environ.get("PORT", 8080))

    logging.basicConfig(
        level=os.environ.get("LOG_LEVEL", "INFO").upper(),
        format='%(asctime)s | %(levelname)-8s | %(name)s | %(message)s'
    )

    config = get_config()
    print("=" * 80)
    print("Recent-Article Matcher")
    print("=" * 80)
    print(f"Port: {PORT}")
    print(f"Search window: {config['SEARCH_WINDOW_MIN']} min")
    print(f"Feed: Google News RSS ({config['SEARCH_LANG']} / {config['SEARCH_REGION']})")
    print("=" * 80)

    app.run(host="0.0.0.0", port=PORT)
