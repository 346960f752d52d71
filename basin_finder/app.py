# app.py — Slim Flask API over the basin analysis
# deps: pip install flask numpy pillow matplotlib

from __future__ import annotations
import logging
from typing import Any, Dict

from flask import Flask, request, jsonify, make_response

from .analysis import BasinAnalysis, analyze
from .config import API_PORT, TOP_BASINS
from .errors import InsufficientBasinsError, MalformedInputError
from .parsing import parse_height_grid
from .viz import render_basin_png

logger = logging.getLogger(__name__)

app = Flask(__name__)

# ======= CORS =======
@app.after_request
def _cors(resp):
    resp.headers["Access-Control-Allow-Origin"]  = "*"
    resp.headers["Access-Control-Allow-Headers"] = "*"
    resp.headers["Access-Control-Allow-Methods"] = "GET,POST,OPTIONS"
    return resp

# ======= helpers =======
def _grid_text(data: Dict[str, Any]) -> str:
    if "rows" in data:
        rows = data["rows"]
        if not isinstance(rows, list) or not all(isinstance(r, str) for r in rows):
            raise MalformedInputError("rows must be a list of strings")
        return "\n".join(rows)
    text = data.get("text")
    if not isinstance(text, str):
        raise MalformedInputError("body needs 'rows' or 'text'")
    return text

def _json_body() -> Dict[str, Any]:
    data = request.get_json(force=True, silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise MalformedInputError("body must be a JSON object")
    return data

def _analysis_from_request() -> BasinAnalysis:
    data = _json_body()
    grid = parse_height_grid(_grid_text(data))
    return analyze(grid)

@app.errorhandler(MalformedInputError)
def _malformed(err):
    return jsonify({"error": str(err)}), 400

# ======= endpoints =======
@app.route("/", methods=["GET"])
def root():
    return {"ok": True, "solve": "/basins/solve (POST JSON)", "png": "/basins/png (POST JSON)"}

@app.route("/basins/solve", methods=["POST"])
def basins_solve():
    """
    JSON body:
    {
      "rows": ["2199943210", ...],   // or "text": "2199943210\\n..."
      "top": 3
    }
    """
    data = _json_body()
    try:
        top = int(data.get("top", TOP_BASINS))
    except (TypeError, ValueError):
        return jsonify({"error": "top must be an integer"}), 400
    if top < 1:
        return jsonify({"error": "top must be at least 1"}), 400

    analysis = _analysis_from_request()
    resp = {
        "width":  analysis.grid.width,
        "height": analysis.grid.height,
        "minima": [{"x": x, "y": y, "height": h} for (x, y), h in analysis.minima],
        "risk_sum":    analysis.part_one(),
        "basin_sizes": analysis.basin_sizes(),
    }
    try:
        resp["top_product"] = analysis.part_two(top=top)
    except InsufficientBasinsError as e:
        logger.info("Ranking failed: %s", e)
        resp["top_product"] = None
        resp["error"] = str(e)
    return jsonify(resp)

@app.route("/basins/png", methods=["POST"])
def basins_png():
    scale = request.args.get("scale", "8")
    try:
        scale = int(scale)
    except ValueError:
        return jsonify({"error": "scale must be an integer"}), 400

    resp = make_response(render_basin_png(_analysis_from_request(), scale=scale))
    resp.headers["Content-Type"] = "image/png"
    return resp


if __name__ == "__main__":
    app.run(host="0.0.0.0", port=API_PORT, threaded=True)
