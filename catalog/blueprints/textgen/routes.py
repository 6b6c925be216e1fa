"""
Text generation proxy.

POST /generate-text {"prompt": "...", "max_tokens": 256, "temperature": 0.7}
"""

from flask import Blueprint, current_app, jsonify

from ...services import textgen
from ...utils import get_json_body

textgen_bp = Blueprint("textgen", __name__)


@textgen_bp.route("/generate-text", methods=["POST"])
def generate_text():
    params = textgen.parse_request(get_json_body())

    text = textgen.generate_text(
        params["prompt"],
        max_tokens=params["max_tokens"],
        temperature=params["temperature"],
    )
    return jsonify({
        "prompt": params["prompt"],
        "text": text,
        "model": current_app.config["GENAI_MODEL"],
    })
