#!/usr/bin/env python3
"""
Flask endpoint exposing the balancing solver as JSON.
POST /calculate with {"v0": ..., "runs": [{"r": ..., "theta": ...} x 3]}.
"""

from __future__ import annotations

import logging
import os

from flask import Flask, jsonify, request

from .parsing import ValidationError, parse_payload
from .solver import solve_balance

logger = logging.getLogger(__name__)

DEFAULT_PORT = 3000


def create_app() -> Flask:
    app = Flask(__name__)

    @app.route("/calculate", methods=["POST"])
    def calculate():
        """Solve one balancing case and return solution + vectors"""
        payload = request.get_json(silent=True)
        try:
            solver_input = parse_payload(payload)
        except ValidationError as exc:
            logger.info("Rejected /calculate payload: %s", exc)
            return jsonify({"error": str(exc)}), 400

        result = solve_balance(solver_input)
        return jsonify(result.to_dict())

    return app


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    port = int(os.environ.get("PORT", DEFAULT_PORT))
    logger.info("Server running on http://localhost:%d", port)
    create_app().run(host="0.0.0.0", port=port, debug=False)


if __name__ == "__main__":
    main()
