"""
HTTP routes for the solver API.
"""

import logging
from datetime import datetime, timezone

from flask import current_app, jsonify, request

from watersort.api import api_bp
from watersort.api.validation import RequestValidationError, parse_solve_request
from watersort.solver import solve_puzzle

logger = logging.getLogger(__name__)


def _failure(message: str, status: int):
    return jsonify({'success': False, 'moves': [], 'message': message}), status


@api_bp.route('/health', methods=['GET'])
def health():
    """Liveness check."""
    return jsonify({
        'status': 'ok',
        'timestamp': datetime.now(timezone.utc).isoformat(),
    })


@api_bp.route('/solve', methods=['POST'])
def solve():
    """
    Solve a puzzle.

    Request body (JSON):
    {
        "gameState": {"vials": [["red", "blue", ...], ...]},
        "strictMode": bool (default: true),
        "maxStates": int (optional, capped by server setting)
    }

    Returns:
    {
        "success": true,
        "moves": [{"from": 0, "to": 2, "color": "red", "units": 2}, ...]
    }
    or, when no solution is found (still 200):
    {
        "success": false,
        "moves": [],
        "message": "No solution found. ..."
    }
    """
    try:
        solve_request = parse_solve_request(request.get_json(silent=True))
    except RequestValidationError as e:
        logger.info(f"Rejected solve request: {e}")
        return _failure(str(e), 400)

    settings = current_app.config['SOLVER_SETTINGS']
    max_states = settings['max_states']
    if solve_request.max_states is not None:
        max_states = min(solve_request.max_states, max_states)

    try:
        solution = solve_puzzle(
            solve_request.vials,
            strict_mode=solve_request.strict_mode,
            max_states=max_states,
        )
    except Exception as e:
        logger.exception("Solver error")
        return _failure(str(e) or 'Unknown error solving puzzle', 500)

    metrics = solution.metrics
    logger.info(
        f"Solve: {len(solve_request.vials)} vials, strict={solve_request.strict_mode}, "
        f"status={solution.status.value}, moves={solution.move_count}, "
        f"explored={metrics.states_explored}, {metrics.computation_time_ms:.1f}ms"
    )
    return jsonify(solution.to_result()), 200
