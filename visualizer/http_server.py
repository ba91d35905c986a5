#!/usr/bin/env python3
"""
HTTP Control Panel
Exposes the dispatcher over a small JSON API: fleet status and floor requests
"""
from flask import Flask, jsonify, request
from flask_cors import CORS

from group_control.system import Dispatcher
from simulator.core.elevator_state import Direction
from simulator.errors import StateCorruptedError


def create_app(dispatcher: Dispatcher) -> Flask:
    """Build the Flask app serving the given dispatcher"""
    app = Flask(__name__)
    CORS(app)  # Enable CORS for all routes
    app.config['DISPATCHER'] = dispatcher

    @app.route('/api/status')
    def status():
        """Server status endpoint"""
        return jsonify({
            'status': 'ok',
            'server': 'Elevator Dispatch HTTP Server',
            'version': '1.0',
            'elevators': len(dispatcher.elevators),
            'strategy': dispatcher.strategy.get_strategy_name()
        })

    @app.route('/api/elevators')
    def list_elevators():
        """Current snapshot of every connected elevator"""
        try:
            snapshots = dispatcher.snapshot()
        except StateCorruptedError as exc:
            return jsonify({'error': str(exc)}), 500
        return jsonify([snapshot.to_dict() for snapshot in snapshots])

    @app.route('/api/elevators/status', methods=['POST'])
    def request_status():
        """Ask every elevator to publish a status report"""
        notified = dispatcher.request_status()
        return jsonify({'notified': notified})

    @app.route('/api/requests', methods=['POST'])
    def request_elevator():
        """
        Submit a floor request
        Body: {"floor": <int>, "direction": "UP" | "DOWN"}
        """
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            return jsonify({'error': 'Request body must be a JSON object'}), 400

        floor = data.get('floor')
        if isinstance(floor, bool) or not isinstance(floor, int):
            return jsonify({'error': "'floor' must be an integer"}), 400

        try:
            direction = Direction.parse(data.get('direction', 'UP'))
        except ValueError as exc:
            return jsonify({'error': str(exc)}), 400
        if direction == Direction.IDLE:
            return jsonify({'error': "'direction' must be 'UP' or 'DOWN'"}), 400

        try:
            assigned = dispatcher.request_elevator(floor, direction)
        except StateCorruptedError as exc:
            return jsonify({'error': str(exc)}), 500

        return jsonify({
            'floor': floor,
            'direction': direction.value,
            'assigned_elevator': assigned
        })

    return app


def run_server(dispatcher: Dispatcher, host='localhost', port=5000, debug=False):
    """Run the Flask server"""
    print(f"Starting HTTP server on http://{host}:{port}")
    print(f"API endpoints:")
    print(f"  - GET  /api/status")
    print(f"  - GET  /api/elevators")
    print(f"  - POST /api/elevators/status")
    print(f"  - POST /api/requests")

    app = create_app(dispatcher)
    # Reloader would spawn a second fleet in the child process
    app.run(host=host, port=port, debug=debug, threaded=True, use_reloader=False)
