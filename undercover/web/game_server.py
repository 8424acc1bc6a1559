"""
Local web server for playing on one shared device.
"""

import asyncio
import os
import threading
from typing import Any, Dict, Optional
from flask import Flask, jsonify, render_template, request
from flask_socketio import SocketIO, emit

from .event_emitter import EventEmitter
from ..controller import SessionController


class GameServer:
    """Web server exposing the session actions as JSON endpoints."""

    def __init__(self, controller: SessionController, port: int = 5000, host: str = '127.0.0.1',
                 event_emitter: Optional[EventEmitter] = None):
        self.port = port
        self.host = host
        self.controller = controller

        # Get the directory where this module is located
        base_dir = os.path.dirname(os.path.abspath(__file__))
        template_dir = os.path.join(base_dir, 'templates')

        self.app = Flask(__name__, template_folder=template_dir)
        self.socketio = SocketIO(self.app, cors_allowed_origins="*", async_mode='threading')
        self.event_emitter = event_emitter or controller.event_emitter or EventEmitter()
        controller.set_event_emitter(self.event_emitter)
        self.clients_connected = 0

        # Actions run one at a time; the lock is released while words are generated
        self._lock = threading.Lock()

        # Register event emitter listener
        self.event_emitter.register_listener(self._broadcast_event)

        self._setup_routes()
        self._setup_socketio()

    def _response(self, accepted: bool):
        return jsonify({"accepted": accepted, "state": self.controller.get_view()})

    def _setup_routes(self):
        """Setup Flask routes."""
        @self.app.route('/')
        def index():
            return render_template('game_view.html')

        @self.app.route('/api/state')
        def get_state():
            with self._lock:
                return jsonify(self.controller.get_view())

        @self.app.route('/api/settings', methods=['POST'])
        def update_settings():
            data = request.get_json(silent=True) or {}
            try:
                total_players = int(data['total_players']) if data.get('total_players') is not None else None
                spy_count = int(data['spy_count']) if data.get('spy_count') is not None else None
            except (TypeError, ValueError):
                return jsonify({"error": "total_players and spy_count must be integers"}), 400
            topic = data.get('topic')
            if topic is not None and not isinstance(topic, str):
                return jsonify({"error": "topic must be a string"}), 400

            with self._lock:
                accepted = self.controller.update_settings(
                    total_players=total_players, spy_count=spy_count, topic=topic
                )
                return self._response(accepted)

        @self.app.route('/api/start', methods=['POST'])
        def start_game():
            with self._lock:
                word_request = self.controller.begin_generation()
            if word_request is None:
                with self._lock:
                    return self._response(False)

            word_pair = asyncio.run(self.controller.fetch_word_pair(word_request))
            with self._lock:
                accepted = self.controller.finish_generation(word_request, word_pair)
                return self._response(accepted)

        @self.app.route('/api/reveal/toggle', methods=['POST'])
        def toggle_reveal():
            with self._lock:
                return self._response(self.controller.toggle_reveal())

        @self.app.route('/api/reveal/advance', methods=['POST'])
        def advance():
            with self._lock:
                return self._response(self.controller.advance())

        @self.app.route('/api/eliminate/<int:seat>', methods=['POST'])
        def eliminate(seat: int):
            with self._lock:
                return self._response(self.controller.eliminate(seat))

        @self.app.route('/api/end', methods=['POST'])
        def end_game():
            with self._lock:
                return self._response(self.controller.end_game())

        @self.app.route('/api/restart', methods=['POST'])
        def restart():
            with self._lock:
                return self._response(self.controller.restart())

    def _setup_socketio(self):
        """Setup SocketIO event handlers."""
        @self.socketio.on('connect')
        def handle_connect():
            self.clients_connected += 1
            print(f"Client connected. Total clients: {self.clients_connected}")
            emit('game_state_update', {'game_state': self.controller.get_view()})

        @self.socketio.on('disconnect')
        def handle_disconnect():
            self.clients_connected -= 1
            print(f"Client disconnected. Total clients: {self.clients_connected}")

    def _broadcast_event(self, event_type: str, data: Dict[str, Any]) -> None:
        """Broadcast an event to all connected clients."""
        if self.clients_connected > 0:
            self.socketio.emit(event_type, data)

    def start(self) -> None:
        """Start the web server."""
        print(f"\n{'='*60}")
        print(f"Starting web server on http://{self.host}:{self.port}")
        print(f"{'='*60}\n")
        self.socketio.run(self.app, host=self.host, port=self.port, debug=False, allow_unsafe_werkzeug=True)
