"""
API Route Handlers for Trump Against Humanity.

Pure routing layer that delegates to the managers.
Contains no business logic - only request/response handling.
"""

import logging
from datetime import datetime
from flask import jsonify

logger = logging.getLogger(__name__)

API_VERSION = '1.0.0'


def register_api_handlers(app, lobby_manager, environment='development'):
    """
    Register all API route handlers.

    Args:
        app: Flask application instance
        lobby_manager: Session directory, for activity counts
        environment: Deployment environment name reported to clients
    """

    @app.route('/health')
    def health_check():
        """Health check endpoint."""
        try:
            with lobby_manager.lock:
                active_lobbies = lobby_manager.lobby_count
                active_players = lobby_manager.connection_manager.player_count

            return jsonify({
                'status': 'healthy',
                'timestamp': datetime.now().isoformat(),
                'environment': environment,
                'activeLobbies': active_lobbies,
                'activePlayers': active_players
            })

        except Exception as e:
            logger.error(f"Error during health check: {e}")
            return jsonify({'status': 'unhealthy'}), 500

    @app.route('/api/status')
    def api_status():
        """Server status endpoint."""
        return jsonify({
            'message': 'Trump Against Humanity server is running',
            'version': API_VERSION,
            'environment': environment
        })

    # Error handlers
    @app.errorhandler(404)
    def not_found(error):
        """Handle 404 errors."""
        return jsonify({'error': 'Not found'}), 404

    @app.errorhandler(500)
    def internal_error(error):
        """Handle 500 errors."""
        return jsonify({'error': 'Internal server error'}), 500

    logger.info("API handlers registered successfully")
