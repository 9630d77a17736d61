import logging

from flask import Flask
from flask_cors import CORS

from config import SECRET_KEY, LOG_LEVEL
from routes import init_routes

logger = logging.getLogger(__name__)


def create_app():
    """Application factory pattern for better testing and configuration."""
    app = Flask(__name__)
    app.config["SECRET_KEY"] = SECRET_KEY

    # Enable CORS for all routes
    CORS(app)

    # Initialize routes
    init_routes(app)

    logger.info("Pagination service initialized")
    return app

# Create the app instance
app = create_app()

# === Main ===
if __name__ == "__main__":
    import os
    logging.basicConfig(
        level=LOG_LEVEL,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    debug_mode = os.getenv('FLASK_ENV') != 'production'
    app.run(host='0.0.0.0', port=5001, debug=debug_mode)
