"""
Chataru Craft site backend
Application Entry Point

This file serves as the entry point for the Flask application.
It uses the application factory pattern defined in the chataru package.
"""

import logging

from chataru import create_app
from chataru.config import Config

logging.basicConfig(
    level=Config.LOG_LEVEL,
    format='%(asctime)s %(levelname)s %(name)s: %(message)s',
)

# Create the Flask application using the factory
app = create_app()

if __name__ == '__main__':
    app.run(debug=False, host='0.0.0.0', port=Config.PORT)
