"""
authdash
Application Entry Point

This file serves as the entry point for the Flask application.
It uses the application factory pattern defined in the authdash package.
"""

import logging

from authdash import create_app

logging.basicConfig(level=logging.INFO,
                    format='%(asctime)s %(levelname)s %(name)s: %(message)s')

# Create the Flask application using the factory
app = create_app()

if __name__ == '__main__':
    logging.getLogger(__name__).info('Listening on port %s', app.config['PORT'])
    app.run(host='0.0.0.0', port=app.config['PORT'])
