"""
WSGI Entry Point for Production Deployment
"""

import os

# Select production configuration before the app module reads it
if not os.environ.get('FLASK_ENV'):
    os.environ['FLASK_ENV'] = 'production'

from app import app  # noqa: E402

# Ensure we're not in debug mode for production
app.config['DEBUG'] = False

if __name__ == "__main__":
    # This should only be used for development testing
    # In production, use: gunicorn -c gunicorn.conf.py wsgi:app
    app.run(host='0.0.0.0', port=int(os.environ.get('PORT', 5000)))
