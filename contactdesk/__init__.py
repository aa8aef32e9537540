"""Flask application factory."""

import os
from flask import Flask, render_template, request, jsonify
from .config import config
from .errors import StoreConnectionError
from .extensions import db, migrate, csrf


def create_app(config_name=None):
    """Create and configure the Flask application."""
    if config_name is None:
        config_name = os.environ.get('FLASK_CONFIG', 'development')
    
    app = Flask(__name__)
    app.config.from_object(config[config_name])
    
    # Logging: module loggers live under the app logger's namespace
    app.logger.setLevel(app.config['LOG_LEVEL'])
    
    # Fails fast when DATABASE_URL is missing
    from .store import store
    store.init_app(app)
    
    # Initialize extensions
    db.init_app(app)
    migrate.init_app(app, db)
    csrf.init_app(app)
    
    # Register blueprints
    from .routes import register_blueprints
    register_blueprints(app)
    
    # Error handlers
    @app.errorhandler(404)
    def not_found_error(error):
        if request.path.startswith('/api/'):
            return jsonify({'success': False, 'message': 'Not found'}), 404
        return render_template('errors/404.html'), 404
    
    @app.errorhandler(500)
    def internal_error(error):
        db.session.rollback()
        if request.path.startswith('/api/'):
            return jsonify({'success': False, 'message': 'Internal server error'}), 500
        return render_template('errors/500.html'), 500
    
    @app.errorhandler(StoreConnectionError)
    def store_unavailable(error):
        app.logger.error('Database unavailable: %s', error)
        if request.path.startswith('/api/'):
            return jsonify({'success': False, 'message': 'Service unavailable'}), 503
        return render_template('errors/503.html'), 503
    
    # Context processors
    @app.context_processor
    def inject_globals():
        return dict(flash_clear_ms=app.config['FLASH_CLEAR_MS'])
    
    return app
