"""Flask application factory."""

import os
from flask import Flask, render_template, request, jsonify
from flask_wtf.csrf import CSRFError
from .config import config
from .extensions import db, migrate, login_manager, bcrypt, csrf, storage
from .services.directory import resolve_timezone
from .utils.logging import configure_logging


def _wants_json():
    return request.path.startswith('/api/')


def create_app(config_name=None):
    """Create and configure the Flask application."""
    if config_name is None:
        config_name = os.environ.get('FLASK_CONFIG', 'development')

    app = Flask(__name__)
    app.config.from_object(config[config_name])
    configure_logging(app)
    resolve_timezone(app.config['EPAPER_TIMEZONE'])

    # Initialize extensions
    db.init_app(app)
    migrate.init_app(app, db)
    login_manager.init_app(app)
    bcrypt.init_app(app)
    csrf.init_app(app)
    storage.init_app(app)

    if app.config['SQLALCHEMY_DATABASE_URI'].startswith('sqlite:///') and not app.testing:
        os.makedirs(app.config['INSTANCE_DIR'], exist_ok=True)

    # Register blueprints
    from .routes import register_blueprints
    register_blueprints(app)

    from .commands import register_commands
    register_commands(app)

    # User loader for Flask-Login
    from .models import User

    @login_manager.user_loader
    def load_user(user_id):
        return db.session.get(User, int(user_id))

    # Error handlers
    @app.errorhandler(404)
    def not_found_error(error):
        if _wants_json():
            return jsonify({'success': False, 'message': 'Not found'}), 404
        return render_template('errors/404.html'), 404

    @app.errorhandler(403)
    def forbidden_error(error):
        if _wants_json():
            return jsonify({'success': False, 'message': 'Access denied'}), 403
        return render_template('errors/403.html'), 403

    @app.errorhandler(CSRFError)
    def csrf_error(error):
        if _wants_json():
            return jsonify({'success': False, 'message': error.description}), 400
        return render_template('errors/400.html', message=error.description), 400

    @app.errorhandler(413)
    def too_large_error(error):
        limit_mb = app.config['MAX_CONTENT_LENGTH'] // (1024 * 1024)
        message = f'File is too large (limit {limit_mb} MB)'
        if _wants_json():
            return jsonify({'success': False, 'message': message}), 413
        return render_template('errors/413.html', message=message), 413

    @app.errorhandler(500)
    def internal_error(error):
        db.session.rollback()
        if _wants_json():
            return jsonify({'success': False, 'message': 'Internal server error'}), 500
        return render_template('errors/500.html'), 500

    # Context processors
    @app.context_processor
    def inject_globals():
        from .models import ContactMessage
        from flask_login import current_user
        unread_messages = 0
        if current_user.is_authenticated and current_user.is_admin():
            unread_messages = ContactMessage.unread_count()
        return dict(unread_messages=unread_messages)

    return app
