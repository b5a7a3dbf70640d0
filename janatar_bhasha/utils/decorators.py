"""Role-based access decorators."""

from functools import wraps
from flask import redirect, url_for, flash, abort, request, jsonify
from flask_login import current_user


def admin_required(f):
    """Decorator to require admin role."""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        if not current_user.is_authenticated:
            return redirect(url_for('auth.login', next=request.path))
        if not current_user.is_admin():
            flash('Access denied. Admin privileges required.', 'danger')
            abort(403)
        return f(*args, **kwargs)
    return decorated_function


def api_admin_required(f):
    """JSON flavour of ``admin_required``: 401/403 instead of redirects."""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        if not current_user.is_authenticated:
            return jsonify({'success': False, 'message': 'Unauthorized'}), 401
        if not current_user.is_admin():
            return jsonify({'success': False, 'message': 'Access denied'}), 403
        return f(*args, **kwargs)
    return decorated_function
