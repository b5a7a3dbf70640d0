"""Authentication routes."""

from urllib.parse import urlsplit

from flask import Blueprint, render_template, redirect, url_for, flash, request, current_app
from flask_login import login_user, logout_user, login_required, current_user
from janatar_bhasha.models import User
from janatar_bhasha.forms.auth import LoginForm

auth_bp = Blueprint('auth', __name__)


def _safe_next(target):
    """Only follow relative redirects."""
    if not target:
        return None
    parts = urlsplit(target)
    if parts.scheme or parts.netloc:
        return None
    return target


@auth_bp.route('/login', methods=['GET', 'POST'])
def login():
    """Dashboard login."""
    if current_user.is_authenticated:
        return redirect(url_for('admin.dashboard'))

    form = LoginForm()
    if form.validate_on_submit():
        user = User.query.filter_by(email=form.email.data.lower()).first()

        if user and user.check_password(form.password.data):
            if not user.is_active:
                flash('Your account has been deactivated.', 'danger')
                return render_template('auth/login.html', form=form)

            login_user(user, remember=form.remember.data)
            current_app.logger.info('User %s logged in', user.email)
            flash(f'Welcome back, {user.name}!', 'success')

            next_page = _safe_next(request.args.get('next'))
            if next_page:
                return redirect(next_page)
            return redirect(url_for('admin.dashboard'))
        else:
            current_app.logger.warning('Failed login for %s', form.email.data)
            flash('Invalid email or password.', 'danger')

    return render_template('auth/login.html', form=form)


@auth_bp.route('/logout')
@login_required
def logout():
    """User logout."""
    logout_user()
    flash('You have been logged out.', 'info')
    return redirect(url_for('main.index'))
