"""Admin dashboard routes."""

from flask import Blueprint, render_template, redirect, url_for, flash, request, current_app, abort
from flask_login import login_required, current_user
from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from janatar_bhasha.extensions import db
from janatar_bhasha.exceptions import EpaperSiteError, NotFound
from janatar_bhasha.forms.epaper import EpaperUploadForm
from janatar_bhasha.models import Epaper, ContactMessage
from janatar_bhasha.services.publishing import publish_epaper, delete_epaper
from janatar_bhasha.utils.decorators import admin_required

admin_bp = Blueprint('admin', __name__)


@admin_bp.route('/')
@admin_bp.route('/dashboard')
@login_required
@admin_required
def dashboard():
    """Overview of publications and messages."""
    total_papers = Epaper.query.count()
    total_views = db.session.query(func.sum(Epaper.views)).scalar() or 0
    total_messages = ContactMessage.query.count()
    unread_count = ContactMessage.unread_count()

    latest_papers = Epaper.query.order_by(Epaper.date.desc()).limit(5).all()
    recent_messages = ContactMessage.query.order_by(
        ContactMessage.created_at.desc()
    ).limit(5).all()

    return render_template('admin/dashboard.html',
                           total_papers=total_papers,
                           total_views=total_views,
                           total_messages=total_messages,
                           unread_count=unread_count,
                           latest_papers=latest_papers,
                           recent_messages=recent_messages)


# --- E-Paper Management ---
@admin_bp.route('/epapers')
@login_required
@admin_required
def epapers():
    """Published e-papers and the upload form."""
    papers = Epaper.query.order_by(Epaper.date.desc()).all()
    return render_template('admin/epapers.html', papers=papers, form=EpaperUploadForm())


@admin_bp.route('/epapers/upload', methods=['POST'])
@login_required
@admin_required
def upload_epaper():
    """Upload a PDF and publish it for the chosen date."""
    form = EpaperUploadForm()
    if not form.validate_on_submit():
        for errors in form.errors.values():
            for error in errors:
                flash(error, 'danger')
        papers = Epaper.query.order_by(Epaper.date.desc()).all()
        return render_template('admin/epapers.html', papers=papers, form=form), 400

    try:
        paper = publish_epaper(form.pdf.data, form.date.data, current_user.id)
    except EpaperSiteError as e:
        flash(e.message, 'danger')
        return redirect(url_for('admin.epapers'))
    except SQLAlchemyError:
        current_app.logger.exception('Saving e-paper for %s failed', form.date.data)
        flash('Failed to save the e-paper. Please try again.', 'danger')
        return redirect(url_for('admin.epapers'))

    flash(f'E-Paper published for {paper.date.strftime("%d %B %Y")}!', 'success')
    return redirect(url_for('admin.epapers'))


@admin_bp.route('/epapers/<int:paper_id>/delete', methods=['POST'])
@login_required
@admin_required
def remove_epaper(paper_id):
    """Delete an e-paper record."""
    try:
        delete_epaper(paper_id)
    except NotFound:
        abort(404)

    flash('E-Paper deleted successfully.', 'success')
    return redirect(url_for('admin.epapers'))


# --- Contact Messages ---
@admin_bp.route('/messages')
@login_required
@admin_required
def messages():
    """Contact messages."""
    status = request.args.get('status', '')

    query = ContactMessage.query

    if status == 'unread':
        query = query.filter_by(is_read=False)
    elif status == 'read':
        query = query.filter_by(is_read=True)

    messages = query.order_by(
        ContactMessage.created_at.desc(), ContactMessage.id.desc()
    ).all()

    return render_template('admin/contact_messages.html',
                           messages=messages,
                           current_status=status)


@admin_bp.route('/messages/<int:message_id>')
@login_required
@admin_required
def message_detail(message_id):
    """Single message view."""
    message = db.get_or_404(ContactMessage, message_id)
    return render_template('admin/message_detail.html', message=message)


@admin_bp.route('/messages/<int:message_id>/toggle-read', methods=['POST'])
@login_required
@admin_required
def toggle_message_read(message_id):
    """Mark message as read or unread."""
    message = db.get_or_404(ContactMessage, message_id)
    message.is_read = not message.is_read
    db.session.commit()

    flash('Marked as read.' if message.is_read else 'Marked as unread.', 'success')
    next_page = request.form.get('next', '')
    if not next_page.startswith('/') or next_page.startswith('//'):
        next_page = url_for('admin.messages')
    return redirect(next_page)


@admin_bp.route('/messages/<int:message_id>/delete', methods=['POST'])
@login_required
@admin_required
def delete_message(message_id):
    """Delete a contact message."""
    message = db.get_or_404(ContactMessage, message_id)
    db.session.delete(message)
    db.session.commit()

    flash('Message deleted successfully.', 'success')
    return redirect(url_for('admin.messages'))
