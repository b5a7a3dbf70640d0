"""JSON API endpoints for AJAX operations."""

from flask import Blueprint, jsonify, request, current_app
from flask_login import current_user
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from janatar_bhasha.extensions import db, csrf
from janatar_bhasha.exceptions import Conflict, EpaperSiteError, InvalidInput, NotFound
from janatar_bhasha.models import Epaper, ContactMessage, User
from janatar_bhasha.services.directory import parse_date, local_today
from janatar_bhasha.services.publishing import store_pdf, delete_epaper
from janatar_bhasha.services.view_counter import increment_views
from janatar_bhasha.utils.decorators import api_admin_required
from janatar_bhasha.utils.validators import is_valid_email

api_bp = Blueprint('api', __name__)


@api_bp.errorhandler(EpaperSiteError)
def handle_site_error(error):
    return jsonify({'success': False, 'message': error.message}), error.status_code


@api_bp.errorhandler(SQLAlchemyError)
def handle_database_error(error):
    db.session.rollback()
    current_app.logger.exception('Database error on %s %s', request.method, request.path)
    return jsonify({'success': False, 'message': 'Database is unavailable, please try again'}), 500


def _id_arg(label):
    value = request.args.get('id', '')
    if not value:
        raise InvalidInput(f'{label} ID is required')
    try:
        return int(value)
    except ValueError:
        raise InvalidInput(f'Invalid {label.lower()} ID')


def _json_body():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise InvalidInput('Request body must be a JSON object')
    return data


# --- E-Papers ---
@api_bp.route('/papers', methods=['GET'])
def get_papers():
    """Today's paper (or the latest), one date, all dates, or all papers."""
    if request.args.get('all') == 'true':
        return all_papers()

    if request.args.get('dates') == 'true':
        dates = Epaper.available_dates()
        return jsonify({'dates': [d.isoformat() for d in dates]})

    date_arg = request.args.get('date')
    if date_arg:
        paper = Epaper.for_date(parse_date(date_arg))
        return jsonify(paper.to_dict())

    paper = Epaper.current(local_today(current_app.config['EPAPER_TIMEZONE']))
    if paper is None:
        raise NotFound('No papers available')
    return jsonify(paper.to_dict())


@api_admin_required
def all_papers():
    papers = Epaper.query.order_by(Epaper.date.desc()).all()
    return jsonify([p.to_dict() for p in papers])


@api_bp.route('/papers', methods=['POST'])
@api_admin_required
def create_paper():
    """Save the record for a PDF already put in storage."""
    data = _json_body()
    required = ('date', 'pdf_url', 'file_id', 'file_name', 'uploaded_by')
    if any(not data.get(field) for field in required):
        raise InvalidInput('Missing required fields')

    try:
        uploaded_by = int(data['uploaded_by'])
        file_size = int(data['file_size']) if data.get('file_size') is not None else None
        page_count = int(data['page_count']) if data.get('page_count') is not None else None
    except (TypeError, ValueError):
        raise InvalidInput('uploaded_by, file_size and page_count must be integers')

    if db.session.get(User, uploaded_by) is None:
        raise InvalidInput('Unknown uploader')

    paper = Epaper.publish(
        parse_date(data['date']),
        pdf_url=data['pdf_url'],
        file_id=data['file_id'],
        file_name=data['file_name'],
        file_size=file_size,
        page_count=page_count,
        uploaded_by=uploaded_by
    )
    try:
        db.session.commit()
    except IntegrityError:
        db.session.rollback()
        raise Conflict()

    return jsonify({'success': True, 'paper': paper.to_dict()}), 201


@api_bp.route('/papers', methods=['DELETE'])
@api_admin_required
def remove_paper():
    delete_epaper(_id_arg('Paper'))
    return jsonify({'success': True})


@api_bp.route('/papers/views', methods=['POST'])
@csrf.exempt
def track_paper_view():
    """Count one view of a paper."""
    data = _json_body()
    paper_id = data.get('paper_id')
    if paper_id is None or paper_id == '':
        raise InvalidInput('Paper ID is required')
    try:
        paper_id = int(paper_id)
    except (TypeError, ValueError):
        raise InvalidInput('Invalid paper ID')

    return jsonify({'views': increment_views(paper_id)})


@api_bp.route('/upload-epaper', methods=['POST'])
@api_admin_required
def upload_epaper():
    """Put a PDF in storage. The record is created by ``POST /papers``."""
    file = request.files.get('file')
    date_arg = request.form.get('date')
    if file is None or not file.filename or not date_arg:
        raise InvalidInput('File and date are required')

    day = parse_date(date_arg)
    stored, page_count = store_pdf(file, day)

    return jsonify({
        'success': True,
        'pdf_url': stored.url,
        'file_id': stored.file_id,
        'file_name': stored.name,
        'file_size': stored.size,
        'page_count': page_count,
        'date': day.isoformat(),
        'uploaded_by': current_user.id
    })


# --- Contact Messages ---
@api_bp.route('/contact', methods=['GET'])
@api_admin_required
def get_messages():
    messages = ContactMessage.query.order_by(ContactMessage.created_at.desc(),
                                             ContactMessage.id.desc()).all()
    return jsonify([m.to_dict() for m in messages])


@api_bp.route('/contact', methods=['POST'])
@csrf.exempt
def create_message():
    """Contact form submission from the landing page."""
    data = _json_body()
    name = (data.get('name') or '').strip()
    email = (data.get('email') or '').strip()
    body = (data.get('message') or '').strip()

    if not name or not email or not body:
        raise InvalidInput('Name, email, and message are required')
    if not is_valid_email(email):
        raise InvalidInput('Invalid email address')

    message = ContactMessage(
        name=name,
        email=email,
        phone=(data.get('phone') or '').strip() or None,
        subject=(data.get('subject') or '').strip() or None,
        message=body
    )
    db.session.add(message)
    db.session.commit()
    current_app.logger.info('Contact message %s received from %s', message.id, email)

    return jsonify({'success': True, 'message': message.to_dict()}), 201


@api_bp.route('/contact', methods=['PATCH'])
@api_admin_required
def update_message():
    """Mark a message read or unread."""
    message_id = _id_arg('Message')
    data = _json_body()
    if not isinstance(data.get('is_read'), bool):
        raise InvalidInput('is_read must be true or false')

    message = db.session.get(ContactMessage, message_id)
    if message is None:
        raise NotFound('Message not found')

    message.is_read = data['is_read']
    db.session.commit()
    return jsonify({'success': True, 'message': message.to_dict()})


@api_bp.route('/contact', methods=['DELETE'])
@api_admin_required
def delete_message():
    message = db.session.get(ContactMessage, _id_arg('Message'))
    if message is None:
        raise NotFound('Message not found')

    db.session.delete(message)
    db.session.commit()
    return jsonify({'success': True})
