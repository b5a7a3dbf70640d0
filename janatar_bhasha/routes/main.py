"""Main public routes."""

from flask import Blueprint, render_template, request, current_app, redirect, url_for, flash
from janatar_bhasha.extensions import db
from janatar_bhasha.exceptions import InvalidInput, NotFound
from janatar_bhasha.forms.contact import ContactForm
from janatar_bhasha.models import Epaper, ContactMessage
from janatar_bhasha.services.directory import EpaperDirectory, parse_date, local_today
from janatar_bhasha.services.view_counter import track_view
from janatar_bhasha.services.viewer import DocumentViewer

main_bp = Blueprint('main', __name__)


def _published(directory, value):
    """``value`` as a published date, or None."""
    try:
        return directory.select(parse_date(value))
    except (InvalidInput, NotFound):
        return None


def _epaper_context(count_view=True):
    """Work out which edition to show and build the template context."""
    today = local_today(current_app.config['EPAPER_TIMEZONE'])
    directory = EpaperDirectory(Epaper.available_dates())

    shown = directory.resolve_current(today)
    current_arg = request.args.get('current')
    if current_arg:
        shown = _published(directory, current_arg) or shown

    requested = request.args.get('date')
    if requested:
        selected = _published(directory, requested)
        if selected is None:
            flash('এই তারিখের কোনো ই-পেপার নেই। No e-paper available for this date.', 'warning')
            count_view = False
        else:
            shown = selected

    paper = viewer = None
    previous_date = next_date = None
    position = 0
    if shown is not None:
        page_arg = request.args.get('page')
        paper = Epaper.for_date(shown)
        # Page turns within an edition are not new views
        if count_view and page_arg is None:
            track_view(paper.id)
        viewer = DocumentViewer.open(paper, page_arg or 1)
        previous_date = directory.previous_date(shown)
        next_date = directory.next_date(shown)
        position = directory.position(shown)

    return dict(
        paper=paper,
        viewer=viewer,
        directory=directory,
        previous_date=previous_date,
        next_date=next_date,
        position=position,
    )


@main_bp.route('/')
def index():
    """Landing page: today's e-paper and the contact form."""
    context = _epaper_context()
    return render_template('main/index.html', form=ContactForm(), **context)


@main_bp.route('/contact', methods=['POST'])
def contact():
    """Contact form submission."""
    form = ContactForm()
    if not form.validate_on_submit():
        context = _epaper_context(count_view=False)
        return render_template('main/index.html', form=form, **context), 400

    message = ContactMessage(
        name=form.name.data.strip(),
        email=form.email.data.strip(),
        phone=(form.phone.data or '').strip() or None,
        subject=(form.subject.data or '').strip() or None,
        message=form.message.data.strip()
    )
    db.session.add(message)
    db.session.commit()
    current_app.logger.info('Contact message %s received from %s', message.id, message.email)

    flash('ধন্যবাদ! আপনার বার্তা পাঠানো হয়েছে। Thank you for your message!', 'success')
    return redirect(url_for('main.index', _anchor='contact'))
