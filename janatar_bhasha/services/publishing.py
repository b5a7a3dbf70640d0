"""Publishing and removing e-papers.

Publishing is two steps: the PDF goes to object storage first and the
metadata record is written second. When the record cannot be written the
stored object is deleted again so no orphan is left behind.
"""

import os

from flask import current_app
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from janatar_bhasha.exceptions import Conflict, InvalidInput, NotFound, StorageError
from janatar_bhasha.extensions import db, storage
from janatar_bhasha.models import Epaper
from janatar_bhasha.services.storage import PDF_CONTENT_TYPE
from janatar_bhasha.services.viewer import count_pages


def _is_pdf_upload(file_storage):
    if file_storage.mimetype == PDF_CONTENT_TYPE:
        return True
    return (file_storage.filename or '').lower().endswith('.pdf')


def store_pdf(file_storage, day):
    """Validate an uploaded PDF and put it in storage.

    Returns ``(stored_file, page_count)``.
    """
    if file_storage is None or not file_storage.filename:
        raise InvalidInput('File and date are required')
    if not _is_pdf_upload(file_storage):
        raise InvalidInput('Only PDF files are allowed')

    page_count = count_pages(file_storage.stream)
    file_name = os.path.basename(file_storage.filename)
    stored = storage.upload(file_storage.stream, file_name, day)

    current_app.logger.info('Stored %s for %s as %s (%d pages)',
                            file_name, day.isoformat(), stored.file_id, page_count)
    return stored, page_count


def _discard_stored(file_id):
    try:
        storage.delete(file_id)
    except StorageError as e:
        current_app.logger.error('Could not remove orphaned upload %s: %s', file_id, e)
    else:
        current_app.logger.info('Removed orphaned upload %s', file_id)


def publish_epaper(file_storage, day, uploaded_by):
    """Store the PDF, then create its record."""
    if Epaper.query.filter_by(date=day).first() is not None:
        raise Conflict(f'An e-paper already exists for {day.isoformat()}')

    stored, page_count = store_pdf(file_storage, day)

    try:
        paper = Epaper.publish(
            day,
            pdf_url=stored.url,
            file_id=stored.file_id,
            file_name=stored.name,
            file_size=stored.size,
            page_count=page_count,
            uploaded_by=uploaded_by
        )
        db.session.commit()
    except IntegrityError:
        db.session.rollback()
        _discard_stored(stored.file_id)
        raise Conflict(f'An e-paper already exists for {day.isoformat()}')
    except (Conflict, SQLAlchemyError):
        db.session.rollback()
        _discard_stored(stored.file_id)
        raise

    current_app.logger.info('Published e-paper %s for %s', paper.id, day.isoformat())
    return paper


def delete_epaper(paper_id):
    """Delete a record; the stored PDF is kept unless configured otherwise."""
    paper = db.session.get(Epaper, paper_id)
    if paper is None:
        raise NotFound('Paper not found')

    file_id = paper.file_id
    db.session.delete(paper)
    db.session.commit()
    current_app.logger.info('Deleted e-paper %s', paper_id)

    if current_app.config.get('EPAPER_DELETE_STORED_FILES'):
        try:
            storage.delete(file_id)
        except StorageError as e:
            current_app.logger.warning('Stored file %s was not deleted: %s', file_id, e)
