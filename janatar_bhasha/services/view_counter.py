"""Per-edition view counting."""

from typing import Optional

from flask import current_app
from sqlalchemy.exc import SQLAlchemyError

from janatar_bhasha.exceptions import NotFound
from janatar_bhasha.extensions import db
from janatar_bhasha.models import Epaper


def increment_views(paper_id) -> int:
    """Add one view in a single UPDATE and return the new count."""
    updated = Epaper.query.filter_by(id=paper_id).update(
        {Epaper.views: Epaper.views + 1}, synchronize_session=False
    )
    if not updated:
        db.session.rollback()
        raise NotFound('Paper not found')
    db.session.commit()

    return db.session.query(Epaper.views).filter_by(id=paper_id).scalar()


def track_view(paper_id) -> Optional[int]:
    """Best-effort ``increment_views``: failures are logged, never raised."""
    try:
        return increment_views(paper_id)
    except (NotFound, SQLAlchemyError) as e:
        db.session.rollback()
        current_app.logger.warning('View tracking failed for paper %s: %s', paper_id, e)
        return None
