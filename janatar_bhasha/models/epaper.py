"""E-paper model."""

from datetime import datetime
from janatar_bhasha.extensions import db
from janatar_bhasha.exceptions import Conflict, NotFound


class Epaper(db.Model):
    """One published edition: a PDF tied to a single calendar date."""
    __tablename__ = 'epapers'

    id = db.Column(db.Integer, primary_key=True)
    date = db.Column(db.Date, unique=True, nullable=False, index=True)
    pdf_url = db.Column(db.String(500), nullable=False)
    file_id = db.Column(db.String(255), nullable=False)  # Storage object key
    file_name = db.Column(db.String(255), nullable=False)
    file_size = db.Column(db.Integer)
    page_count = db.Column(db.Integer)
    uploaded_by = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=False)
    views = db.Column(db.Integer, default=0, nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    @staticmethod
    def available_dates():
        """Published dates, newest first."""
        rows = db.session.query(Epaper.date).order_by(Epaper.date.desc()).all()
        return [row[0] for row in rows]

    @staticmethod
    def for_date(day):
        paper = Epaper.query.filter_by(date=day).first()
        if paper is None:
            raise NotFound('No paper found for this date')
        return paper

    @staticmethod
    def latest():
        return Epaper.query.order_by(Epaper.date.desc()).first()

    @staticmethod
    def current(today):
        """Today's paper, or the most recent one when today has none."""
        paper = Epaper.query.filter_by(date=today).first()
        if paper is None:
            paper = Epaper.latest()
        return paper

    @staticmethod
    def publish(day, pdf_url, file_id, file_name, uploaded_by, file_size=None, page_count=None):
        """Add a new edition to the session; one per date."""
        if Epaper.query.filter_by(date=day).first() is not None:
            raise Conflict(f'An e-paper already exists for {day.isoformat()}')

        paper = Epaper(
            date=day,
            pdf_url=pdf_url,
            file_id=file_id,
            file_name=file_name,
            file_size=file_size,
            page_count=page_count,
            uploaded_by=uploaded_by,
            views=0
        )
        db.session.add(paper)
        return paper

    def to_dict(self):
        return {
            'id': self.id,
            'date': self.date.isoformat(),
            'pdf_url': self.pdf_url,
            'file_id': self.file_id,
            'file_name': self.file_name,
            'file_size': self.file_size,
            'page_count': self.page_count,
            'uploaded_by': self.uploaded_by,
            'views': self.views,
            'created_at': self.created_at.isoformat() if self.created_at else None,
            'updated_at': self.updated_at.isoformat() if self.updated_at else None,
        }

    def __repr__(self):
        return f'<Epaper {self.date}>'
