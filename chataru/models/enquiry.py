"""
Enquiry Model
"""

from chataru.extensions import db
from chataru.models.base import utcnow, isoformat


class Enquiry(db.Model):
    """Contact-form submission. Rows are never updated or deleted."""
    __tablename__ = 'enquiries'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.Text, nullable=False)
    email = db.Column(db.Text, nullable=False)
    phone = db.Column(db.Text, default='')
    message = db.Column(db.Text, nullable=False)
    source_page = db.Column(db.Text, default='')
    created_at = db.Column(db.DateTime(timezone=True), default=utcnow, nullable=False, index=True)

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'email': self.email,
            'phone': self.phone or '',
            'message': self.message,
            'source_page': self.source_page or '',
            'created_at': isoformat(self.created_at),
        }

    def __repr__(self):
        return f'<Enquiry {self.email}>'
