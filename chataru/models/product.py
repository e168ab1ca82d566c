"""
Product Model
"""

from chataru.extensions import db
from chataru.models.base import utcnow, isoformat


class Product(db.Model):
    """Catalogue entry; ``image`` is the public path of its stored picture"""
    __tablename__ = 'products'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.Text, nullable=False)
    price = db.Column(db.Integer, nullable=False)  # minor currency unit
    description = db.Column(db.Text, nullable=False, default='')
    image = db.Column(db.Text, nullable=False)
    created_at = db.Column(db.DateTime(timezone=True), default=utcnow, nullable=False, index=True)

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'price': self.price,
            'description': self.description or '',
            'image': self.image,
            'created_at': isoformat(self.created_at),
        }

    def __repr__(self):
        return f'<Product {self.name} {self.price}>'
