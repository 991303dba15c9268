"""
Recipe Model

Contains the Recipe model. Ingredients, instructions and tags are stored as
JSON lists of strings in the order the author wrote them.
"""

from datetime import datetime, timezone

from constants import DEFAULT_SERVINGS, VISIBILITY_PUBLIC
from .base import db


def _utcnow():
    return datetime.now(timezone.utc)


def _isoformat(value):
    return value.isoformat() if value else None


class Recipe(db.Model):
    """Recipe with metadata, ingredient lines and steps."""
    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(200), nullable=False, index=True)
    description = db.Column(db.Text, default='')
    link = db.Column(db.String(500), default='')  # page the recipe was imported from
    cook_time = db.Column(db.Integer, default=0)  # minutes
    prep_time = db.Column(db.Integer, default=0)  # minutes
    servings = db.Column(db.Float, default=DEFAULT_SERVINGS)
    tags = db.Column(db.JSON, default=list)
    ingredients = db.Column(db.JSON, default=list)  # e.g. ["2 cups flour", "1/2 tsp salt"]
    instructions = db.Column(db.JSON, default=list)
    # 'public' recipes can be opened from a share link
    visibility = db.Column(db.String(20), default=VISIBILITY_PUBLIC, index=True)
    created_at = db.Column(db.DateTime, default=_utcnow, index=True)
    updated_at = db.Column(db.DateTime, default=_utcnow, onupdate=_utcnow)

    @property
    def is_public(self):
        return self.visibility == VISIBILITY_PUBLIC

    def to_dict(self):
        """Recipe payload in the shape the extraction service and API use."""
        return {
            'id': self.id,
            'title': self.title,
            'description': self.description or '',
            'link': self.link or '',
            'cookTime': self.cook_time or 0,
            'prepTime': self.prep_time or 0,
            'servings': self.servings,
            'tags': list(self.tags or []),
            'ingredients': list(self.ingredients or []),
            'instructions': list(self.instructions or []),
            'visibility': self.visibility or VISIBILITY_PUBLIC,
            'createdAt': _isoformat(self.created_at),
            'updatedAt': _isoformat(self.updated_at),
        }
