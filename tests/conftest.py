import os
import sys

import pytest

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
os.environ['FLASK_ENV'] = 'testing'

from app import app as flask_app  # noqa: E402
from models import db, Recipe  # noqa: E402


@pytest.fixture
def app():
    with flask_app.app_context():
        db.create_all()
        yield flask_app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def pancakes(app):
    recipe = Recipe(
        title='Pancakes',
        servings=4,
        tags=['Desserts'],
        ingredients=['2 cups flour', '1/2 tsp salt', 'a pinch of pepper'],
        instructions=['Mix', 'Fry'],
    )
    db.session.add(recipe)
    db.session.commit()
    return recipe
