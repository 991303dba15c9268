"""
Database Base Module

Holds the Flask-SQLAlchemy instance shared by the models. Kept in its own
module so models and app.py can both import it without a cycle.
"""

from flask_sqlalchemy import SQLAlchemy

# Bound to the Flask app with db.init_app() in app.py
db = SQLAlchemy()
