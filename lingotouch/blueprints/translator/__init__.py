# blueprints/translator/__init__.py

from flask import Blueprint

# Initialize the translator blueprint
translator_bp = Blueprint(
    'translator',              # Blueprint name
    __name__,                  # Blueprint's import name
    template_folder='templates'
)

# Import routes to register them with the blueprint
from . import routes  # noqa: E402,F401
