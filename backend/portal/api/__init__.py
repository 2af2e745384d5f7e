from flask import Blueprint

api_bp = Blueprint("portal", __name__)

# Import route modules so they register with api_bp
from . import health
from . import auth
from . import catalog
from . import study_material
from . import admin
