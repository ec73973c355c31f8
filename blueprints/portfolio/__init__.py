"""
Portfolio Blueprint - Public portfolio views
Handles: Single-page portfolio, resume, section JSON, robots.txt, sitemap.xml
"""

from flask import Blueprint

portfolio_bp = Blueprint('portfolio', __name__, url_prefix='')

from . import routes
