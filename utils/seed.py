"""
Seed Module - Populate empty sections with the default demo content
"""

from flask import current_app
from models import SINGLETON_MODELS, LIST_MODELS
from .data import count_rows, insert_row, upsert_singleton, editable_columns
from .defaults import get_default_section
from .forms import parse_date


def _fields_for(model, item):
    allowed = set(editable_columns(model))
    fields = {k: v for k, v in item.items() if k in allowed}
    for key in ('start_date', 'end_date'):
        if fields.get(key):
            fields[key] = parse_date(fields[key])
    return fields


def seed_empty_sections():
    """
    Insert default content into every section that has no rows

    Sections that already hold data are left untouched.

    Returns:
        dict: section name -> number of rows inserted
    """
    inserted = {}

    for name, model in SINGLETON_MODELS.items():
        if count_rows(model) == 0:
            upsert_singleton(model, _fields_for(model, get_default_section(name)))
            inserted[name] = 1

    for name, model in LIST_MODELS.items():
        if count_rows(model) == 0:
            items = get_default_section(name)
            for position, item in enumerate(items):
                fields = _fields_for(model, item)
                fields['order_index'] = position
                insert_row(model, fields)
            inserted[name] = len(items)

    current_app.logger.info(f"Seeded sections: {inserted or 'none'}")
    return inserted
