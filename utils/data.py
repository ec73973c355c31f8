"""
Data Management Module - Content store for the portfolio sections
Table-level read/write helpers over SQLAlchemy plus the section loaders
used by the public site (which fall back to default content).
"""

from datetime import date, datetime
from flask import current_app
from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from extensions import db
from models import SINGLETON_MODELS, LIST_MODELS
from .defaults import get_default_section

PROTECTED_COLUMNS = {'id', 'created_at', 'updated_at'}


class ContentStoreError(Exception):
    """Raised when a content table cannot be read or written"""


def _table(model):
    return model.__tablename__


def editable_columns(model):
    """Column names an editor is allowed to overwrite"""
    return [c.key for c in model.__table__.columns if c.key not in PROTECTED_COLUMNS]


def _apply_fields(row, model, fields):
    allowed = set(editable_columns(model))
    for key, value in fields.items():
        if key in allowed:
            setattr(row, key, value)


def _commit(action, model):
    try:
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.error(f"Error during {action} on {_table(model)}: {str(e)}")
        raise ContentStoreError(f"Could not {action} {_table(model)}") from e


# ==================== Reads ====================

def fetch_singleton(model):
    """
    Load the row of a singleton table

    If racing first saves left more than one row, the most recently
    updated one is returned.

    Returns:
        The row, or None when the table has no rows yet.

    Raises:
        ContentStoreError: on any database failure
    """
    query = db.select(model).order_by(model.updated_at.desc(), model.id.desc()).limit(1)
    try:
        return db.session.execute(query).scalars().first()
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.error(f"Error loading {_table(model)}: {str(e)}")
        raise ContentStoreError(f"Could not load {_table(model)}") from e


def fetch_list(model):
    """Load all rows of a list table ordered by order_index"""
    try:
        query = db.select(model).order_by(model.order_index.asc(), model.created_at.asc())
        return list(db.session.execute(query).scalars())
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.error(f"Error loading {_table(model)}: {str(e)}")
        raise ContentStoreError(f"Could not load {_table(model)}") from e


def get_row(model, row_id):
    try:
        return db.session.get(model, row_id)
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.error(f"Error loading {_table(model)} row {row_id}: {str(e)}")
        raise ContentStoreError(f"Could not load {_table(model)}") from e


def count_rows(model):
    try:
        return db.session.execute(db.select(func.count()).select_from(model)).scalar_one()
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.error(f"Error counting {_table(model)}: {str(e)}")
        raise ContentStoreError(f"Could not count {_table(model)}") from e


def next_order_index(model):
    """Next free position at the end of a list table (max + 1, or 0 when empty)"""
    try:
        current_max = db.session.execute(db.select(func.max(model.order_index))).scalar()
    except SQLAlchemyError as e:
        db.session.rollback()
        raise ContentStoreError(f"Could not read order of {_table(model)}") from e
    return 0 if current_max is None else current_max + 1


# ==================== Writes ====================

def insert_row(model, fields):
    row = model()
    _apply_fields(row, model, fields)
    db.session.add(row)
    _commit('insert', model)
    current_app.logger.info(f"Inserted {_table(model)} row {row.id}")
    return row


def update_row(model, row_id, fields):
    """Overwrite the editable fields of an existing row"""
    row = get_row(model, row_id)
    if row is None:
        raise ContentStoreError(f"No {_table(model)} row with id {row_id}")
    _apply_fields(row, model, fields)
    _commit('update', model)
    current_app.logger.info(f"Updated {_table(model)} row {row_id}")
    return row


def upsert_singleton(model, fields, row_id=None):
    """
    Insert or overwrite the singleton row of a table

    Last write wins: there is no version check between concurrent editors.
    Any extra rows left by racing first saves are removed.
    """
    row = get_row(model, row_id) if row_id else None
    if row is None:
        row = fetch_singleton(model)
    if row is None:
        row = model()
        if row_id:
            row.id = row_id
        db.session.add(row)
    else:
        try:
            extras = db.session.execute(db.select(model).where(model.id != row.id)).scalars().all()
        except SQLAlchemyError as e:
            db.session.rollback()
            raise ContentStoreError(f"Could not load {_table(model)}") from e
        for extra in extras:
            current_app.logger.warning(f"Removing duplicate {_table(model)} row {extra.id}")
            db.session.delete(extra)

    _apply_fields(row, model, fields)
    row.updated_at = datetime.utcnow()
    _commit('upsert', model)
    current_app.logger.info(f"Saved {_table(model)} row {row.id}")
    return row


def delete_row(model, row_id):
    """Delete a row by id. Returns True when a row was removed."""
    row = get_row(model, row_id)
    if row is None:
        current_app.logger.warning(f"Delete requested for missing {_table(model)} row {row_id}")
        return False
    db.session.delete(row)
    _commit('delete', model)
    current_app.logger.info(f"Deleted {_table(model)} row {row_id}")
    return True


def move_row(model, row_id, direction):
    """
    Swap a row with its neighbour in list order

    The whole list is renumbered 0..n-1 afterwards, which also closes any gaps
    or duplicate order values left behind by deletions.
    """
    if direction not in ('up', 'down'):
        raise ValueError(f"Unknown direction: {direction}")

    rows = fetch_list(model)
    position = next((i for i, r in enumerate(rows) if r.id == row_id), None)
    if position is None:
        raise ContentStoreError(f"No {_table(model)} row with id {row_id}")

    target = position - 1 if direction == 'up' else position + 1
    if 0 <= target < len(rows):
        rows[position], rows[target] = rows[target], rows[position]

    for index, row in enumerate(rows):
        if row.order_index != index:
            row.order_index = index
    _commit('reorder', model)
    return rows


# ==================== Serialization ====================

def row_to_dict(row):
    """Convert a model row to a plain dictionary"""
    if row is None:
        return None
    result = {}
    for column in row.__table__.columns:
        value = getattr(row, column.key)
        if isinstance(value, (datetime, date)):
            value = value.isoformat()
        result[column.key] = value
    return result


# ==================== Public section loaders ====================

def load_section(name):
    """
    Load one public section, falling back to default content

    A read failure is logged and masked; an empty table is treated the same
    way so the page never renders an empty section.
    """
    if name in SINGLETON_MODELS:
        model = SINGLETON_MODELS[name]
        try:
            row = fetch_singleton(model)
        except ContentStoreError as e:
            current_app.logger.error(f"Error fetching {name} section, using defaults: {str(e)}")
            return get_default_section(name)
        return row_to_dict(row) if row is not None else get_default_section(name)

    if name in LIST_MODELS:
        model = LIST_MODELS[name]
        try:
            rows = fetch_list(model)
        except ContentStoreError as e:
            current_app.logger.error(f"Error fetching {name} section, using defaults: {str(e)}")
            return get_default_section(name)
        return [row_to_dict(r) for r in rows] if rows else get_default_section(name)

    raise KeyError(name)


def load_site_content():
    """Load every public section independently"""
    names = list(SINGLETON_MODELS) + list(LIST_MODELS)
    return {name: load_section(name) for name in names}
