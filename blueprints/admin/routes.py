"""
Admin Routes - Content management
Handles: Singleton section editors (hero, about, contact), list editors
(skills, experience, projects, education, achievements), media uploads
and demo-content seeding.
"""

from flask import render_template, redirect, url_for, request, flash, current_app, jsonify
from models import SINGLETON_MODELS, LIST_MODELS
from utils.data import (
    ContentStoreError, fetch_singleton, fetch_list, get_row, count_rows,
    next_order_index, insert_row, update_row, upsert_singleton, delete_row,
    move_row, row_to_dict
)
from utils.decorators import login_required, api_login_required
from utils.defaults import get_empty_singleton
from utils.forms import FORM_PARSERS, missing_required, SKILL_CATEGORIES, ACHIEVEMENT_ICONS
from utils.seed import seed_empty_sections
from utils.storage import UploadRejected, get_file_size, validate_media, store_media
from . import admin_bp

LIST_ENTITIES = 'skills, experience, projects, education, achievements'

SECTIONS = [
    {'key': 'hero', 'name': 'Hero Section', 'description': 'Main landing section with title and CTA'},
    {'key': 'about', 'name': 'About', 'description': 'About me section with bio and image'},
    {'key': 'skills', 'name': 'Skills', 'description': 'Skills and expertise'},
    {'key': 'experience', 'name': 'Experience', 'description': 'Work history and experience'},
    {'key': 'projects', 'name': 'Projects', 'description': 'Portfolio projects'},
    {'key': 'achievements', 'name': 'Achievements', 'description': 'Awards and honors'},
    {'key': 'education', 'name': 'Education', 'description': 'Educational background'},
    {'key': 'contact', 'name': 'Contact', 'description': 'Contact information and social links'},
]

SINGLETON_LABELS = {
    'hero': 'Hero section',
    'about': 'About section',
    'contact': 'Contact info',
}

LIST_EDITORS = {
    'skills': {
        'label': 'Skills',
        'singular': 'Skill',
        'columns': [('name', 'Name'), ('category', 'Category'), ('proficiency', 'Proficiency')],
    },
    'experience': {
        'label': 'Experience',
        'singular': 'Experience',
        'columns': [('position', 'Position'), ('company', 'Company'), ('location', 'Location')],
    },
    'projects': {
        'label': 'Projects',
        'singular': 'Project',
        'columns': [('title', 'Title'), ('technologies', 'Technologies'), ('featured', 'Featured')],
    },
    'education': {
        'label': 'Education',
        'singular': 'Education',
        'columns': [('institution', 'Institution'), ('degree', 'Degree'), ('field_of_study', 'Field')],
    },
    'achievements': {
        'label': 'Achievements',
        'singular': 'Achievement',
        'columns': [('title', 'Title'), ('icon', 'Icon')],
    },
}


def _required_message(missing):
    names = ', '.join(m.replace('_', ' ').capitalize() for m in missing)
    return f"{names} {'is' if len(missing) == 1 else 'are'} required"


@admin_bp.route('/')
@login_required
def index():
    """Admin dashboard with a card per section"""
    counts = {}
    for name, model in {**SINGLETON_MODELS, **LIST_MODELS}.items():
        try:
            counts[name] = count_rows(model)
        except ContentStoreError:
            counts[name] = None
    return render_template('admin/index.html', sections=SECTIONS, counts=counts)


@admin_bp.route('/seed', methods=['POST'])
@login_required
def seed():
    """Populate empty sections with default demo content"""
    try:
        inserted = seed_empty_sections()
    except ContentStoreError as e:
        current_app.logger.error(f"Seeding failed: {str(e)}")
        flash('Error seeding database', 'error')
        return redirect(url_for('admin.index'))

    if inserted:
        flash(f"Seeded: {', '.join(inserted)}", 'success')
    else:
        flash('All sections already have content', 'info')
    return redirect(url_for('admin.index'))


# ==================== Singleton editors ====================

def _singleton_editor(name):
    """Shared GET/POST handling for hero, about and contact"""
    model = SINGLETON_MODELS[name]
    label = SINGLETON_LABELS[name]
    template = f'admin/{name}.html'

    if request.method == 'POST':
        fields = FORM_PARSERS[name](request.form)
        row_id = request.form.get('id') or None
        missing = missing_required(name, fields)
        if missing:
            flash(_required_message(missing), 'error')
            return render_template(template, data={**fields, 'id': row_id or ''}), 400

        try:
            upsert_singleton(model, fields, row_id=row_id)
        except ContentStoreError:
            flash('Error saving changes', 'error')
            return render_template(template, data={**fields, 'id': row_id or ''})

        flash(f'{label} updated successfully!', 'success')
        return redirect(url_for(f'admin.{name}'))

    data = get_empty_singleton(name)
    try:
        row = fetch_singleton(model)
        if row is not None:
            data = row_to_dict(row)
    except ContentStoreError:
        flash(f'Could not load {label.lower()}', 'error')
    return render_template(template, data=data)


@admin_bp.route('/hero', methods=['GET', 'POST'])
@login_required
def hero():
    """Edit hero section"""
    return _singleton_editor('hero')


@admin_bp.route('/about', methods=['GET', 'POST'])
@login_required
def about():
    """Edit about section"""
    return _singleton_editor('about')


@admin_bp.route('/contact', methods=['GET', 'POST'])
@login_required
def contact():
    """Edit contact information"""
    return _singleton_editor('contact')


# ==================== List editors ====================

def _render_item_form(entity, item, status=200):
    return render_template(f'admin/forms/{entity}.html',
                           entity=entity,
                           editor=LIST_EDITORS[entity],
                           item=item,
                           skill_categories=SKILL_CATEGORIES,
                           achievement_icons=ACHIEVEMENT_ICONS), status


@admin_bp.route(f'/<any({LIST_ENTITIES}):entity>')
@login_required
def list_items(entity):
    """List rows of a list entity in display order"""
    items = []
    try:
        items = [row_to_dict(r) for r in fetch_list(LIST_MODELS[entity])]
    except ContentStoreError:
        flash(f'Failed to load {LIST_EDITORS[entity]["label"].lower()}', 'error')
    return render_template('admin/list.html',
                           entity=entity,
                           editor=LIST_EDITORS[entity],
                           items=items)


@admin_bp.route(f'/<any({LIST_ENTITIES}):entity>/new', methods=['GET', 'POST'])
@admin_bp.route(f'/<any({LIST_ENTITIES}):entity>/<item_id>/edit', methods=['GET', 'POST'])
@login_required
def edit_item(entity, item_id=None):
    """Create or edit one row of a list entity"""
    model = LIST_MODELS[entity]
    editor = LIST_EDITORS[entity]

    existing = None
    if item_id:
        try:
            existing = get_row(model, item_id)
        except ContentStoreError:
            existing = None
        if existing is None:
            flash(f"{editor['singular']} not found", 'error')
            return redirect(url_for('admin.list_items', entity=entity))

    if request.method == 'POST':
        fields = FORM_PARSERS[entity](request.form)
        missing = missing_required(entity, fields)
        if missing:
            flash(_required_message(missing), 'error')
            return _render_item_form(entity, {**fields, 'id': item_id}, status=400)

        try:
            if item_id:
                update_row(model, item_id, fields)
                flash(f"{editor['singular']} updated successfully", 'success')
            else:
                fields['order_index'] = next_order_index(model)
                insert_row(model, fields)
                flash(f"{editor['singular']} created successfully", 'success')
        except ContentStoreError:
            flash(f"Failed to save {editor['singular'].lower()}", 'error')
            return _render_item_form(entity, {**fields, 'id': item_id})

        return redirect(url_for('admin.list_items', entity=entity))

    item = row_to_dict(existing) if existing is not None else {'id': None}
    return _render_item_form(entity, item)


@admin_bp.route(f'/<any({LIST_ENTITIES}):entity>/<item_id>/delete', methods=['POST'])
@login_required
def delete_item(entity, item_id):
    """Delete one row by id"""
    editor = LIST_EDITORS[entity]
    try:
        if delete_row(LIST_MODELS[entity], item_id):
            flash(f"{editor['singular']} deleted successfully", 'success')
        else:
            flash(f"{editor['singular']} not found", 'error')
    except ContentStoreError:
        flash(f"Failed to delete {editor['singular'].lower()}", 'error')
    return redirect(url_for('admin.list_items', entity=entity))


@admin_bp.route(f'/<any({LIST_ENTITIES}):entity>/<item_id>/move/<any(up, down):direction>', methods=['POST'])
@login_required
def move_item(entity, item_id, direction):
    """Move a row one position up or down"""
    try:
        move_row(LIST_MODELS[entity], item_id, direction)
    except ContentStoreError:
        flash('Failed to reorder', 'error')
    return redirect(url_for('admin.list_items', entity=entity))


# ==================== Media uploads ====================

@admin_bp.route('/upload', methods=['POST'])
@api_login_required
def upload():
    """Store an image or video and return its public URL"""
    file = request.files.get('file')
    kind = request.form.get('kind', 'image')
    folder = request.form.get('folder', 'images')

    if file is None:
        return jsonify({'error': 'No file selected'}), 400

    try:
        validate_media(file.filename, file.mimetype, get_file_size(file), kind)
    except UploadRejected as e:
        current_app.logger.warning(f"Upload rejected ({kind}, {file.filename}): {str(e)}")
        return jsonify({'error': str(e)}), 400

    try:
        url = store_media(file, folder)
    except OSError as e:
        current_app.logger.error(f"Error uploading {kind}: {str(e)}")
        return jsonify({'error': f'Error uploading {kind}'}), 500

    return jsonify({'success': True, 'url': url})
