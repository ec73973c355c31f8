"""
Forms Module - Parsing and validation of admin editor submissions
Each parser turns a request form into the plain dict of editable fields
for one entity.
"""

from datetime import datetime

REQUIRED_FIELDS = {
    'hero': ['title'],
    'about': ['title'],
    'contact': ['email'],
    'skills': ['name'],
    'experience': ['company', 'position'],
    'projects': ['title'],
    'education': ['institution', 'degree'],
    'achievements': ['title', 'description'],
}

SKILL_CATEGORIES = ['Backend', 'Frontend', 'Database', 'DevOps', 'Cloud', 'Tools', 'Languages']
ACHIEVEMENT_ICONS = ['Trophy', 'Award', 'Star', 'Medal', 'Crown']

ACHIEVEMENT_STYLE_DEFAULTS = {
    'icon': 'Trophy',
    'color': 'text-amber-400',
    'bg': 'bg-amber-400/10',
    'border': 'border-amber-400/20',
}


def _text(form, key, limit=None):
    value = (form.get(key) or '').strip()
    return value[:limit] if limit else value


def _optional(form, key, limit=500):
    """Empty inputs are stored as NULL"""
    return _text(form, key, limit) or None


def parse_bool(value):
    return str(value or '').strip().lower() in ('1', 'true', 'on', 'yes')


def parse_int(value, default=0):
    try:
        return int(str(value).strip())
    except (ValueError, TypeError):
        return default


def parse_date(value):
    """Parse a YYYY-MM-DD form value; blank or malformed input gives None"""
    value = (value or '').strip()
    if not value:
        return None
    try:
        return datetime.strptime(value, '%Y-%m-%d').date()
    except ValueError:
        return None


def parse_technologies(value):
    """Split comma-separated technologies, dropping blanks"""
    return [t.strip()[:50] for t in (value or '').split(',') if t.strip()]


def missing_required(entity, fields):
    """Names of required fields left empty"""
    missing = []
    for key in REQUIRED_FIELDS.get(entity, []):
        value = fields.get(key)
        if value is None or (isinstance(value, str) and not value.strip()):
            missing.append(key)
    return missing


def parse_hero_form(form):
    return {
        'title': _text(form, 'title', 255),
        'subtitle': _text(form, 'subtitle', 255),
        'description': _text(form, 'description'),
        'cta_text': _text(form, 'cta_text', 100),
        'cta_link': _text(form, 'cta_link', 500),
        'availability_status': _text(form, 'availability_status', 100),
        'profile_image': _optional(form, 'profile_image'),
        'background_image': _optional(form, 'background_image'),
    }


def parse_about_form(form):
    return {
        'title': _text(form, 'title', 255),
        'content': _text(form, 'content'),
        'image': _optional(form, 'image'),
        'resume_url': _optional(form, 'resume_url'),
    }


def parse_contact_form(form):
    return {
        'email': _text(form, 'email', 255),
        'phone': _optional(form, 'phone', 50),
        'location': _optional(form, 'location', 255),
        'linkedin': _optional(form, 'linkedin'),
        'github': _optional(form, 'github'),
        'twitter': _optional(form, 'twitter'),
        'portfolio_url': _optional(form, 'portfolio_url'),
    }


def parse_skill_form(form):
    # proficiency is only coerced to an integer, not range-checked
    return {
        'name': _text(form, 'name', 255),
        'category': _text(form, 'category', 100) or 'Backend',
        'proficiency': parse_int(form.get('proficiency'), default=0),
        'icon': _optional(form, 'icon', 100),
    }


def _dated_fields(form):
    is_current = parse_bool(form.get('is_current'))
    return {
        'start_date': parse_date(form.get('start_date')),
        'end_date': None if is_current else parse_date(form.get('end_date')),
        'is_current': is_current,
    }


def parse_experience_form(form):
    fields = {
        'company': _text(form, 'company', 255),
        'position': _text(form, 'position', 255),
        'description': _text(form, 'description'),
        'location': _text(form, 'location', 255),
        'company_logo': _optional(form, 'company_logo'),
    }
    fields.update(_dated_fields(form))
    return fields


def parse_project_form(form):
    return {
        'title': _text(form, 'title', 255),
        'description': _text(form, 'description'),
        'long_description': _text(form, 'long_description'),
        'image': _optional(form, 'image'),
        'video': _optional(form, 'video'),
        'demo_url': _optional(form, 'demo_url'),
        'github_url': _optional(form, 'github_url'),
        'technologies': parse_technologies(form.get('technologies')),
        'featured': parse_bool(form.get('featured')),
    }


def parse_education_form(form):
    fields = {
        'institution': _text(form, 'institution', 255),
        'degree': _text(form, 'degree', 255),
        'field_of_study': _text(form, 'field_of_study', 255),
        'description': _optional(form, 'description', None),
        'logo': _optional(form, 'logo'),
    }
    fields.update(_dated_fields(form))
    return fields


def parse_achievement_form(form):
    fields = {
        'title': _text(form, 'title', 255),
        'description': _text(form, 'description'),
    }
    for key, default in ACHIEVEMENT_STYLE_DEFAULTS.items():
        fields[key] = _text(form, key, 100) or default
    return fields


FORM_PARSERS = {
    'hero': parse_hero_form,
    'about': parse_about_form,
    'contact': parse_contact_form,
    'skills': parse_skill_form,
    'experience': parse_experience_form,
    'projects': parse_project_form,
    'education': parse_education_form,
    'achievements': parse_achievement_form,
}
