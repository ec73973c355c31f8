"""
Helpers Module - Formatting utilities shared by templates and routes
"""

import json
from datetime import date, datetime
from flask import current_app


def _to_date(value):
    if value is None or value == '':
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return datetime.strptime(str(value)[:10], '%Y-%m-%d').date()
    except ValueError:
        return None


def format_date(value):
    """'2022-01-01' -> 'Jan 2022'"""
    parsed = _to_date(value)
    return parsed.strftime('%b %Y') if parsed else ''


def format_date_range(start_date, end_date, is_current):
    start = format_date(start_date)
    if is_current:
        return f"{start} - Present"
    if end_date:
        return f"{start} - {format_date(end_date)}"
    return start


def group_skills_by_category(skills):
    """Group skill dicts by category, keeping list order within each group"""
    grouped = {}
    for skill in skills:
        grouped.setdefault(skill.get('category') or 'Other', []).append(skill)
    return grouped


def build_person_json_ld(hero, contact):
    """schema.org Person markup for the index page"""
    config = current_app.config
    same_as = [url for url in (contact.get('github'), contact.get('linkedin'), contact.get('twitter')) if url]
    data = {
        '@context': 'https://schema.org',
        '@type': 'Person',
        'name': config.get('SITE_OWNER_NAME'),
        'url': config.get('SITE_URL'),
        'jobTitle': hero.get('subtitle') or config.get('SITE_OWNER_TITLE'),
        'sameAs': same_as,
        'email': contact.get('email'),
        'description': config.get('SITE_OWNER_DESCRIPTION'),
    }
    # Escape '</' so the payload cannot close the surrounding script tag
    return json.dumps(data, ensure_ascii=False).replace('</', '<\\/')
