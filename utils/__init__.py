"""
Utils Package - Centralized utility modules initialization
"""

from .decorators import login_required, api_login_required
from .data import (
    ContentStoreError,
    fetch_singleton,
    fetch_list,
    get_row,
    count_rows,
    next_order_index,
    insert_row,
    update_row,
    upsert_singleton,
    delete_row,
    move_row,
    row_to_dict,
    load_section,
    load_site_content
)
from .defaults import get_default_section, get_empty_singleton
from .forms import FORM_PARSERS, REQUIRED_FIELDS, missing_required
from .notifications import EmailDeliveryError, send_contact_email
from .security import (
    Authenticated,
    Unauthenticated,
    resolve_admin_session,
    get_client_ip,
    authenticate,
    ensure_admin_user
)
from .storage import UploadRejected, validate_media, store_media, get_public_url
from .helpers import format_date, format_date_range, group_skills_by_category, build_person_json_ld
from .seed import seed_empty_sections

__all__ = [
    # Decorators
    'login_required',
    'api_login_required',

    # Data
    'ContentStoreError',
    'fetch_singleton',
    'fetch_list',
    'get_row',
    'count_rows',
    'next_order_index',
    'insert_row',
    'update_row',
    'upsert_singleton',
    'delete_row',
    'move_row',
    'row_to_dict',
    'load_section',
    'load_site_content',

    # Defaults
    'get_default_section',
    'get_empty_singleton',

    # Forms
    'FORM_PARSERS',
    'REQUIRED_FIELDS',
    'missing_required',

    # Notifications
    'EmailDeliveryError',
    'send_contact_email',

    # Security
    'Authenticated',
    'Unauthenticated',
    'resolve_admin_session',
    'get_client_ip',
    'authenticate',
    'ensure_admin_user',

    # Storage
    'UploadRejected',
    'validate_media',
    'store_media',
    'get_public_url',

    # Helpers
    'format_date',
    'format_date_range',
    'group_skills_by_category',
    'build_person_json_ld',
    'seed_empty_sections'
]
