"""
API Routes - Public JSON endpoints
"""

import re
from flask import request, jsonify, current_app
from utils.notifications import send_contact_email, EmailDeliveryError
from utils.security import get_client_ip
from . import api_bp

EMAIL_PATTERN = re.compile(r'^[^\s@]+@[^\s@]+\.[^\s@]+$')


@api_bp.route('/contact', methods=['POST'])
def contact():
    """
    Relay a contact form submission to the site owner by email

    Expects JSON: {name, email, message, subject?}
    """
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = {}
    name = str(data.get('name') or '').strip()
    email = str(data.get('email') or '').strip()
    message = str(data.get('message') or '').strip()
    subject = str(data.get('subject') or '').strip() or None

    if not name or not email or not message:
        return jsonify({'error': 'Missing required fields'}), 400

    if not EMAIL_PATTERN.match(email):
        return jsonify({'error': 'Invalid email format'}), 400

    try:
        result = send_contact_email(name, email, message, subject)
    except EmailDeliveryError as e:
        current_app.logger.error(f"✗ Contact relay failed for {email} ({get_client_ip()}): {str(e)}")
        return jsonify({'error': str(e) or 'Failed to send email'}), 500
    except Exception as e:
        current_app.logger.error(f"✗ Unexpected contact relay error: {str(e)}")
        return jsonify({'error': 'Failed to send email'}), 500

    current_app.logger.info(f"✓ Contact message from {email}")
    return jsonify({'success': True, 'data': result})
