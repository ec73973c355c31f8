"""
Notifications Module - Contact form email delivery
Relays portfolio contact submissions to the owner through the Resend API.
"""

import requests
from flask import current_app, render_template


class EmailDeliveryError(Exception):
    """Raised when the email provider rejects or fails a send"""


def get_email_config():
    """Load email relay settings from the app config"""
    return {
        'api_key': current_app.config.get('RESEND_API_KEY'),
        'api_url': current_app.config.get('RESEND_API_URL', 'https://api.resend.com/emails'),
        'sender': current_app.config.get('CONTACT_SENDER'),
        'recipient': current_app.config.get('CONTACT_RECIPIENT_EMAIL'),
        'timeout': current_app.config.get('EMAIL_TIMEOUT', 10),
    }


def build_contact_subject(name, subject=None):
    return subject or f"Portfolio Contact from {name}"


def send_contact_email(name, email, message, subject=None):
    """
    Send a contact form submission to the site owner

    One synchronous request to the provider: no retry, no queue.
    The visitor's address is used as reply-to so the owner can answer directly.

    Args:
        name (str): Visitor name
        email (str): Visitor email, used as reply-to
        message (str): Message body
        subject (str, optional): Subject line

    Returns:
        dict: Provider response payload

    Raises:
        EmailDeliveryError: when the provider call fails
    """
    config = get_email_config()
    if not config['api_key']:
        raise EmailDeliveryError('Email service is not configured')

    html = render_template('emails/contact.html',
                           name=name,
                           email=email,
                           subject=subject,
                           message=message)

    payload = {
        'from': config['sender'],
        'to': [config['recipient']],
        'reply_to': email,
        'subject': build_contact_subject(name, subject),
        'html': html,
    }
    headers = {'Authorization': f"Bearer {config['api_key']}"}

    try:
        response = requests.post(config['api_url'], json=payload, headers=headers,
                                 timeout=config['timeout'])
    except requests.RequestException as e:
        raise EmailDeliveryError(f"Email provider unreachable: {str(e)}") from e

    if not 200 <= response.status_code < 300:
        try:
            detail = response.json().get('message', '')
        except ValueError:
            detail = response.text[:200]
        raise EmailDeliveryError(detail or f"Email provider returned {response.status_code}")

    current_app.logger.info(f"Contact email from {email} relayed to {config['recipient']}")
    try:
        return response.json()
    except ValueError:
        return {}
