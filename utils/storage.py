"""
Storage Module - Media uploads for the admin editors
Validates image/video uploads and stores them under the upload folder,
returning the public URL the editors save into their rows.
"""

import os
import secrets
from flask import current_app
from werkzeug.utils import secure_filename

MEDIA_KINDS = {
    'image': {
        'mime_prefix': 'image/',
        'size_setting': 'MAX_IMAGE_SIZE',
        'type_error': 'Please upload an image file',
        'size_error': 'Image must be smaller than {limit}MB',
    },
    'video': {
        'mime_prefix': 'video/',
        'size_setting': 'MAX_VIDEO_SIZE',
        'type_error': 'Please upload a video file',
        'size_error': 'Video must be smaller than {limit}MB',
    },
}


class UploadRejected(ValueError):
    """Raised when an upload fails validation; nothing has been stored"""


def get_file_size(file):
    """Size in bytes of an uploaded FileStorage, leaving the stream at the start"""
    stream = file.stream
    stream.seek(0, os.SEEK_END)
    size = stream.tell()
    stream.seek(0)
    return size


def validate_media(filename, mimetype, size, kind='image'):
    """
    Check an upload against the rules for its kind

    Args:
        filename (str): Original client filename
        mimetype (str): Declared MIME type
        size (int): Size in bytes
        kind (str): 'image' or 'video'

    Raises:
        UploadRejected: with the user-facing error message
    """
    rules = MEDIA_KINDS.get(kind)
    if rules is None:
        raise UploadRejected(f"Unsupported upload kind: {kind}")
    if not filename:
        raise UploadRejected('No file selected')
    if not (mimetype or '').lower().startswith(rules['mime_prefix']):
        raise UploadRejected(rules['type_error'])

    limit = current_app.config[rules['size_setting']]
    if size > limit:
        raise UploadRejected(rules['size_error'].format(limit=limit // (1024 * 1024)))


def build_storage_key(folder, filename):
    """Random object name inside a caller-supplied folder"""
    folder = secure_filename(folder or '') or 'images'
    ext = ''
    if '.' in filename:
        ext = secure_filename(filename.rsplit('.', 1)[1].lower())
    name = secrets.token_hex(8)
    return f"{folder}/{name}.{ext}" if ext else f"{folder}/{name}"


def get_public_url(key):
    base = current_app.config['STORAGE_PUBLIC_URL'].rstrip('/')
    return f"{base}/{key}"


def store_media(file, folder):
    """
    Save an already-validated upload and return its public URL

    Raises:
        OSError: when the file cannot be written
    """
    key = build_storage_key(folder, file.filename)
    path = os.path.join(current_app.config['UPLOAD_FOLDER'], *key.split('/'))
    os.makedirs(os.path.dirname(path), exist_ok=True)
    file.save(path)
    current_app.logger.info(f"Stored upload {key}")
    return get_public_url(key)
