"""
Media upload tests
Type and size validation, storage location and the JSON contract of /admin/upload
"""

import io
from unittest.mock import patch

import pytest

from utils.storage import UploadRejected, validate_media, build_storage_key, get_public_url

MB = 1024 * 1024


def _stored_files(upload_dir):
    return [p for p in upload_dir.rglob('*') if p.is_file()]


def _post(client, payload, filename, mimetype, kind='image', folder='projects'):
    return client.post('/admin/upload', data={
        'file': (io.BytesIO(payload), filename, mimetype),
        'kind': kind,
        'folder': folder,
    }, content_type='multipart/form-data')


class TestUploadEndpoint:

    def test_valid_image_is_stored(self, auth_client, upload_dir):
        response = _post(auth_client, b'\x89PNG fake image', 'Screen Shot.png', 'image/png')

        assert response.status_code == 200
        payload = response.get_json()
        assert payload['success'] is True
        assert payload['url'].startswith('/static/uploads/projects/')
        assert payload['url'].endswith('.png')

        stored = _stored_files(upload_dir)
        assert len(stored) == 1
        assert stored[0].read_bytes() == b'\x89PNG fake image'
        assert payload['url'].endswith(stored[0].name)

    def test_oversized_image_is_rejected_before_storage(self, auth_client, upload_dir):
        response = _post(auth_client, b'\0' * (5 * MB + 1), 'huge.jpg', 'image/jpeg')

        assert response.status_code == 400
        assert response.get_json() == {'error': 'Image must be smaller than 5MB'}
        assert _stored_files(upload_dir) == []

    def test_non_image_is_rejected(self, auth_client, upload_dir):
        response = _post(auth_client, b'%PDF-1.7', 'resume.pdf', 'application/pdf')

        assert response.status_code == 400
        assert response.get_json() == {'error': 'Please upload an image file'}
        assert _stored_files(upload_dir) == []

    def test_small_video_is_stored(self, auth_client, upload_dir):
        response = _post(auth_client, b'\0' * 1024, 'demo.mp4', 'video/mp4', kind='video')

        assert response.status_code == 200
        assert response.get_json()['url'].endswith('.mp4')
        assert len(_stored_files(upload_dir)) == 1

    def test_image_sent_as_video_is_rejected(self, auth_client):
        response = _post(auth_client, b'\0' * 10, 'photo.png', 'image/png', kind='video')

        assert response.status_code == 400
        assert response.get_json() == {'error': 'Please upload a video file'}

    def test_missing_file(self, auth_client):
        response = auth_client.post('/admin/upload', data={'kind': 'image'},
                                    content_type='multipart/form-data')

        assert response.status_code == 400
        assert response.get_json() == {'error': 'No file selected'}

    def test_storage_failure_returns_500(self, auth_client):
        with patch('blueprints.admin.routes.store_media', side_effect=OSError('disk full')):
            response = _post(auth_client, b'img', 'a.png', 'image/png')

        assert response.status_code == 500
        assert response.get_json() == {'error': 'Error uploading image'}

    def test_requires_session(self, client, upload_dir):
        response = _post(client, b'img', 'a.png', 'image/png')

        assert response.status_code == 401
        assert _stored_files(upload_dir) == []


class TestValidateMedia:

    def test_video_limit(self, app):
        with app.app_context():
            validate_media('clip.mp4', 'video/mp4', 50 * MB, 'video')
            with pytest.raises(UploadRejected, match='Video must be smaller than 50MB'):
                validate_media('clip.mp4', 'video/mp4', 50 * MB + 1, 'video')

    def test_image_limit_boundary(self, app):
        with app.app_context():
            validate_media('a.webp', 'image/webp', 5 * MB, 'image')
            with pytest.raises(UploadRejected):
                validate_media('a.webp', 'image/webp', 5 * MB + 1, 'image')

    def test_unknown_kind(self, app):
        with app.app_context():
            with pytest.raises(UploadRejected, match='Unsupported upload kind'):
                validate_media('a.txt', 'text/plain', 1, 'document')

    def test_rejection_is_a_value_error(self):
        assert issubclass(UploadRejected, ValueError)


class TestStorageKeys:

    def test_key_uses_random_name_and_original_extension(self):
        first = build_storage_key('hero', 'My Photo.JPG')
        second = build_storage_key('hero', 'My Photo.JPG')

        assert first.startswith('hero/')
        assert first.endswith('.jpg')
        assert first != second
        assert 'Photo' not in first

    def test_folder_is_sanitised(self):
        assert build_storage_key('../../etc', 'x.png').startswith('etc/')
        assert build_storage_key('', 'x.png').startswith('images/')

    def test_public_url(self, app):
        with app.app_context():
            assert get_public_url('projects/abc.png') == '/static/uploads/projects/abc.png'
