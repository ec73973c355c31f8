"""
Admin editor tests
Session gate, singleton upserts, list CRUD, ordering and seeding
"""

from unittest.mock import patch
from urllib.parse import urlparse, parse_qs

import pytest
from flask import url_for

from extensions import db
from models import (
    HeroSection, AboutSection, ContactInfo, Skill, Experience, Project, Education, Achievement
)
from utils.data import count_rows, fetch_list, insert_row


def _skills(app):
    with app.app_context():
        return [{'id': s.id, 'name': s.name, 'order_index': s.order_index} for s in fetch_list(Skill)]


def _add_skills(app, *names):
    ids = []
    with app.app_context():
        for index, name in enumerate(names):
            ids.append(insert_row(Skill, {'name': name, 'order_index': index}).id)
    return ids


class TestSessionGate:

    def test_every_admin_route_requires_a_session(self, app, client):
        sample = {'entity': 'skills', 'item_id': 'missing', 'direction': 'up'}
        checked = 0

        for rule in app.url_map.iter_rules():
            if not rule.rule.startswith('/admin'):
                continue
            with app.test_request_context():
                url = url_for(rule.endpoint, **{arg: sample[arg] for arg in rule.arguments})
            method = 'GET' if 'GET' in rule.methods else 'POST'

            response = client.open(url, method=method)

            if rule.endpoint == 'admin.upload':
                assert response.status_code == 401
                assert response.get_json() == {'error': 'Authentication required'}
            else:
                assert response.status_code == 302, url
                assert '/login' in response.headers['Location']
            checked += 1

        assert checked >= 8

    def test_redirect_keeps_requested_path(self, client):
        response = client.get('/admin/projects')

        assert response.status_code == 302
        location = urlparse(response.headers['Location'])
        assert location.path == '/login'
        assert parse_qs(location.query)['next'] == ['/admin/projects']

    def test_unauthenticated_post_writes_nothing(self, app, client):
        client.post('/admin/hero', data={'title': 'Hijacked'})

        with app.app_context():
            assert count_rows(HeroSection) == 0

    def test_dashboard_lists_sections(self, auth_client):
        response = auth_client.get('/admin/')

        assert response.status_code == 200
        body = response.get_data(as_text=True)
        for label in ('Hero Section', 'About', 'Skills', 'Experience', 'Projects',
                      'Achievements', 'Education', 'Contact', 'Logout'):
            assert label in body
        assert '0 items' in body

    def test_dashboard_tolerates_count_failures(self, auth_client):
        from utils.data import ContentStoreError

        with patch('blueprints.admin.routes.count_rows', side_effect=ContentStoreError('down')):
            response = auth_client.get('/admin/')

        assert response.status_code == 200
        assert 'unavailable' in response.get_data(as_text=True)


class TestSingletonEditors:

    @pytest.mark.parametrize('path', ['/admin/hero', '/admin/about', '/admin/contact'])
    def test_editor_renders_without_a_row(self, auth_client, path):
        response = auth_client.get(path)

        assert response.status_code == 200
        assert 'name="id" value=""' in response.get_data(as_text=True)

    def test_empty_title_is_rejected_without_a_write(self, app, auth_client):
        with patch('blueprints.admin.routes.upsert_singleton') as upsert:
            response = auth_client.post('/admin/hero', data={'title': '   ', 'subtitle': 'Kept'})

        assert response.status_code == 400
        upsert.assert_not_called()
        body = response.get_data(as_text=True)
        assert 'Title is required' in body
        assert 'value="Kept"' in body
        with app.app_context():
            assert count_rows(HeroSection) == 0

    def test_repeated_saves_keep_a_single_row(self, app, auth_client):
        auth_client.post('/admin/hero', data={'title': 'First'})
        auth_client.post('/admin/hero', data={'title': 'Second'})

        with app.app_context():
            rows = db.session.execute(db.select(HeroSection)).scalars().all()
            assert len(rows) == 1
            assert rows[0].title == 'Second'
            row_id = rows[0].id

        response = auth_client.post('/admin/hero', data={'id': row_id, 'title': 'Third'},
                                    follow_redirects=True)

        assert 'Hero section updated successfully!' in response.get_data(as_text=True)
        with app.app_context():
            assert count_rows(HeroSection) == 1
            assert db.session.get(HeroSection, row_id).title == 'Third'

    def test_save_recovers_from_duplicate_rows(self, app, auth_client):
        with app.app_context():
            db.session.add_all([HeroSection(title='One'), HeroSection(title='Two')])
            db.session.commit()

        response = auth_client.post('/admin/hero', data={'id': '', 'title': 'Fix'},
                                    follow_redirects=True)

        body = response.get_data(as_text=True)
        assert 'Hero section updated successfully!' in body
        assert 'Error saving changes' not in body
        with app.app_context():
            rows = db.session.execute(db.select(HeroSection)).scalars().all()
            assert [r.title for r in rows] == ['Fix']

        assert 'Fix' in auth_client.get('/').get_data(as_text=True)

    def test_editor_shows_stored_values(self, app, auth_client):
        auth_client.post('/admin/about', data={'title': 'Who I am', 'content': 'Builder of things'})

        body = auth_client.get('/admin/about').get_data(as_text=True)

        assert 'value="Who I am"' in body
        assert 'Builder of things' in body

    def test_contact_requires_email(self, app, auth_client):
        response = auth_client.post('/admin/contact', data={'email': '', 'github': 'https://github.com/me'})

        assert response.status_code == 400
        with app.app_context():
            assert count_rows(ContactInfo) == 0

    def test_blank_optional_fields_are_stored_as_null(self, app, auth_client):
        auth_client.post('/admin/contact', data={'email': 'me@example.com', 'phone': ''})

        with app.app_context():
            row = db.session.execute(db.select(ContactInfo)).scalar_one()
            assert row.email == 'me@example.com'
            assert row.phone is None


class TestListEditors:

    @pytest.mark.parametrize('entity', ['skills', 'experience', 'projects', 'education', 'achievements'])
    def test_new_forms_render(self, auth_client, entity):
        assert auth_client.get(f'/admin/{entity}/new').status_code == 200
        assert auth_client.get(f'/admin/{entity}').status_code == 200

    def test_project_technologies_are_split(self, app, auth_client):
        response = auth_client.post('/admin/projects/new', data={
            'title': 'Portfolio',
            'technologies': 'Flask, , SQLAlchemy ,Jinja',
            'featured': 'on',
        })

        assert response.status_code == 302
        with app.app_context():
            project = db.session.execute(db.select(Project)).scalar_one()
            assert project.technologies == ['Flask', 'SQLAlchemy', 'Jinja']
            assert project.featured is True
            assert project.order_index == 0

    def test_new_rows_append_after_current_max(self, app, auth_client):
        ids = _add_skills(app, 'A', 'B', 'C')
        auth_client.post(f'/admin/skills/{ids[1]}/delete')

        auth_client.post('/admin/skills/new', data={'name': 'D', 'category': 'Tools', 'proficiency': '60'})

        rows = _skills(app)
        assert [r['name'] for r in rows] == ['A', 'C', 'D']
        assert rows[-1]['order_index'] == 3

    def test_delete_removes_exactly_one_row(self, app, auth_client):
        ids = _add_skills(app, 'A', 'B', 'C')

        response = auth_client.post(f'/admin/skills/{ids[0]}/delete', follow_redirects=True)

        assert 'Skill deleted successfully' in response.get_data(as_text=True)
        assert [r['id'] for r in _skills(app)] == ids[1:]

    def test_delete_missing_row(self, app, auth_client):
        _add_skills(app, 'A')

        response = auth_client.post('/admin/skills/not-a-row/delete', follow_redirects=True)

        assert 'Skill not found' in response.get_data(as_text=True)
        with app.app_context():
            assert count_rows(Skill) == 1

    def test_move_renumbers_rows(self, app, auth_client):
        ids = _add_skills(app, 'A', 'B', 'C')

        auth_client.post(f'/admin/skills/{ids[2]}/move/up')

        rows = _skills(app)
        assert [r['name'] for r in rows] == ['A', 'C', 'B']
        assert [r['order_index'] for r in rows] == [0, 1, 2]

    def test_move_past_the_end_is_a_no_op(self, app, auth_client):
        ids = _add_skills(app, 'A', 'B')

        auth_client.post(f'/admin/skills/{ids[0]}/move/up')

        assert [r['name'] for r in _skills(app)] == ['A', 'B']

    def test_edit_updates_in_place(self, app, auth_client):
        ids = _add_skills(app, 'Pyhton')

        assert 'value="Pyhton"' in auth_client.get(f'/admin/skills/{ids[0]}/edit').get_data(as_text=True)
        auth_client.post(f'/admin/skills/{ids[0]}/edit', data={'name': 'Python', 'category': 'Languages',
                                                               'proficiency': 'ninety'})

        with app.app_context():
            skill = db.session.get(Skill, ids[0])
            assert skill.name == 'Python'
            assert skill.category == 'Languages'
            assert skill.proficiency == 0
            assert skill.order_index == 0
            assert count_rows(Skill) == 1

    def test_edit_unknown_row_redirects(self, auth_client):
        response = auth_client.get('/admin/projects/missing/edit', follow_redirects=True)

        assert response.status_code == 200
        assert 'Project not found' in response.get_data(as_text=True)

    def test_experience_requires_company_and_position(self, app, auth_client):
        response = auth_client.post('/admin/experience/new', data={'company': 'Acme'})

        assert response.status_code == 400
        assert 'Position is required' in response.get_data(as_text=True)
        with app.app_context():
            assert count_rows(Experience) == 0

    def test_current_role_clears_end_date(self, app, auth_client):
        auth_client.post('/admin/experience/new', data={
            'company': 'Acme',
            'position': 'Engineer',
            'start_date': '2023-02-01',
            'end_date': '2024-01-01',
            'is_current': '1',
        })

        with app.app_context():
            job = db.session.execute(db.select(Experience)).scalar_one()
            assert job.start_date.isoformat() == '2023-02-01'
            assert job.end_date is None
            assert job.is_current is True

    def test_education_and_achievements_required_fields(self, app, auth_client):
        auth_client.post('/admin/education/new', data={'institution': 'MIT'})
        auth_client.post('/admin/achievements/new', data={'title': 'Winner'})

        with app.app_context():
            assert count_rows(Education) == 0
            assert count_rows(Achievement) == 0

    def test_achievement_style_defaults(self, app, auth_client):
        auth_client.post('/admin/achievements/new', data={'title': 'Winner', 'description': 'Won a thing'})

        with app.app_context():
            achievement = db.session.execute(db.select(Achievement)).scalar_one()
            assert achievement.icon == 'Trophy'
            assert achievement.color == 'text-amber-400'

    def test_list_page_shows_rows(self, app, auth_client):
        with app.app_context():
            insert_row(Project, {'title': 'Listed', 'technologies': ['Go', 'Rust'], 'order_index': 0})

        body = auth_client.get('/admin/projects').get_data(as_text=True)

        assert 'Listed' in body
        assert 'Go, Rust' in body


class TestSeeding:

    def test_seed_fills_empty_sections_once(self, app, auth_client):
        with app.app_context():
            insert_row(Skill, {'name': 'Mine', 'order_index': 0})

        response = auth_client.post('/admin/seed', follow_redirects=True)
        assert 'Seeded:' in response.get_data(as_text=True)

        with app.app_context():
            assert count_rows(Skill) == 1
            assert count_rows(Project) == 2
            assert count_rows(Achievement) == 3
            assert count_rows(HeroSection) == 1
            assert count_rows(AboutSection) == 1
            experience = fetch_list(Experience)
            assert [e.order_index for e in experience] == [0, 1]
            assert experience[0].start_date.isoformat() == '2022-01-01'

        response = auth_client.post('/admin/seed', follow_redirects=True)
        assert 'All sections already have content' in response.get_data(as_text=True)
        with app.app_context():
            assert count_rows(Project) == 2
