"""
Tests for Authentication Routes
"""
from urllib.parse import urlparse
from media_database import User


def path_of(response):
    return urlparse(response.location).path


class TestLogin:

    def test_login_form_renders(self, client):
        response = client.get('/login')
        assert response.status_code == 200
        assert b'name="username"' in response.data

    def test_login_binds_the_session_to_an_existing_user(self, client, seed, last_flash):
        response = client.post('/login', data={'username': 'grace'})

        assert response.status_code == 302
        assert path_of(response) == '/'
        assert last_flash() == ('success', 'Successfully logged in as existing user grace')
        with client.session_transaction() as sess:
            assert sess['_user_id'] == str(seed['users']['grace'])

    def test_login_records_last_login(self, client, seed, fetch):
        assert fetch(User, seed['users']['ada'])['last_login'] is None

        client.post('/login', data={'username': 'ada'})

        assert fetch(User, seed['users']['ada'])['last_login'] is not None

    def test_unknown_username_is_rejected(self, client):
        response = client.post('/login', data={'username': 'nobody'})

        assert response.status_code == 400
        assert b'alert-failure' in response.data
        assert b'Could not log in' in response.data
        with client.session_transaction() as sess:
            assert '_user_id' not in sess

    def test_blank_username_is_rejected(self, client):
        response = client.post('/login', data={'username': '   '})

        assert response.status_code == 400
        assert b'alert-failure' in response.data
        assert b'Could not log in' in response.data

    def test_login_does_not_create_users(self, client, count):
        before = count(User)
        client.post('/login', data={'username': 'newcomer'})
        assert count(User) == before


class TestLogout:

    def test_logout_clears_the_session_binding(self, client, login, last_flash):
        login()

        response = client.delete('/logout')

        assert response.status_code == 302
        assert path_of(response) == '/'
        assert last_flash() == ('success', 'Successfully logged out')
        with client.session_transaction() as sess:
            assert '_user_id' not in sess

    def test_logout_via_form_post(self, client, login):
        login()

        response = client.post('/logout')

        assert response.status_code == 302
        with client.session_transaction() as sess:
            assert '_user_id' not in sess

    def test_logout_as_guest_is_harmless(self, client):
        response = client.delete('/logout')
        assert response.status_code == 302
        assert path_of(response) == '/'

    def test_protected_pages_are_closed_again_after_logout(self, client, login, last_flash):
        login()
        assert client.get('/works').status_code == 200

        client.delete('/logout')
        response = client.get('/works')

        assert response.status_code == 302
        assert last_flash() == ('failure', 'Must be logged in to view works.')
