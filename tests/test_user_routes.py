"""
User listing and profile routes
"""
from urllib.parse import urlparse


class TestUserIndex:

    def test_guest_is_redirected_to_root(self, client, last_flash):
        response = client.get('/users')

        assert response.status_code == 302
        assert urlparse(response.location).path == '/'
        assert last_flash() == ('failure', 'Must be logged in to view users.')

    def test_lists_users_with_vote_counts(self, client, login, seed, add_vote):
        add_vote(seed['users']['ada'], seed['works']['album'])
        add_vote(seed['users']['ada'], seed['works']['book'])
        login()

        response = client.get('/users')

        assert response.status_code == 200
        assert b'grace' in response.data
        assert b'<td>2</td>' in response.data


class TestUserShow:

    def test_shows_the_works_a_user_voted_for(self, client, login, seed, add_vote):
        add_vote(seed['users']['ada'], seed['works']['movie'])
        login()

        response = client.get(f"/users/{seed['users']['ada']}")

        assert response.status_code == 200
        assert b'Spirited Away' in response.data

    def test_guest_is_redirected_for_an_extant_user(self, client, seed, last_flash):
        response = client.get(f"/users/{seed['users']['ada']}")

        assert response.status_code == 302
        assert last_flash() == ('failure', 'Must be logged in to view page.')

    def test_missing_user_is_not_found(self, client, login):
        login()
        assert client.get('/users/0').status_code == 404

    def test_missing_user_is_not_found_for_guests(self, client):
        assert client.get('/users/0').status_code == 404
