"""
Tests for the flask CLI commands
"""
from media_database import User, Work
from scripts.commands import DEMO_CATALOG


class TestCreateUserCommand:

    def test_creates_a_user(self, app, count):
        runner = app.test_cli_runner()
        before = count(User)

        result = runner.invoke(args=['create-user', 'hedy'])

        assert result.exit_code == 0
        assert 'User created successfully: hedy' in result.output
        assert count(User) == before + 1

    def test_refuses_a_taken_username(self, app, seed, count):
        runner = app.test_cli_runner()
        before = count(User)

        result = runner.invoke(args=['create-user', 'grace'])

        assert result.exit_code != 0
        assert 'already exists' in result.output
        assert count(User) == before

    def test_created_user_can_log_in(self, app, seed):
        app.test_cli_runner().invoke(args=['create-user', 'hedy'])
        client = app.test_client()

        response = client.post('/login', data={'username': 'hedy'})

        assert response.status_code == 302


class TestSeedCommand:

    def test_loads_the_demo_catalog(self, app, count):
        runner = app.test_cli_runner()

        result = runner.invoke(args=['seed'])

        assert result.exit_code == 0
        assert f'Seeded {len(DEMO_CATALOG)} works' in result.output
        assert count(Work) == len(DEMO_CATALOG)
