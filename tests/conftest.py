import pytest

from graduates import create_app
from graduates.extensions import db, mail
from graduates.models import ShortReport, User
from graduates.services import ShortsService


@pytest.fixture
def app(tmp_path):
    app = create_app("testing", overrides={"UPLOAD_DIR": str(tmp_path / "uploads")})
    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def graphql(client):
    def _execute(query, variables=None):
        response = client.post("/graphql", json={"query": query, "variables": variables or {}})
        assert response.status_code == 200, response.get_data(as_text=True)
        return response.get_json()

    return _execute


@pytest.fixture
def users(app):
    alice = User(email="alice@example.com", username="alice")
    bob = User(email="bob@example.com", username="bob")
    db.session.add_all([alice, bob])
    db.session.commit()
    return alice, bob


@pytest.fixture
def short(users):
    alice, _ = users
    return ShortsService.create_short(
        user_id=alice.id,
        media="shorts/intro.mp4",
        data='{"caption": "hello"}',
        tags=["a", "b"],
    )


@pytest.fixture
def report(short, users):
    _, bob = users
    row = ShortReport(short_id=short.id, user_id=bob.id, reason="spam")
    db.session.add(row)
    db.session.commit()
    return row


@pytest.fixture
def outbox(app):
    """Records mail dispatched through Flask-Mail; sending stays suppressed."""
    with mail.record_messages() as messages:
        yield messages
