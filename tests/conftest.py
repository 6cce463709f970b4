import random
import pytest
from idea_validator import create_app, db
from idea_validator.seed import make_sample_idea


@pytest.fixture
def app():
    app = create_app({
        "TESTING": True,
        "SQLALCHEMY_DATABASE_URI": "sqlite:///:memory:",
        "SECRET_KEY": "test",
    })
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def create_idea(app):
    """Persist a sample idea; keyword overrides go straight to the model."""
    rng = random.Random(1234)

    def _create(status="completed", **overrides):
        idea = make_sample_idea(status, rng, **overrides)
        db.session.add(idea)
        db.session.commit()
        return idea

    return _create
