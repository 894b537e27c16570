import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session, SQLModel, create_engine
from sqlmodel.pool import StaticPool

from inventory.auth import hash_password
from inventory.database import get_session
from inventory.main import app
from inventory.models.user import User

ADMIN_EMAIL = "admin@example.com"
ADMIN_PASSWORD = "adminpass"
USER_EMAIL = "jane@example.com"
USER_PASSWORD = "janepass"


@pytest.fixture(autouse=True)
def _fast_hashing(monkeypatch):
    """Cheaper bcrypt cost so the suite stays quick."""
    monkeypatch.setattr("inventory.config.settings.bcrypt_rounds", 4)


@pytest.fixture(name="session")
def session_fixture(_fast_hashing):
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    with Session(engine) as session:
        # Seed admin user
        admin = User(
            first_name="Ada",
            last_name="Admin",
            email=ADMIN_EMAIL,
            password_hash=hash_password(ADMIN_PASSWORD),
            role="admin",
        )
        session.add(admin)
        session.commit()
        yield session


@pytest.fixture(name="client")
def client_fixture(session: Session):
    def get_session_override():
        yield session

    app.dependency_overrides[get_session] = get_session_override
    client = TestClient(app)
    yield client
    app.dependency_overrides.clear()


@pytest.fixture
def admin_token(client: TestClient) -> str:
    response = client.post(
        "/login",
        json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD},
    )
    return response.json()["token"]


@pytest.fixture
def regular_user(session: Session) -> User:
    user = User(
        first_name="Jane",
        last_name="Doe",
        email=USER_EMAIL,
        password_hash=hash_password(USER_PASSWORD),
        role="user",
    )
    session.add(user)
    session.commit()
    session.refresh(user)
    return user


@pytest.fixture
def user_token(client: TestClient, regular_user: User) -> str:
    response = client.post(
        "/login",
        json={"email": USER_EMAIL, "password": USER_PASSWORD},
    )
    return response.json()["token"]
