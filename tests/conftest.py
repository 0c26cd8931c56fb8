import os

# Must be set before storefront.config builds its settings
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("JWT_SECRET", "test-secret")
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("BCRYPT_ROUNDS", "4")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from storefront.database import get_db, init_db
from storefront.main import app
from storefront.models import Product, ProductCategory, User, UserRole
from storefront.services.auth import create_access_token, hash_password

PASSWORD = "Secret123"


@pytest.fixture()
def engine():
    """Fresh in-memory database per test"""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture()
def session_factory(engine):
    return sessionmaker(autoflush=False, bind=engine)


@pytest.fixture()
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture()
def users(db):
    digest = hash_password(PASSWORD)
    alice = User(
        first_name="Alice",
        last_name="Archer",
        email="alice@example.com",
        password_digest=digest,
        role=UserRole.USER.value,
    )
    bob = User(
        first_name="Bob",
        last_name="Baker",
        email="bob@example.com",
        password_digest=digest,
        role=UserRole.USER.value,
    )
    admin = User(
        first_name="Ada",
        last_name="Admin",
        email="admin@example.com",
        password_digest=digest,
        role=UserRole.ADMIN.value,
    )
    db.add_all([alice, bob, admin])
    db.commit()
    return {"alice": alice, "bob": bob, "admin": admin}


@pytest.fixture()
def products(db):
    headphones = Product(
        id="xx99-mark-two",
        product_name="XX99 Mark II Headphones",
        price=2999.0,
        category=ProductCategory.HEADPHONES.value,
        image_name="xx99-mark-two.jpg",
    )
    speaker = Product(
        id="zx9-speaker",
        product_name="ZX9 Speaker",
        price=4500.0,
        category=ProductCategory.SPEAKERS.value,
        image_name="zx9-speaker.jpg",
    )
    earphones = Product(
        id="yx1-earphones",
        product_name="YX1 Wireless Earphones",
        price=599.0,
        category=ProductCategory.EARPHONES.value,
        image_name="yx1-earphones.jpg",
    )
    db.add_all([headphones, speaker, earphones])
    db.commit()
    return {"headphones": headphones, "speaker": speaker, "earphones": earphones}


@pytest.fixture()
def tokens(users):
    return {name: create_access_token(user) for name, user in users.items()}


@pytest.fixture()
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture()
def headers(tokens):
    """Authorization headers per seeded user"""
    return {name: {"Authorization": f"Bearer {token}"} for name, token in tokens.items()}


@pytest.fixture()
def password():
    """Plain-text password shared by the seeded users"""
    return PASSWORD
