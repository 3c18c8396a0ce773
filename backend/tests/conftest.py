"""
Pytest fixtures for Shop Tracker backend tests.

Provides an in-memory application per test, the test client, an owner
account and bearer auth headers.
"""

from datetime import date

import pytest

from shoptracker import create_app
from shoptracker.extensions import db
from shoptracker.models import Shop, Sale, Expense, StoreValue
from shoptracker.services.auth_service import create_user

OWNER_EMAIL = "owner@shoptracker.test"
OWNER_PASSWORD = "Password123!"


@pytest.fixture(scope='function')
def app():
    """Create application for testing, with a fresh database per test."""
    app = create_app({
        'TESTING': True,
        'SQLALCHEMY_DATABASE_URI': 'sqlite:///:memory:',
        'SQLALCHEMY_TRACK_MODIFICATIONS': False,
        'SECRET_KEY': 'test',
    })

    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture(scope='function')
def client(app):
    """Create test client."""
    return app.test_client()


@pytest.fixture(scope='function')
def db_session(app):
    return db.session


@pytest.fixture(scope='function')
def owner(db_session):
    """Create the owner account."""
    return create_user("Owner Test", OWNER_EMAIL, OWNER_PASSWORD)


@pytest.fixture(scope='function')
def auth_token(app, owner):
    # Separate client so the login cookie does not leak into `client`
    return get_auth_token(app.test_client(), OWNER_EMAIL, OWNER_PASSWORD)


@pytest.fixture(scope='function')
def headers(auth_token):
    return auth_headers(auth_token)


@pytest.fixture(scope='function')
def shop_a(db_session):
    shop = Shop(name="Baixa Store", location="Maputo", manager_name="Ana")
    db_session.add(shop)
    db_session.commit()
    return shop


@pytest.fixture(scope='function')
def shop_b(db_session):
    shop = Shop(name="Beira Store", location="Beira", manager_name="Joao")
    db_session.add(shop)
    db_session.commit()
    return shop


def get_auth_token(client, email: str, password: str) -> str:
    """Helper to get auth token for a user."""
    response = client.post('/api/auth/login', json={
        'email': email,
        'password': password
    })
    if response.status_code == 200:
        return response.json.get('token')
    return None


def auth_headers(token: str) -> dict:
    """Helper to create Authorization headers."""
    return {'Authorization': f'Bearer {token}'}


def add_sale(shop_id, amount, day="2024-01-05", notes=""):
    sale = Sale(shop_id=shop_id, amount=amount, date=date.fromisoformat(day), notes=notes)
    db.session.add(sale)
    db.session.commit()
    return sale


def add_expense(category, amount, day="2024-01-05", notes=""):
    expense = Expense(category=category, amount=amount, date=date.fromisoformat(day), notes=notes)
    db.session.add(expense)
    db.session.commit()
    return expense


def add_store_value(shop_id, goods_value, cash_value):
    value = StoreValue(shop_id=shop_id, goods_value=goods_value, cash_value=cash_value)
    db.session.add(value)
    db.session.commit()
    return value
