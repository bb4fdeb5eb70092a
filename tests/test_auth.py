from jose import jwt

from blog_api.config import settings
from blog_api.models.session import UserSession
from blog_api.models.user import User
from conftest import signup, auth_header


def test_signup_returns_user_and_token(client):
    body = signup(client, "alice", name="Alice Liddell")

    assert body["user"]["username"] == "alice"
    assert body["user"]["email"] == "alice@example.com"
    assert body["user"]["name"] == "Alice Liddell"
    assert "createdAt" in body["user"]
    assert "password" not in body["user"]
    assert body["token"]


def test_signup_stores_hashed_password(client, db):
    signup(client, "alice", password="secret123")

    user = db.query(User).filter(User.username == "alice").one()
    assert user.password != "secret123"


def test_signup_with_taken_email_conflicts(client, db):
    signup(client, "alice", email="shared@example.com")

    response = client.post("/auth/signup", json={
        "email": "shared@example.com", "password": "secret123", "name": "Other", "username": "other",
    })

    assert response.status_code == 409
    assert db.query(User).filter(User.email == "shared@example.com").count() == 1


def test_signup_with_taken_username_conflicts(client, db):
    signup(client, "alice")

    response = client.post("/auth/signup", json={
        "email": "new@example.com", "password": "secret123", "name": "Alice Two", "username": "alice",
    })

    assert response.status_code == 409
    assert db.query(User).count() == 1


def test_signup_validation_errors_are_400_with_field_messages(client):
    response = client.post("/auth/signup", json={
        "email": "not-an-email", "password": "123", "name": "A", "username": "al",
    })

    assert response.status_code == 400
    detail = " ".join(response.json()["detail"])
    for field in ("email", "password", "name", "username"):
        assert f"body.{field}" in detail


def test_signin_token_identifies_the_user(client, alice):
    response = client.post("/auth/signin", json={"email": "alice@example.com", "password": "secret123"})

    assert response.status_code == 200
    body = response.json()
    claims = jwt.decode(body["token"], settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    assert claims["id"] == alice["user"]["id"]
    assert claims["email"] == "alice@example.com"
    assert body["user"]["username"] == "alice"


def test_signin_failures_do_not_leak_user_existence(client, alice):
    wrong_password = client.post("/auth/signin", json={"email": "alice@example.com", "password": "nope-nope"})
    unknown_email = client.post("/auth/signin", json={"email": "ghost@example.com", "password": "secret123"})

    assert wrong_password.status_code == 401
    assert unknown_email.status_code == 401
    assert wrong_password.json() == unknown_email.json() == {"detail": "Invalid credentials"}


def test_signup_and_signin_open_sessions(client, db, alice):
    client.post("/auth/signin", json={"email": "alice@example.com", "password": "secret123"})

    sessions = db.query(UserSession).filter(UserSession.user_id == alice["user"]["id"]).all()
    assert len(sessions) == 2
    assert all(session.active for session in sessions)


def test_signout_requires_bearer_token(client):
    assert client.post("/auth/signout").status_code == 401
    assert client.post("/auth/signout", headers={"Authorization": "Basic abc"}).status_code == 401
    assert client.post("/auth/signout", headers=auth_header("garbage")).status_code == 401


def test_signout_is_idempotent_and_clears_active_sessions(client, db, alice):
    headers = auth_header(alice["token"])

    first = client.post("/auth/signout", headers=headers)
    second = client.post("/auth/signout", headers=headers)

    assert first.status_code == second.status_code == 200
    assert first.json()["success"] is True
    assert first.json()["message"] == "Successfully signed out"
    assert second.json()["timestamp"]
    remaining = (
        db.query(UserSession)
        .filter(UserSession.user_id == alice["user"]["id"], UserSession.active.is_(True))
        .count()
    )
    assert remaining == 0


def test_signout_leaves_other_users_sessions(client, db, alice, bob):
    client.post("/auth/signout", headers=auth_header(alice["token"]))

    assert db.query(UserSession).filter(UserSession.user_id == bob["user"]["id"]).count() == 1


def test_signed_out_token_remains_valid_until_expiry(client, alice):
    headers = auth_header(alice["token"])
    client.post("/auth/signout", headers=headers)

    response = client.post(
        "/posts",
        json={"title": "Still here", "content": "Tokens outlive sign-out.", "category": "OTHERS"},
        headers=headers,
    )

    assert response.status_code == 201
