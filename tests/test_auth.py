# tests/test_auth.py
from datetime import datetime, timedelta, timezone

from jose import jwt

from tracknest.config import settings
from tracknest.core.security import create_access_token


def test_register_returns_message_without_token(client):
    res = client.post("/api/register", json={
        "username": "alice", "email": "alice@tracknest.io", "password": "secret123",
    })
    assert res.status_code == 201
    body = res.json()
    assert body == {"message": "User registered successfully. You can now log in."}


def test_register_requires_all_fields(client):
    res = client.post("/api/register", json={"username": "alice", "email": "alice@tracknest.io"})
    assert res.status_code == 400
    assert res.json()["message"] == "Please provide username, email, and password."


def test_register_rejects_malformed_email(client):
    res = client.post("/api/register", json={
        "username": "alice", "email": "not-an-email", "password": "secret123",
    })
    assert res.status_code == 400
    assert "message" in res.json()


def test_register_duplicate_username_and_email(client, alice):
    res = client.post("/api/register", json={
        "username": "alice", "email": "other@tracknest.io", "password": "x",
    })
    assert res.status_code == 400
    assert res.json()["message"].startswith("Username already taken")

    res = client.post("/api/register", json={
        "username": "alice2", "email": "alice@tracknest.io", "password": "x",
    })
    assert res.status_code == 400
    assert res.json()["message"].startswith("Email already registered")


def test_login_returns_token_and_profile(client, register_user):
    register_user("carol", bio="jazz head")
    res = client.post("/api/login", json={"email": "carol@tracknest.io", "password": "secret123"})
    assert res.status_code == 200
    body = res.json()
    assert body["message"] == "Login successful."
    assert body["user"] == {"username": "carol", "email": "carol@tracknest.io", "bio": "jazz head"}

    claims = jwt.decode(body["token"], settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    assert claims["sub"] == "carol"
    assert claims["email"] == "carol@tracknest.io"
    lifetime = datetime.fromtimestamp(claims["exp"], tz=timezone.utc) - datetime.now(timezone.utc)
    assert timedelta(hours=2, minutes=58) < lifetime <= timedelta(hours=3)


def test_login_error_does_not_reveal_which_part_failed(client, alice):
    wrong_password = client.post("/api/login", json={"email": "alice@tracknest.io", "password": "nope"})
    unknown_email = client.post("/api/login", json={"email": "ghost@tracknest.io", "password": "secret123"})

    assert wrong_password.status_code == unknown_email.status_code == 400
    assert wrong_password.json() == unknown_email.json() == {"message": "Invalid email or password."}


def test_login_with_mixed_case_email_as_registered(client, register_user):
    register_user("carol", email="Carol@Example.COM")
    res = client.post("/api/login", json={"email": "Carol@Example.COM", "password": "secret123"})
    assert res.status_code == 200
    assert res.json()["user"]["email"] == "Carol@example.com"

    res = client.post("/api/login", json={"email": "Carol@example.com", "password": "secret123"})
    assert res.status_code == 200


def test_login_with_malformed_email_is_invalid_credentials(client, alice):
    res = client.post("/api/login", json={"email": "not-an-email", "password": "secret123"})
    assert res.status_code == 400
    assert res.json() == {"message": "Invalid email or password."}


def test_login_requires_email_and_password(client):
    res = client.post("/api/login", json={"email": "alice@tracknest.io"})
    assert res.status_code == 400


def test_protected_route_without_token(client):
    res = client.get("/api/profile")
    assert res.status_code == 401
    assert res.json() == {"message": "No token, authorization denied."}


def test_protected_route_with_garbage_token(client):
    res = client.get("/api/profile", headers={"x-auth-token": "garbage"})
    assert res.status_code == 401
    assert res.json()["message"] == "Token is not valid."


def test_protected_route_with_expired_token(client, alice):
    token = create_access_token(
        {"sub": "alice", "email": "alice@tracknest.io"}, expires_delta=timedelta(seconds=-5)
    )
    res = client.get("/api/profile", headers={"x-auth-token": token})
    assert res.status_code == 401


def test_token_for_deleted_user_is_rejected(client, alice):
    assert client.delete("/api/profile", headers=alice).status_code == 200
    res = client.get("/api/profile", headers=alice)
    assert res.status_code == 401


def test_optional_auth_ignores_invalid_token(client):
    res = client.get("/api/search", headers={"x-auth-token": "garbage"})
    assert res.status_code == 200
    assert len(res.json()) == 9


def test_unknown_route_uses_message_body(client):
    res = client.get("/api/nowhere")
    assert res.status_code == 404
    assert "message" in res.json()
