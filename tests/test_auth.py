"""Signup, signin and token guard tests."""

from datetime import UTC, datetime, timedelta

from jose import jwt

from src.config import get_settings
from src.services.auth import create_access_token


def test_health_check(client):
    """Test health check endpoint."""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_signup(client):
    """Test user registration."""
    response = client.post(
        "/auth/signup", json={"email": "newuser@example.com", "password": "password123"}
    )
    assert response.status_code == 201
    data = response.json()
    assert data["accessToken"]
    assert data["tokenType"] == "bearer"


def test_signup_missing_email(client):
    response = client.post("/auth/signup", json={"password": "password123"})
    assert response.status_code == 400


def test_signup_missing_password(client):
    response = client.post("/auth/signup", json={"email": "newuser@example.com"})
    assert response.status_code == 400


def test_signup_no_body(client):
    response = client.post("/auth/signup")
    assert response.status_code == 400


def test_signup_invalid_email(client):
    response = client.post("/auth/signup", json={"email": "not-an-email", "password": "x"})
    assert response.status_code == 400


def test_signup_empty_password(client):
    response = client.post("/auth/signup", json={"email": "newuser@example.com", "password": ""})
    assert response.status_code == 400


def test_signup_duplicate_email(client, auth_headers):
    """Test registration with duplicate email fails regardless of password."""
    for password in ("testpass123", "somethingelse"):
        response = client.post(
            "/auth/signup", json={"email": auth_headers.email, "password": password}
        )
        assert response.status_code == 409
        assert "already registered" in response.json()["detail"]


def test_signin(client, auth_headers):
    """Test user login."""
    response = client.post(
        "/auth/signin", json={"email": auth_headers.email, "password": "testpass123"}
    )
    assert response.status_code == 200
    token = response.json()["accessToken"]

    # The new token works on an authenticated route
    me = client.get("/users/me", headers={"Authorization": f"Bearer {token}"})
    assert me.status_code == 200
    assert me.json()["id"] == auth_headers.user_id


def test_signin_missing_fields(client):
    assert client.post("/auth/signin", json={"password": "x"}).status_code == 400
    assert client.post("/auth/signin", json={"email": "a@example.com"}).status_code == 400
    assert client.post("/auth/signin").status_code == 400


def test_signin_wrong_password_matches_unknown_email(client, auth_headers):
    """Wrong password and unknown email are indistinguishable."""
    wrong_password = client.post(
        "/auth/signin", json={"email": auth_headers.email, "password": "wrongpass"}
    )
    unknown_email = client.post(
        "/auth/signin", json={"email": "nobody@example.com", "password": "wrongpass"}
    )

    assert wrong_password.status_code == 401
    assert unknown_email.status_code == 401
    assert wrong_password.json() == unknown_email.json()
    assert wrong_password.headers["www-authenticate"] == "Bearer"


def test_unauthorized_access(client):
    """Test that endpoints require authentication."""
    for method, path in [
        ("get", "/users/me"),
        ("patch", "/users"),
        ("get", "/bookmarks"),
        ("post", "/bookmarks/bookmark"),
        ("get", "/bookmarks/1"),
        ("patch", "/bookmarks/1"),
        ("delete", "/bookmarks/1"),
    ]:
        response = client.request(method, path)
        assert response.status_code == 401, (method, path)


def test_non_bearer_scheme_rejected(client, auth_headers):
    token = auth_headers["Authorization"].removeprefix("Bearer ")
    response = client.get("/bookmarks", headers={"Authorization": f"Basic {token}"})
    assert response.status_code == 401


def test_garbage_token_rejected(client):
    response = client.get("/bookmarks", headers={"Authorization": "Bearer not.a.jwt"})
    assert response.status_code == 401


def test_expired_token_rejected(client, auth_headers):
    settings = get_settings()
    expired = jwt.encode(
        {
            "sub": str(auth_headers.user_id),
            "email": auth_headers.email,
            "exp": datetime.now(UTC) - timedelta(minutes=1),
        },
        settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
    )
    response = client.get("/bookmarks", headers={"Authorization": f"Bearer {expired}"})
    assert response.status_code == 401


def test_token_signed_with_other_secret_rejected(client, auth_headers):
    settings = get_settings()
    forged = jwt.encode(
        {
            "sub": str(auth_headers.user_id),
            "email": auth_headers.email,
            "exp": datetime.now(UTC) + timedelta(minutes=5),
        },
        settings.jwt_secret + "-forged",
        algorithm=settings.jwt_algorithm,
    )
    response = client.get("/bookmarks", headers={"Authorization": f"Bearer {forged}"})
    assert response.status_code == 401


def test_token_for_deleted_user_rejected_on_profile(client):
    token = create_access_token(999999, "ghost@example.com")
    response = client.get("/users/me", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 401


def test_signup_password_longer_than_bcrypt_limit(client):
    """Passwords past bcrypt's 72-byte limit are rejected instead of truncated."""
    response = client.post(
        "/auth/signup", json={"email": "long@example.com", "password": "a" * 72 + "X"}
    )
    assert response.status_code == 400


def test_signup_password_multibyte_over_limit(client):
    # 36 two-byte characters fit, 37 do not
    ok = client.post("/auth/signup", json={"email": "fits@example.com", "password": "é" * 36})
    assert ok.status_code == 201

    response = client.post(
        "/auth/signup", json={"email": "over@example.com", "password": "é" * 37}
    )
    assert response.status_code == 400


def test_signin_password_differing_after_limit_rejected(client):
    password = "a" * 72
    assert (
        client.post(
            "/auth/signup", json={"email": "edge@example.com", "password": password}
        ).status_code
        == 201
    )

    response = client.post(
        "/auth/signin", json={"email": "edge@example.com", "password": password + "Y"}
    )
    assert response.status_code in (400, 401)
    assert "accessToken" not in response.json()
