import pytest

from lostfound.domain.models.account import Account


def _register(client, **overrides):
    body = {
        "userId": "STF001",
        "name": "Sipho Dlamini",
        "email": "sdlamini@cput.ac.za",
        "password": "correct-horse",
    }
    body.update(overrides)
    return client.post("/register", json=body)


@pytest.mark.parametrize(
    "email, role",
    [
        ("sdlamini@cput.ac.za", "Admin"),
        ("219999999@mycput.ac.za", "User"),
    ],
)
def test_register_assigns_role_from_email_domain(client, db, email, role):
    resp = _register(client, email=email)

    assert resp.status_code == 201
    assert resp.text == "User registered successfully!"

    account = db.get(Account, "STF001")
    assert account.email == email
    assert account.role == role
    assert account.password_hash != "correct-horse"
    assert account.phone_number is None


@pytest.mark.parametrize(
    "email",
    ["someone@gmail.com", "x@cput.ac.za.evil.com", "x@notmycput.ac.za", "cput.ac.za"],
)
def test_register_rejects_other_domains(client, db, email):
    resp = _register(client, email=email)

    assert resp.status_code == 400
    assert resp.json()["error"]["code"] == "ValidationException"
    assert "Invalid email domain" in resp.json()["error"]["message"]
    assert db.get(Account, "STF001") is None


@pytest.mark.parametrize("missing", ["userId", "name", "email", "password"])
def test_register_requires_fields(client, missing):
    resp = _register(client, **{missing: ""})

    assert resp.status_code == 400
    assert resp.json()["error"]["message"] == "UserID, name, email, and password are required."


def test_register_duplicate_id(client):
    assert _register(client).status_code == 201

    resp = _register(client, email="other@cput.ac.za")

    assert resp.status_code == 409
    assert resp.json()["error"]["message"] == "User ID already exists."
    assert resp.json()["error"]["details"] == {"field": "id"}


def test_register_duplicate_email(client):
    assert _register(client).status_code == 201

    resp = _register(client, userId="STF002")

    assert resp.status_code == 409
    assert resp.json()["error"]["message"] == "Email already registered."
    assert resp.json()["error"]["details"] == {"field": "email"}


def test_register_non_json_body_is_400(client):
    resp = client.post("/register", content="not json", headers={"Content-Type": "application/json"})

    assert resp.status_code == 400


@pytest.mark.parametrize("identifier", ["221234567", "221234567@mycput.ac.za"])
def test_login_by_id_or_email(client, db, student, identifier):
    resp = client.post("/login", json={"usernameOrEmail": identifier, "password": student["password"]})

    assert resp.status_code == 200
    assert resp.json() == {
        "message": "Login successful!",
        "userId": student["userId"],
        "role": "User",
        "name": student["name"],
        "email": student["email"],
    }
    assert db.get(Account, student["userId"]).last_login is not None


def test_login_never_returns_password_hash(client, student):
    resp = client.post("/login", json={"usernameOrEmail": student["userId"], "password": student["password"]})

    body = resp.json()
    assert not any("password" in key.lower() for key in body)
    assert "$2b$" not in resp.text


def test_login_failures_are_indistinguishable(client, student):
    wrong_password = client.post(
        "/login", json={"usernameOrEmail": student["userId"], "password": "nope"}
    )
    unknown_user = client.post(
        "/login", json={"usernameOrEmail": "nobody@mycput.ac.za", "password": student["password"]}
    )

    assert wrong_password.status_code == unknown_user.status_code == 401
    assert wrong_password.json()["error"]["message"] == unknown_user.json()["error"]["message"]
    assert wrong_password.json()["error"]["message"] == "Invalid username/email or password."


@pytest.mark.parametrize(
    "body",
    [{}, {"usernameOrEmail": "221234567"}, {"password": "x"}, {"usernameOrEmail": "", "password": "x"}],
)
def test_login_requires_fields(client, body):
    resp = client.post("/login", json=body)

    assert resp.status_code == 400
    assert resp.json()["error"]["message"] == "Username/email and password are required."


def test_login_with_malformed_stored_hash(client, db, student):
    account = db.get(Account, student["userId"])
    account.password_hash = "not-a-bcrypt-digest"
    db.commit()

    resp = client.post("/login", json={"usernameOrEmail": student["userId"], "password": student["password"]})

    assert resp.status_code == 500
    assert resp.json()["error"]["message"] == "Password verification failed."


def test_login_with_missing_stored_hash(client, db, student):
    account = db.get(Account, student["userId"])
    account.password_hash = None
    db.commit()

    resp = client.post("/login", json={"usernameOrEmail": student["userId"], "password": student["password"]})

    assert resp.status_code == 500
    assert resp.json()["error"]["message"] == "Internal server error: incomplete user data."


def test_register_accepts_numeric_student_number(client, db):
    resp = _register(client, userId=221234567, email="221234567@mycput.ac.za")

    assert resp.status_code == 201
    assert db.get(Account, "221234567").role == "User"

    login = client.post("/login", json={"usernameOrEmail": 221234567, "password": "correct-horse"})
    assert login.status_code == 200
    assert login.json()["userId"] == "221234567"


def test_login_with_nul_byte_password_is_a_mismatch(client, student):
    resp = client.post("/login", json={"usernameOrEmail": student["userId"], "password": "a\x00b"})

    assert resp.status_code == 401
    assert resp.json()["error"]["message"] == "Invalid username/email or password."
