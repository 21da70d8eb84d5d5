import pytest
from fastapi import status


def register(client, email="a@x.com", password="pw1", confirm=None):
    return client.post(
        "/register",
        data={
            "email": email,
            "password": password,
            "passwordConfirm": password if confirm is None else confirm,
        },
        follow_redirects=False,
    )


def test_successful_register_logs_in(client, store):
    response = register(client)
    assert response.status_code == status.HTTP_302_FOUND
    assert response.headers["location"] == "/"

    user = store.find_by_email("a@x.com")
    assert user is not None and user.id == 1
    assert "Welcome back, a@x.com" in client.get("/").text


def test_password_mismatch_creates_no_user(client, store):
    response = register(client, confirm="other")
    assert response.status_code == status.HTTP_302_FOUND
    assert response.headers["location"] == "/register"
    assert len(store) == 0
    assert client.cookies.get("session") is None


@pytest.mark.parametrize(
    "data",
    [
        {"password": "pw", "passwordConfirm": "pw"},
        {"email": "a@x.com", "passwordConfirm": "pw"},
        {"email": "a@x.com", "password": "pw"},
        {"email": "", "password": "pw", "passwordConfirm": "pw"},
        {},
    ],
)
def test_missing_fields_redirect_to_form(client, store, data):
    response = client.post("/register", data=data, follow_redirects=False)
    assert response.status_code == status.HTTP_302_FOUND
    assert response.headers["location"] == "/register"
    assert len(store) == 0


def test_same_email_twice_creates_two_users(client, store):
    register(client, password="pw1")
    client.get("/logout")
    register(client, password="pw2")

    assert [user.id for user in store.all()] == [1, 2]
    assert store.find_by_email("a@x.com").id == 1


def test_register_form(client):
    response = client.get("/register")
    assert response.status_code == 200
    assert 'name="passwordConfirm"' in response.text
