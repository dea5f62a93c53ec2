from datetime import UTC, date, datetime
from uuid import uuid4

from splitwise.domain import SessionToken, User


def _user(**overrides) -> User:
    now = datetime(2026, 1, 2, 3, 4, 5, tzinfo=UTC)
    fields = dict(
        id=uuid4(),
        first_name="John",
        last_name="Doe",
        email="john.doe@example.com",
        password_hash="$2b$12$hashedpassword",
        created_at=now,
        updated_at=now,
    )
    fields.update(overrides)
    return User(**fields)


def test_public_dict_never_contains_hash() -> None:
    user = _user(date_of_birth=date(1990, 1, 1), phone_number="+1234567890")

    payload = user.to_public_dict()

    assert "password_hash" not in payload
    assert "$2b$12$hashedpassword" not in str(payload)
    assert payload["id"] == str(user.id)
    assert payload["date_of_birth"] == "1990-01-01"
    assert payload["phone_number"] == "+1234567890"
    assert payload["created_at"] == "2026-01-02T03:04:05+00:00"


def test_repr_hides_secrets() -> None:
    user = _user()
    session = SessionToken(
        user_id=user.id,
        token="signed-token-value",
        issued_at=user.created_at,
        expires_at=user.created_at,
    )

    assert "hashedpassword" not in repr(user)
    assert "signed-token-value" not in repr(session)


def test_is_deleted() -> None:
    assert _user().is_deleted is False
    assert _user(deleted_at=datetime.now(UTC)).is_deleted is True
