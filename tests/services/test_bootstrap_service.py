import pytest

from findmeme.common.settings import AuthConfig
from findmeme.domain.errors import Forbidden, NotFound, ValidationError
from findmeme.services.auth import BootstrapService
from findmeme.services.auth.passwords import verify_password


def _svc(db, secret="s3cret"):
    return BootstrapService(db, AuthConfig(jwt_secret="x", bootstrap_secret=secret))


def test_disabled_without_configured_secret(db, make_user):
    make_user("ivy")
    with pytest.raises(Forbidden):
        _svc(db, secret="").bootstrap_admin(secret="", username="ivy")


def test_wrong_secret_is_forbidden(db, make_user):
    make_user("ivy")
    with pytest.raises(Forbidden):
        _svc(db).bootstrap_admin(secret="guess", username="ivy")
    with pytest.raises(Forbidden):
        _svc(db).list_users(secret=None)


def test_promotes_by_email_and_resets_password(db, make_user):
    u = make_user("jack", password="old-password")
    account = _svc(db).bootstrap_admin(secret="s3cret", email="JACK@example.com", new_password="brand-new")
    assert account.is_admin is True
    assert u.is_admin is True
    assert verify_password(u.password_hash, "brand-new")


def test_requires_a_handle_and_an_existing_user(db):
    with pytest.raises(ValidationError):
        _svc(db).bootstrap_admin(secret="s3cret")
    with pytest.raises(NotFound):
        _svc(db).bootstrap_admin(secret="s3cret", username="nobody")


def test_list_users(db, make_user):
    make_user("kate")
    make_user("liam", admin=True)
    users = _svc(db).list_users(secret="s3cret")
    assert [(u.username, u.is_admin) for u in users] == [("liam", True), ("kate", False)]
