"""Session lifecycle against the database."""
from datetime import timedelta

from app.models.auth_session import AuthSession
from app.services import session_service, user_service


def test_establish_and_resolve(db_session, creator):
    token = session_service.establish_session(db_session, creator)
    user = session_service.resolve_session(db_session, token)
    assert user is not None
    assert user.id == creator.id


def test_tokens_are_unique_and_not_stored_raw(db_session, creator):
    t1 = session_service.establish_session(db_session, creator)
    t2 = session_service.establish_session(db_session, creator)
    assert t1 != t2
    stored = {row.token_hash for row in db_session.query(AuthSession).all()}
    assert t1 not in stored
    assert t2 not in stored
    assert len(stored) == 2


def test_unknown_token_resolves_to_none(db_session, creator):
    session_service.establish_session(db_session, creator)
    assert session_service.resolve_session(db_session, "made-up-token") is None


def test_end_session_is_idempotent(db_session, creator):
    token = session_service.establish_session(db_session, creator)
    session_service.end_session(db_session, token)
    session_service.end_session(db_session, token)
    assert session_service.resolve_session(db_session, token) is None


def test_expired_session_resolves_to_none_and_is_removed(db_session, creator):
    token = session_service.establish_session(
        db_session, creator, ttl=timedelta(seconds=-1)
    )
    assert session_service.resolve_session(db_session, token) is None
    assert db_session.query(AuthSession).count() == 0


def test_default_ttl_is_24_hours():
    assert session_service.session_ttl() == timedelta(hours=24)


def test_resolve_sees_latest_user_state(db_session, creator):
    token = session_service.establish_session(db_session, creator)
    user_service.toggle_creator_access(db_session, creator.id)
    user = session_service.resolve_session(db_session, token)
    assert user.active is False


def test_purge_expired_sessions(db_session, creator):
    session_service.establish_session(db_session, creator, ttl=timedelta(seconds=-5))
    live = session_service.establish_session(db_session, creator)
    assert session_service.purge_expired_sessions(db_session) == 1
    assert session_service.resolve_session(db_session, live) is not None
