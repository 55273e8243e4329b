import jwt
import pytest
from fastapi.security import HTTPAuthorizationCredentials

from booking.auth import jwt_handler
from booking.auth.dependencies import get_current_owner
from booking.core import config
from booking.core.exceptions import AuthenticationRequired


def bearer(token: str) -> HTTPAuthorizationCredentials:
    return HTTPAuthorizationCredentials(scheme='Bearer', credentials=token)


def test_token_round_trips_owner_id() -> None:
    token = jwt_handler.create_access_token('user_2abc')

    assert jwt_handler.decode_access_token(token)['sub'] == 'user_2abc'
    assert get_current_owner(bearer(token)) == 'user_2abc'


def test_missing_credentials_require_authentication() -> None:
    with pytest.raises(AuthenticationRequired):
        get_current_owner(None)


def test_expired_token_is_rejected() -> None:
    token = jwt_handler.create_access_token('user_2abc', expires_minutes=-5)

    with pytest.raises(AuthenticationRequired) as exception_info:
        get_current_owner(bearer(token))

    assert str(exception_info.value) == 'Invalid token.'


def test_token_without_subject_is_rejected() -> None:
    token = jwt.encode({'sub': '  ', 'exp': 4102444800}, config.JWT_SECRET_KEY, algorithm=config.JWT_ALGORITHM)

    with pytest.raises(AuthenticationRequired) as exception_info:
        get_current_owner(bearer(token))

    assert str(exception_info.value) == 'Invalid token subject.'


def test_token_signed_with_another_key_is_rejected() -> None:
    token = jwt.encode({'sub': 'user_2abc', 'exp': 4102444800}, 'some-other-secret-key-material-x', algorithm='HS256')

    with pytest.raises(AuthenticationRequired):
        get_current_owner(bearer(token))
