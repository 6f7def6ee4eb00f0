import bcrypt
import pytest

from buildmarket.users.security import PasswordHashError, hash_password


def test_hash_is_a_salted_bcrypt_hash():
    hashed = hash_password("s3cret-pass")
    assert hashed.startswith("$2b$")
    assert bcrypt.checkpw(b"s3cret-pass", hashed.encode("utf-8"))
    assert hash_password("s3cret-pass") != hashed


def test_empty_password_cannot_be_hashed():
    with pytest.raises(PasswordHashError):
        hash_password("")
