"""
Password hashing for stored user rows.

The `users.password` column only ever holds a bcrypt hash.
"""

from __future__ import annotations

import bcrypt


class PasswordHashError(RuntimeError):
    pass


def hash_password(plain_password: str) -> str:
    password = (plain_password or "").encode("utf-8")
    if not password:
        raise PasswordHashError("Password is empty.")
    return bcrypt.hashpw(password, bcrypt.gensalt()).decode("utf-8")
