import asyncio

import pytest

from buildmarket.core.db import Database


def test_using_handle_before_connect_fails():
    database = Database("postgresql://localhost/none")
    with pytest.raises(RuntimeError):
        database.pool()


def test_close_before_connect_is_a_no_op():
    database = Database("postgresql://localhost/none")
    asyncio.run(database.close())
    with pytest.raises(RuntimeError):
        database.pool()
