from typing import List, Protocol

import psycopg

from registration.state import UserRecord

CREATE_USERS_SQL = """
CREATE TABLE IF NOT EXISTS users (
    id BIGSERIAL PRIMARY KEY,
    name TEXT NOT NULL,
    email TEXT NOT NULL,
    password TEXT NOT NULL,
    aadhar CHAR(12) NOT NULL,
    mobile CHAR(10) NOT NULL,
    address TEXT NOT NULL,
    created_at TIMESTAMPTZ NOT NULL DEFAULT now()
)
"""

INSERT_USER_SQL = (
    "INSERT INTO users (name, email, password, aadhar, mobile, address) "
    "VALUES (%s, %s, %s, %s, %s, %s)"
)

SELECT_USERS_SQL = "SELECT name, email, password, aadhar, mobile, address FROM users ORDER BY id"


class StoreError(Exception):
    """Raised when the store cannot prepare or execute a statement."""


class UserStore(Protocol):
    def insert(self, record: UserRecord) -> None:
        ...


class PostgresUserStore:
    """
    Users table on a psycopg connection. The connection is expected to run in
    autocommit mode so every insert is committed on its own.
    """

    def __init__(self, conn: psycopg.Connection):
        self.conn = conn

    def setup(self) -> None:
        with self.conn.cursor() as cur:
            cur.execute(CREATE_USERS_SQL)

    def insert(self, record: UserRecord) -> None:
        try:
            with self.conn.cursor() as cur:
                # server-side prepared statement, values bound positionally
                cur.execute(INSERT_USER_SQL, record.as_row(), prepare=True)
        except psycopg.Error as exc:
            raise StoreError(str(exc)) from exc

    def list_users(self) -> List[UserRecord]:
        try:
            with self.conn.cursor() as cur:
                cur.execute(SELECT_USERS_SQL)
                rows = cur.fetchall()
        except psycopg.Error as exc:
            raise StoreError(str(exc)) from exc

        return [
            UserRecord(
                name=name,
                email=email,
                password_hash=password,
                aadhar=aadhar,
                mobile=mobile,
                address=address,
            )
            for name, email, password, aadhar, mobile, address in rows
        ]
