import sqlite3
from datetime import date, datetime
from typing import Any
from uuid import UUID

from practicals.domain.entities import (
    Account,
    ChatMessage,
    ChatSummary,
    ChatUser,
    LastMessage,
    Student,
)


# Helper to convert sqlite rows to dicts
def dict_factory(cursor: sqlite3.Cursor, row: Any) -> dict[str, Any]:
    d = {}
    for idx, col in enumerate(cursor.description):
        d[col[0]] = row[idx]
    return d


def parse_dt(s: str | None) -> datetime | None:
    return datetime.fromisoformat(s) if s else None


class _SQLiteRepo:
    def __init__(self, db_path: str):
        self.db_path = db_path

    def _get_conn(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = dict_factory
        conn.execute("PRAGMA foreign_keys = ON;")
        return conn

    def ping(self) -> None:
        """Raise sqlite3.Error when the database cannot be queried."""
        conn = self._get_conn()
        try:
            conn.execute("SELECT 1").fetchone()
        finally:
            conn.close()


class SQLiteStudentRepo(_SQLiteRepo):
    _SEARCH_CLAUSE = (
        "(instr(lower(name), lower(:q)) > 0"
        " OR instr(lower(email), lower(:q)) > 0"
        " OR instr(lower(course), lower(:q)) > 0)"
    )

    def save(self, student: Student) -> Student:
        """Insert or update. Raises sqlite3.IntegrityError on duplicate email."""
        conn = self._get_conn()
        try:
            conn.execute(
                """
                INSERT INTO students (
                    id, name, email, phone, course, fee_paid,
                    joined_at, created_at, updated_at
                ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)
                ON CONFLICT(id) DO UPDATE SET
                    name=excluded.name,
                    email=excluded.email,
                    phone=excluded.phone,
                    course=excluded.course,
                    fee_paid=excluded.fee_paid,
                    joined_at=excluded.joined_at,
                    updated_at=excluded.updated_at
            """,
                (
                    str(student.id),
                    student.name,
                    student.email,
                    student.phone,
                    student.course,
                    1 if student.fee_paid else 0,
                    student.joined_at.isoformat(),
                    student.created_at.isoformat(),
                    student.updated_at.isoformat(),
                ),
            )
            conn.commit()
            return student
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()

    def get_by_id(self, student_id: UUID) -> Student | None:
        conn = self._get_conn()
        try:
            row = conn.execute(
                "SELECT * FROM students WHERE id = ?", (str(student_id),)
            ).fetchone()
            return self._map_row(row) if row else None
        finally:
            conn.close()

    def get_by_email(self, email: str) -> Student | None:
        conn = self._get_conn()
        try:
            row = conn.execute("SELECT * FROM students WHERE email = ?", (email,)).fetchone()
            return self._map_row(row) if row else None
        finally:
            conn.close()

    def delete(self, student_id: UUID) -> bool:
        conn = self._get_conn()
        try:
            cur = conn.execute("DELETE FROM students WHERE id = ?", (str(student_id),))
            conn.commit()
            return cur.rowcount > 0
        finally:
            conn.close()

    def search(self, query: str, offset: int, limit: int) -> list[Student]:
        """Newest first; empty query matches everything."""
        where = f"WHERE {self._SEARCH_CLAUSE}" if query else ""
        conn = self._get_conn()
        try:
            rows = conn.execute(
                f"SELECT * FROM students {where} "
                "ORDER BY created_at DESC, rowid DESC LIMIT :limit OFFSET :offset",
                {"q": query, "limit": limit, "offset": offset},
            ).fetchall()
            return [self._map_row(r) for r in rows]
        finally:
            conn.close()

    def count(self, query: str) -> int:
        where = f"WHERE {self._SEARCH_CLAUSE}" if query else ""
        conn = self._get_conn()
        try:
            row = conn.execute(
                f"SELECT COUNT(*) AS n FROM students {where}", {"q": query}
            ).fetchone()
            return int(row["n"])
        finally:
            conn.close()

    def _map_row(self, row: dict[str, Any]) -> Student:
        return Student(
            id=UUID(row["id"]),
            name=row["name"],
            email=row["email"],
            phone=row["phone"],
            course=row["course"],
            fee_paid=bool(row["fee_paid"]),
            joined_at=parse_dt(row["joined_at"]),
            created_at=parse_dt(row["created_at"]),
            updated_at=parse_dt(row["updated_at"]),
        )


class SQLiteAccountRepo(_SQLiteRepo):
    def save(self, account: Account) -> Account:
        conn = self._get_conn()
        try:
            conn.execute(
                """
                INSERT INTO accounts (
                    id, first_name, last_name, email, password_hash, phone,
                    date_of_birth, is_active, last_login, created_at, updated_at
                ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
                ON CONFLICT(id) DO UPDATE SET
                    first_name=excluded.first_name,
                    last_name=excluded.last_name,
                    email=excluded.email,
                    password_hash=excluded.password_hash,
                    phone=excluded.phone,
                    date_of_birth=excluded.date_of_birth,
                    is_active=excluded.is_active,
                    last_login=excluded.last_login,
                    updated_at=excluded.updated_at
            """,
                (
                    str(account.id),
                    account.first_name,
                    account.last_name,
                    account.email,
                    account.password_hash,
                    account.phone,
                    account.date_of_birth.isoformat() if account.date_of_birth else None,
                    1 if account.is_active else 0,
                    account.last_login.isoformat() if account.last_login else None,
                    account.created_at.isoformat(),
                    account.updated_at.isoformat(),
                ),
            )
            conn.commit()
            return account
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()

    def get_by_id(self, account_id: UUID) -> Account | None:
        conn = self._get_conn()
        try:
            row = conn.execute(
                "SELECT * FROM accounts WHERE id = ?", (str(account_id),)
            ).fetchone()
            return self._map_row(row) if row else None
        finally:
            conn.close()

    def get_by_email(self, email: str) -> Account | None:
        conn = self._get_conn()
        try:
            row = conn.execute("SELECT * FROM accounts WHERE email = ?", (email,)).fetchone()
            return self._map_row(row) if row else None
        finally:
            conn.close()

    def _map_row(self, row: dict[str, Any]) -> Account:
        dob = row["date_of_birth"]
        return Account(
            id=UUID(row["id"]),
            first_name=row["first_name"],
            last_name=row["last_name"],
            email=row["email"],
            password_hash=row["password_hash"],
            phone=row["phone"],
            date_of_birth=date.fromisoformat(dob) if dob else None,
            is_active=bool(row["is_active"]),
            last_login=parse_dt(row["last_login"]),
            created_at=parse_dt(row["created_at"]),
            updated_at=parse_dt(row["updated_at"]),
        )


class SQLiteChatRepo(_SQLiteRepo):
    # --- Users ---

    def save_user(self, user: ChatUser) -> ChatUser:
        conn = self._get_conn()
        try:
            conn.execute(
                """
                INSERT INTO chat_users (uid, display_name, email, created_at)
                VALUES (?, ?, ?, ?)
                ON CONFLICT(uid) DO UPDATE SET
                    display_name=excluded.display_name,
                    email=excluded.email
            """,
                (user.uid, user.display_name, user.email, user.created_at.isoformat()),
            )
            conn.commit()
            return user
        finally:
            conn.close()

    def get_user(self, uid: str) -> ChatUser | None:
        conn = self._get_conn()
        try:
            row = conn.execute("SELECT * FROM chat_users WHERE uid = ?", (uid,)).fetchone()
            return self._map_user(row) if row else None
        finally:
            conn.close()

    def list_users(self, limit: int = 50) -> list[ChatUser]:
        conn = self._get_conn()
        try:
            rows = conn.execute(
                "SELECT * FROM chat_users ORDER BY created_at ASC LIMIT ?", (limit,)
            ).fetchall()
            return [self._map_user(r) for r in rows]
        finally:
            conn.close()

    # --- Messages ---

    def add_message(self, message: ChatMessage) -> ChatMessage:
        conn = self._get_conn()
        try:
            conn.execute(
                """
                INSERT INTO chat_messages (id, chat_id, text, sender_id, sender_name, timestamp)
                VALUES (?, ?, ?, ?, ?, ?)
            """,
                (
                    str(message.id),
                    message.chat_id,
                    message.text,
                    message.sender_id,
                    message.sender_name,
                    message.timestamp.isoformat(),
                ),
            )
            conn.commit()
            return message
        finally:
            conn.close()

    def list_messages(self, chat_id: str) -> list[ChatMessage]:
        conn = self._get_conn()
        try:
            rows = conn.execute(
                "SELECT * FROM chat_messages WHERE chat_id = ? ORDER BY timestamp ASC, rowid ASC",
                (chat_id,),
            ).fetchall()
            return [
                ChatMessage(
                    id=UUID(r["id"]),
                    chat_id=r["chat_id"],
                    text=r["text"],
                    sender_id=r["sender_id"],
                    sender_name=r["sender_name"],
                    timestamp=parse_dt(r["timestamp"]),
                )
                for r in rows
            ]
        finally:
            conn.close()

    # --- Chat summaries ---

    def save_chat(self, chat: ChatSummary) -> ChatSummary:
        last = chat.last_message
        conn = self._get_conn()
        try:
            conn.execute(
                """
                INSERT INTO chats (
                    id, participant_a, participant_b,
                    last_text, last_sender_id, last_timestamp, last_updated
                ) VALUES (?, ?, ?, ?, ?, ?, ?)
                ON CONFLICT(id) DO UPDATE SET
                    participant_a=excluded.participant_a,
                    participant_b=excluded.participant_b,
                    last_text=excluded.last_text,
                    last_sender_id=excluded.last_sender_id,
                    last_timestamp=excluded.last_timestamp,
                    last_updated=excluded.last_updated
            """,
                (
                    chat.id,
                    chat.participants[0],
                    chat.participants[1],
                    last.text if last else None,
                    last.sender_id if last else None,
                    last.timestamp.isoformat() if last else None,
                    chat.last_updated.isoformat(),
                ),
            )
            conn.commit()
            return chat
        finally:
            conn.close()

    def list_chats_for(self, uid: str) -> list[ChatSummary]:
        conn = self._get_conn()
        try:
            rows = conn.execute(
                "SELECT * FROM chats WHERE participant_a = ? OR participant_b = ? "
                "ORDER BY last_updated DESC",
                (uid, uid),
            ).fetchall()
            return [self._map_chat(r) for r in rows]
        finally:
            conn.close()

    def _map_user(self, row: dict[str, Any]) -> ChatUser:
        return ChatUser(
            uid=row["uid"],
            display_name=row["display_name"],
            email=row["email"],
            created_at=parse_dt(row["created_at"]),
        )

    def _map_chat(self, row: dict[str, Any]) -> ChatSummary:
        last = None
        if row["last_text"] is not None:
            last = LastMessage(
                text=row["last_text"],
                sender_id=row["last_sender_id"],
                timestamp=parse_dt(row["last_timestamp"]),
            )
        return ChatSummary(
            id=row["id"],
            participants=[row["participant_a"], row["participant_b"]],
            last_message=last,
            last_updated=parse_dt(row["last_updated"]),
        )
