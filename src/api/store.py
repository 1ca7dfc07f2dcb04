"""SQLite-based persistent storage for accounts, coins and saved sessions.

Uses aiosqlite for async database operations.
"""

import asyncio
import json
import logging
import secrets
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional

import aiosqlite

from models.generation import Account, GenerationSession

logger = logging.getLogger(__name__)

# Default database path
DEFAULT_DB_PATH = ".fitshot/fitshot.db"

REFERRAL_CODE_LENGTH = 8
REFERRAL_ALPHABET = "ABCDEFGHJKLMNPQRSTUVWXYZ23456789"
ACCOUNT_INSERT_ATTEMPTS = 3


class AccountExistsError(Exception):
    """Raised when registering an email that already has an account."""

    pass


class PrivacyConsentRequiredError(Exception):
    """Raised when registering without accepting the privacy policy."""

    pass


def normalize_email(email: Optional[str]) -> str:
    return (email or "").strip().lower()


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


class Store:
    """Async SQLite storage.

    Coin balances change only through ``adjust_coins``, a single conditional
    UPDATE, so concurrent requests cannot push a balance below zero.
    """

    def __init__(
        self,
        db_path: str = DEFAULT_DB_PATH,
        starting_coins: int = 2,
        referral_bonus_coins: int = 2,
        referrer_reward_coins: int = 4,
    ):
        """Initialize the store.

        Args:
            db_path: Path to SQLite database file. Parent directory
                     will be created if it doesn't exist.
            starting_coins: Coins granted to every new account
            referral_bonus_coins: Extra coins for an account created with a referral code
            referrer_reward_coins: Coins granted to the referrer per accepted referral
        """
        self.db_path = Path(db_path)
        self.starting_coins = starting_coins
        self.referral_bonus_coins = referral_bonus_coins
        self.referrer_reward_coins = referrer_reward_coins
        self.db: aiosqlite.Connection | None = None
        self._account_lock = asyncio.Lock()

    async def connect(self) -> None:
        """Open the database connection and create the schema."""
        self.db_path.parent.mkdir(parents=True, exist_ok=True)

        self.db = await aiosqlite.connect(str(self.db_path))
        self.db.row_factory = aiosqlite.Row

        await self.db.execute("PRAGMA journal_mode=WAL")

        await self.db.execute("""
            CREATE TABLE IF NOT EXISTS accounts (
                id TEXT PRIMARY KEY,
                email TEXT NOT NULL UNIQUE,
                name TEXT NOT NULL,
                coins INTEGER NOT NULL DEFAULT 0,
                referral_code TEXT NOT NULL UNIQUE,
                referred_by TEXT,
                marketing_opt_in INTEGER NOT NULL DEFAULT 0,
                privacy_accepted_at TEXT,
                created_at TEXT NOT NULL
            )
        """)

        await self.db.execute("""
            CREATE TABLE IF NOT EXISTS referrals (
                referrer_id TEXT NOT NULL,
                referred_id TEXT NOT NULL,
                awarded_at TEXT NOT NULL,
                PRIMARY KEY (referrer_id, referred_id)
            )
        """)

        await self.db.execute("""
            CREATE TABLE IF NOT EXISTS sessions (
                id TEXT PRIMARY KEY,
                account_id TEXT NOT NULL,
                created_at TEXT NOT NULL,
                data JSON
            )
        """)

        await self.db.execute("""
            CREATE INDEX IF NOT EXISTS idx_sessions_account_created
            ON sessions (account_id, created_at DESC)
        """)

        await self.db.commit()
        logger.info(f"Store connected: {self.db_path}")

    async def close(self) -> None:
        """Close database connection."""
        if self.db:
            await self.db.close()
            self.db = None
            logger.info("Store connection closed")

    def _require_db(self) -> aiosqlite.Connection:
        if self.db is None:
            raise RuntimeError("Database not connected. Call connect() first.")
        return self.db

    # =========================================================================
    # Accounts and coins
    # =========================================================================

    async def _generate_referral_code(self) -> str:
        db = self._require_db()
        while True:
            code = "".join(secrets.choice(REFERRAL_ALPHABET) for _ in range(REFERRAL_CODE_LENGTH))
            async with db.execute("SELECT 1 FROM accounts WHERE referral_code = ?", (code,)) as cursor:
                if await cursor.fetchone() is None:
                    return code

    async def create_account(
        self,
        email: str,
        name: Optional[str] = None,
        accept_privacy: bool = False,
        referral_code: Optional[str] = None,
        marketing_opt_in: bool = False,
    ) -> Account:
        """Register a new account.

        A valid referral code from another account grants bonus coins to the
        new account and a reward to the referrer. Registrations are serialized
        on this store; a UNIQUE violation from another writer on the same
        database file is still reported as ``AccountExistsError``.

        Raises:
            PrivacyConsentRequiredError: If privacy consent is missing
            AccountExistsError: If the email is already registered
        """
        normalized = normalize_email(email)
        async with self._account_lock:
            if await self.get_account_by_email(normalized) is not None:
                raise AccountExistsError("An account already exists with that email.")
            if not accept_privacy:
                raise PrivacyConsentRequiredError("Privacy consent is required.")

            referrer: Optional[Account] = None
            code = (referral_code or "").strip().upper()
            if code:
                referrer = await self._get_account_by_referral_code(code)
                if referrer is not None and normalize_email(referrer.email) == normalized:
                    referrer = None

            account_id = str(uuid.uuid4())
            for attempt in range(1, ACCOUNT_INSERT_ATTEMPTS + 1):
                try:
                    await self._insert_account(
                        account_id, normalized, name, referrer, marketing_opt_in
                    )
                    break
                except aiosqlite.IntegrityError as e:
                    # A failed INSERT only aborts its own statement; nothing to roll back
                    if await self.get_account_by_email(normalized) is not None:
                        raise AccountExistsError("An account already exists with that email.") from e
                    if attempt == ACCOUNT_INSERT_ATTEMPTS:
                        raise
                    logger.warning(f"Referral code collision for new account, retrying ({attempt})")

        logger.info(f"Created account {account_id} (referred_by={referrer.id if referrer else None})")

        account = await self.get_account(account_id)
        if account is None:
            raise RuntimeError(f"Account {account_id} missing after insert")
        return account

    async def _insert_account(
        self,
        account_id: str,
        email: str,
        name: Optional[str],
        referrer: Optional[Account],
        marketing_opt_in: bool,
    ) -> None:
        db = self._require_db()
        timestamp = _now()
        coins = self.starting_coins
        if referrer is not None:
            coins += self.referral_bonus_coins

        await db.execute(
            "INSERT INTO accounts (id, email, name, coins, referral_code, referred_by, "
            "marketing_opt_in, privacy_accepted_at, created_at) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)",
            (
                account_id,
                email,
                name or email.split("@")[0],
                coins,
                await self._generate_referral_code(),
                referrer.id if referrer else None,
                int(bool(marketing_opt_in)),
                timestamp,
                timestamp,
            ),
        )

        if referrer is not None:
            await db.execute(
                "UPDATE accounts SET coins = coins + ? WHERE id = ?",
                (self.referrer_reward_coins, referrer.id),
            )
            await db.execute(
                "INSERT INTO referrals (referrer_id, referred_id, awarded_at) VALUES (?, ?, ?)",
                (referrer.id, account_id, timestamp),
            )

        await db.commit()

    async def get_account(self, account_id: str) -> Optional[Account]:
        """Get an account by id, or None if not found."""
        return await self._fetch_account("a.id = ?", account_id)

    async def get_account_by_email(self, email: str) -> Optional[Account]:
        return await self._fetch_account("a.email = ?", normalize_email(email))

    async def _get_account_by_referral_code(self, code: str) -> Optional[Account]:
        return await self._fetch_account("a.referral_code = ?", code)

    async def _fetch_account(self, where: str, value: Any) -> Optional[Account]:
        db = self._require_db()
        query = (
            "SELECT a.*, (SELECT COUNT(*) FROM referrals r WHERE r.referrer_id = a.id) "
            f"AS referral_count FROM accounts a WHERE {where}"
        )
        async with db.execute(query, (value,)) as cursor:
            row = await cursor.fetchone()
            return self._row_to_account(row) if row is not None else None

    async def adjust_coins(self, account_id: str, delta: int) -> Optional[int]:
        """Add (or, with a negative delta, spend) coins.

        Returns:
            The new balance, or None if the account does not exist or the
            balance would go negative
        """
        db = self._require_db()
        async with db.execute(
            "UPDATE accounts SET coins = coins + ? WHERE id = ? AND coins + ? >= 0 RETURNING coins",
            (delta, account_id, delta),
        ) as cursor:
            row = await cursor.fetchone()
        await db.commit()

        if row is None:
            logger.debug(f"Coin adjustment of {delta} refused for account {account_id}")
            return None
        return row["coins"]

    # =========================================================================
    # Sessions
    # =========================================================================

    async def create_session(self, session: GenerationSession) -> dict[str, Any]:
        """Persist a generation session."""
        db = self._require_db()
        data = session.to_dict()
        await db.execute(
            "INSERT INTO sessions (id, account_id, created_at, data) VALUES (?, ?, ?, ?)",
            (session.id, session.account_id, data["created_at"], json.dumps(data)),
        )
        await db.commit()
        logger.info(f"Saved session {session.id} for account {session.account_id}")
        return data

    async def get_session(self, session_id: str, account_id: Optional[str] = None) -> Optional[dict[str, Any]]:
        """Get a session, optionally restricted to one account."""
        db = self._require_db()
        query = "SELECT * FROM sessions WHERE id = ?"
        params: list[Any] = [session_id]
        if account_id is not None:
            query += " AND account_id = ?"
            params.append(account_id)

        async with db.execute(query, params) as cursor:
            row = await cursor.fetchone()
            return self._row_to_session(row) if row is not None else None

    async def list_sessions(self, account_id: str, limit: int = 100) -> list[dict[str, Any]]:
        """List an account's sessions, newest first."""
        db = self._require_db()
        async with db.execute(
            "SELECT * FROM sessions WHERE account_id = ? ORDER BY created_at DESC LIMIT ?",
            (account_id, limit),
        ) as cursor:
            rows = await cursor.fetchall()
            return [self._row_to_session(row) for row in rows]

    async def delete_session(self, session_id: str, account_id: str) -> bool:
        """Delete an account's session. Returns False if not found."""
        db = self._require_db()
        async with db.execute(
            "DELETE FROM sessions WHERE id = ? AND account_id = ? RETURNING id",
            (session_id, account_id),
        ) as cursor:
            row = await cursor.fetchone()
        await db.commit()

        if row is not None:
            logger.info(f"Deleted session {session_id}")
            return True
        return False

    def _row_to_account(self, row: aiosqlite.Row) -> Account:
        return Account(
            id=row["id"],
            email=row["email"],
            name=row["name"],
            coins=row["coins"],
            referral_code=row["referral_code"],
            referred_by=row["referred_by"],
            referral_count=row["referral_count"],
            marketing_opt_in=bool(row["marketing_opt_in"]),
            privacy_accepted_at=row["privacy_accepted_at"],
            created_at=row["created_at"],
        )

    def _row_to_session(self, row: aiosqlite.Row) -> dict[str, Any]:
        result: dict[str, Any] = {
            "id": row["id"],
            "account_id": row["account_id"],
            "created_at": row["created_at"],
        }
        data_str = row["data"]
        if data_str:
            try:
                result.update(json.loads(data_str))
            except json.JSONDecodeError:
                logger.warning(f"Failed to parse JSON data for session {row['id']}")
        return result
