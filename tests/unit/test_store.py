"""Unit tests for the SQLite store (accounts, coins, referrals, sessions)."""

import asyncio
from datetime import datetime, timedelta, timezone

import pytest
import pytest_asyncio

from api.store import AccountExistsError, PrivacyConsentRequiredError, Store
from models.generation import Account, GenerationSession


@pytest_asyncio.fixture
async def store(tmp_path):
    db = Store(db_path=str(tmp_path / "data" / "test.db"))
    await db.connect()
    yield db
    await db.close()


def _session(session_id: str, account_id: str, minutes_ago: int = 0) -> GenerationSession:
    return GenerationSession(
        id=session_id,
        account_id=account_id,
        source_image="https://x.test/uploads/a.png",
        images=["data:image/png;base64,QUJD"],
        prompts=[{"id": "male-upper-01", "title": "Studio Model Frontpose (Upper Body)"}],
        coins_charged=1,
        created_at=datetime.now(timezone.utc) - timedelta(minutes=minutes_ago),
    )


@pytest.mark.unit
@pytest.mark.asyncio
async def test_create_account_grants_starting_coins(store):
    account = await store.create_account("  Ada@Example.com ", accept_privacy=True)

    assert account.email == "ada@example.com"
    assert account.name == "ada"
    assert account.coins == 2
    assert len(account.referral_code) == 8
    assert account.referred_by is None
    assert account.privacy_accepted_at is not None


@pytest.mark.unit
@pytest.mark.asyncio
async def test_create_account_requires_privacy_consent(store):
    with pytest.raises(PrivacyConsentRequiredError):
        await store.create_account("ada@example.com", accept_privacy=False)

    assert await store.get_account_by_email("ada@example.com") is None


@pytest.mark.unit
@pytest.mark.asyncio
async def test_duplicate_email_is_rejected(store):
    await store.create_account("ada@example.com", accept_privacy=True)

    with pytest.raises(AccountExistsError):
        await store.create_account("ADA@example.com", accept_privacy=True)


@pytest.mark.unit
@pytest.mark.asyncio
async def test_referral_rewards_both_accounts(store):
    referrer = await store.create_account("ref@example.com", name="Ref", accept_privacy=True)

    referred = await store.create_account(
        "new@example.com", accept_privacy=True, referral_code=referrer.referral_code.lower()
    )
    refreshed = await store.get_account(referrer.id)

    assert referred.coins == 2 + 2
    assert referred.referred_by == referrer.id
    assert refreshed.coins == 2 + 4
    assert refreshed.referral_count == 1


@pytest.mark.unit
@pytest.mark.asyncio
async def test_unknown_referral_code_is_ignored(store):
    account = await store.create_account("ada@example.com", accept_privacy=True, referral_code="NOPE1234")

    assert account.coins == 2
    assert account.referred_by is None


@pytest.mark.unit
@pytest.mark.asyncio
async def test_adjust_coins_never_goes_negative(store):
    account = await store.create_account("ada@example.com", accept_privacy=True)

    assert await store.adjust_coins(account.id, -3) is None
    assert (await store.get_account(account.id)).coins == 2

    assert await store.adjust_coins(account.id, -2) == 0
    assert await store.adjust_coins(account.id, 5) == 5
    assert await store.adjust_coins("missing", 1) is None


@pytest.mark.unit
@pytest.mark.asyncio
async def test_sessions_are_scoped_to_account(store):
    owner = await store.create_account("owner@example.com", accept_privacy=True)
    other = await store.create_account("other@example.com", accept_privacy=True)

    await store.create_session(_session("old", owner.id, minutes_ago=5))
    await store.create_session(_session("new", owner.id))

    sessions = await store.list_sessions(owner.id)
    assert [s["id"] for s in sessions] == ["new", "old"]
    assert sessions[0]["images"] == ["data:image/png;base64,QUJD"]
    assert sessions[0]["prompts"][0]["id"] == "male-upper-01"

    assert await store.list_sessions(other.id) == []
    assert await store.get_session("new", account_id=other.id) is None
    assert (await store.get_session("new", account_id=owner.id))["coins_charged"] == 1


@pytest.mark.unit
@pytest.mark.asyncio
async def test_delete_session(store):
    owner = await store.create_account("owner@example.com", accept_privacy=True)
    await store.create_session(_session("s1", owner.id))

    assert await store.delete_session("s1", "someone-else") is False
    assert await store.delete_session("s1", owner.id) is True
    assert await store.get_session("s1") is None
    assert await store.delete_session("s1", owner.id) is False


@pytest.mark.unit
@pytest.mark.asyncio
async def test_requires_connection(tmp_path):
    db = Store(db_path=str(tmp_path / "unused.db"))

    with pytest.raises(RuntimeError, match="not connected"):
        await db.get_account("x")


@pytest.mark.unit
@pytest.mark.asyncio
async def test_concurrent_registration_of_same_email(store):
    results = await asyncio.gather(
        store.create_account("dup@example.com", accept_privacy=True),
        store.create_account("dup@example.com", accept_privacy=True),
        return_exceptions=True,
    )

    accounts = [r for r in results if isinstance(r, Account)]
    errors = [r for r in results if isinstance(r, Exception)]
    assert len(accounts) == 1
    assert len(errors) == 1
    assert isinstance(errors[0], AccountExistsError)
    assert (await store.get_account_by_email("dup@example.com")).id == accounts[0].id


@pytest.mark.unit
@pytest.mark.asyncio
async def test_email_conflict_from_another_writer_is_reported(store, monkeypatch):
    existing = await store.create_account("dup@example.com", accept_privacy=True)
    original_lookup = store.get_account_by_email
    calls = {"count": 0}

    async def stale_first_lookup(email):
        # The first lookup misses, as if another connection inserted in between
        calls["count"] += 1
        if calls["count"] == 1:
            return None
        return await original_lookup(email)

    monkeypatch.setattr(store, "get_account_by_email", stale_first_lookup)

    with pytest.raises(AccountExistsError):
        await store.create_account("dup@example.com", accept_privacy=True)

    assert (await original_lookup("dup@example.com")).id == existing.id


@pytest.mark.unit
@pytest.mark.asyncio
async def test_referral_code_collision_is_retried(store, monkeypatch):
    first = await store.create_account("first@example.com", accept_privacy=True)
    original_generate = store._generate_referral_code
    codes = [first.referral_code]

    async def colliding_generate():
        if codes:
            return codes.pop()
        return await original_generate()

    monkeypatch.setattr(store, "_generate_referral_code", colliding_generate)

    second = await store.create_account("second@example.com", accept_privacy=True)

    assert second.referral_code != first.referral_code
    assert second.coins == 2


@pytest.mark.unit
@pytest.mark.asyncio
async def test_missing_account_after_insert_raises(store, monkeypatch):
    async def vanished(account_id):
        return None

    monkeypatch.setattr(store, "get_account", vanished)

    with pytest.raises(RuntimeError, match="missing after insert"):
        await store.create_account("ada@example.com", accept_privacy=True)
