"""Saved generation session routes for the fitshot API."""

from api.dependencies import get_current_account, get_store
from api.schemas import MessageResponse, SessionListResponse, SessionResponse
from api.store import Store
from fastapi import APIRouter, Depends, HTTPException, Query
from models.generation import Account

router = APIRouter(tags=["Sessions"])


@router.get(
    "/api/sessions",
    response_model=SessionListResponse,
    summary="List sessions",
    description="The current account's saved generations, newest first.",
)
async def list_sessions(
    limit: int = Query(default=50, ge=1, le=200),
    account: Account = Depends(get_current_account),
    store: Store = Depends(get_store),
) -> dict:
    sessions = await store.list_sessions(account.id, limit=limit)
    return {"sessions": sessions}


@router.get(
    "/api/sessions/{session_id}",
    response_model=SessionResponse,
    summary="Get session",
    responses={404: {"description": "Session not found"}},
)
async def get_session(
    session_id: str,
    account: Account = Depends(get_current_account),
    store: Store = Depends(get_store),
) -> dict:
    session = await store.get_session(session_id, account_id=account.id)
    if session is None:
        raise HTTPException(status_code=404, detail="Session not found")
    return session


@router.delete(
    "/api/sessions/{session_id}",
    response_model=MessageResponse,
    summary="Delete session",
    responses={404: {"description": "Session not found"}},
)
async def delete_session(
    session_id: str,
    account: Account = Depends(get_current_account),
    store: Store = Depends(get_store),
) -> dict[str, str]:
    if not await store.delete_session(session_id, account.id):
        raise HTTPException(status_code=404, detail="Session not found")
    return {"message": "Session deleted successfully"}
