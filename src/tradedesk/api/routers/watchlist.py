"""Watchlist endpoints."""

from fastapi import APIRouter, Depends, Response

from tradedesk.api.deps import get_watchlist_service
from tradedesk.api.schemas import WatchlistResponse, WatchlistAddRequest
from tradedesk.services import WatchlistService

router = APIRouter(prefix="/watchlist", tags=["watchlist"])


def _to_response(watchlist: WatchlistService) -> WatchlistResponse:
    return WatchlistResponse(
        symbols=watchlist.symbols(),
        extra_symbols=watchlist.extra_symbols(),
    )


@router.get("", response_model=WatchlistResponse)
def get_watchlist(
    watchlist: WatchlistService = Depends(get_watchlist_service),
) -> WatchlistResponse:
    """Return the watched symbols."""
    return _to_response(watchlist)


@router.post("", response_model=WatchlistResponse, status_code=201)
def add_symbol(
    data: WatchlistAddRequest,
    watchlist: WatchlistService = Depends(get_watchlist_service),
) -> WatchlistResponse:
    """Add a symbol (already-watched symbols are ignored)."""
    watchlist.add_symbol(data.symbol)
    return _to_response(watchlist)


@router.delete("/{symbol}", status_code=204)
def remove_symbol(
    symbol: str,
    watchlist: WatchlistService = Depends(get_watchlist_service),
) -> Response:
    """Remove a user-added symbol (idempotent)."""
    watchlist.remove_symbol(symbol)
    return Response(status_code=204)
