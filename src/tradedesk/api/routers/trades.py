"""Trade ledger endpoints."""

from fastapi import APIRouter, Depends, Response

from tradedesk.api.deps import get_ledger_service
from tradedesk.api.schemas import (
    TradeCreateRequest,
    TradeResponse,
    TradeListResponse,
)
from tradedesk.core.exceptions import NotFoundError
from tradedesk.services import LedgerService

router = APIRouter(prefix="/trades", tags=["trades"])


@router.get("", response_model=TradeListResponse)
def list_trades(
    ledger: LedgerService = Depends(get_ledger_service),
) -> TradeListResponse:
    """List trades in ledger (insertion) order."""
    trades = ledger.list_trades()
    return TradeListResponse(
        trades=[TradeResponse.from_record(t) for t in trades],
        count=len(trades),
    )


@router.post("", response_model=TradeResponse, status_code=201)
def create_trade(
    data: TradeCreateRequest,
    ledger: LedgerService = Depends(get_ledger_service),
) -> TradeResponse:
    """Record a trade. Invalid input is reported as 400 VALIDATION_ERROR."""
    trade = ledger.add_trade(
        symbol=data.symbol,
        side=data.side,
        quantity=data.quantity,
        price=data.price,
        strict=True,
    )
    return TradeResponse.from_record(trade)


@router.get("/{trade_id}", response_model=TradeResponse)
def get_trade(
    trade_id: str,
    ledger: LedgerService = Depends(get_ledger_service),
) -> TradeResponse:
    """Get a single trade."""
    trade = ledger.get_trade(trade_id)
    if trade is None:
        raise NotFoundError("Trade", trade_id)
    return TradeResponse.from_record(trade)


@router.delete("/{trade_id}", status_code=204)
def delete_trade(
    trade_id: str,
    ledger: LedgerService = Depends(get_ledger_service),
) -> Response:
    """Delete a trade (idempotent)."""
    ledger.delete_trade(trade_id)
    return Response(status_code=204)
