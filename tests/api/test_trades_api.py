"""API tests for trade and portfolio endpoints."""

from fastapi.testclient import TestClient


def _post_trade(client: TestClient, symbol, side, quantity, price):
    return client.post(
        "/trades",
        json={"symbol": symbol, "side": side, "quantity": quantity, "price": price},
    )


class TestTradesApi:
    """Tests for /trades."""

    def test_health(self, client: TestClient):
        assert client.get("/health").json() == {"status": "healthy"}

    def test_create_and_list(self, client: TestClient):
        """
        GIVEN an empty ledger
        WHEN posting a trade
        THEN 201 is returned and the trade is listed
        """
        response = _post_trade(client, "aapl", "buy", "10", "185.50")

        assert response.status_code == 201
        body = response.json()
        assert body["symbol"] == "AAPL"
        assert body["side"] == "BUY"
        assert body["quantity"] == 10
        assert body["price"] == 185.5

        listed = client.get("/trades").json()
        assert listed["count"] == 1
        assert listed["trades"][0]["id"] == body["id"]

    def test_get_trade_by_id(self, client: TestClient):
        created = _post_trade(client, "MSFT", "sell", "1", "300").json()

        response = client.get(f"/trades/{created['id']}")

        assert response.status_code == 200
        assert response.json()["symbol"] == "MSFT"

    def test_get_unknown_trade_is_404(self, client: TestClient):
        response = client.get("/trades/12345")

        assert response.status_code == 404
        assert response.json()["error"] == "NOT_FOUND"

    def test_invalid_trade_is_400(self, client: TestClient):
        """
        GIVEN a zero quantity or an unknown side
        WHEN posting the trade
        THEN 400 VALIDATION_ERROR is returned and nothing is recorded
        """
        zero_qty = _post_trade(client, "AAPL", "buy", "0", "100")
        bad_side = _post_trade(client, "AAPL", "hold", "1", "100")
        blank = _post_trade(client, "  ", "buy", "1", "100")

        for response in (zero_qty, bad_side, blank):
            assert response.status_code == 400
            assert response.json()["error"] == "VALIDATION_ERROR"
        assert client.get("/trades").json()["count"] == 0

    def test_unparsable_number_is_422(self, client: TestClient):
        response = _post_trade(client, "AAPL", "buy", "ten", "100")

        assert response.status_code == 422

    def test_out_of_range_trade_is_400_and_portfolio_still_served(self, client: TestClient):
        """
        GIVEN a trade with an astronomically large quantity and price
        WHEN posting it and then reading the portfolio
        THEN the trade is rejected with 400 and the portfolio still loads
        """
        response = _post_trade(client, "X", "buy", "1e999999", "1e999999")

        assert response.status_code == 400
        assert response.json()["error"] == "VALIDATION_ERROR"
        assert client.get("/trades").json()["count"] == 0

        portfolio = client.get("/portfolio")
        assert portfolio.status_code == 200
        assert portfolio.json()["positions"] == []

    def test_delete_is_idempotent(self, client: TestClient):
        created = _post_trade(client, "AAPL", "buy", "1", "100").json()

        assert client.delete(f"/trades/{created['id']}").status_code == 204
        assert client.delete(f"/trades/{created['id']}").status_code == 204
        assert client.get("/trades").json()["count"] == 0


class TestPortfolioApi:
    """Tests for /portfolio."""

    def test_portfolio_after_partial_sell(self, client: TestClient):
        """
        GIVEN 10 @ 100, 10 @ 200, sell 15 @ 180
        WHEN reading the portfolio
        THEN one open position of 5 at avg 150 with realized 450
        """
        _post_trade(client, "X", "buy", "10", "100")
        _post_trade(client, "X", "buy", "10", "200")
        _post_trade(client, "X", "sell", "15", "180")

        body = client.get("/portfolio").json()

        assert body["positions"] == [{
            "symbol": "X",
            "quantity": 5.0,
            "average_cost": 150.0,
            "total_cost": 750.0,
            "realized_pl": 450.0,
        }]
        assert body["summary"] == {
            "total_invested": 750.0,
            "total_realized_pl": 450.0,
            "active_positions": 1,
            "total_trades": 3,
        }
        assert body["oversells"] == []

    def test_oversell_reported(self, client: TestClient):
        _post_trade(client, "X", "buy", "5", "100")
        sold = _post_trade(client, "X", "sell", "8", "110").json()

        body = client.get("/portfolio").json()

        assert body["positions"] == []
        assert body["summary"]["total_realized_pl"] == 50.0
        assert body["oversells"] == [{
            "trade_id": sold["id"],
            "symbol": "X",
            "requested": 8.0,
            "held": 5.0,
        }]

    def test_positions_include_closed(self, client: TestClient):
        _post_trade(client, "AAPL", "buy", "1", "100")
        _post_trade(client, "AAPL", "sell", "1", "120")
        _post_trade(client, "MSFT", "buy", "1", "300")

        open_only = client.get("/portfolio/positions").json()["positions"]
        everything = client.get("/portfolio/positions?include_closed=true").json()["positions"]

        assert [p["symbol"] for p in open_only] == ["MSFT"]
        assert [p["symbol"] for p in everything] == ["AAPL", "MSFT"]
