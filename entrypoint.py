"""Backend entrypoint for packaged builds; starts uvicorn on TRADEDESK_PORT."""

# Import the app object directly so frozen bundles can resolve it
# (uvicorn's string-based import fails under PyInstaller).
from tradedesk.main import run


if __name__ == "__main__":
    run()
