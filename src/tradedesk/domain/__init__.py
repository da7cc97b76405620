"""Domain layer: ledger records and derived view models."""
