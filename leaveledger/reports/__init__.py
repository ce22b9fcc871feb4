"""Reports module — ledger aggregates and per-day fragments."""
