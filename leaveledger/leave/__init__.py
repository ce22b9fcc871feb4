"""Leave module — leave requests, ledgers and the insert rule."""
