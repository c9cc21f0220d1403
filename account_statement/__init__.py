"""Account statement ledger service."""
