"""Typed, store-backed governance parameters for ledger modules."""
