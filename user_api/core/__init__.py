"""Core Layer — user records, validation rules, error types. No IO, no async.

Invariants:
    - No module in core/ imports from api/, schemas/, or infrastructure/
    - The store is the only stateful object; everything else is pure

Design Decisions:
    - Functional core separated from imperative shell (routes own HTTP concerns)
"""
