"""
Petty Cash Ledger - Source Package

An in-memory petty cash book: dated income and expense entries with
running and aggregate balances, entered and reviewed through a
Streamlit page.

DESIGN PRINCIPLES:
1. Amounts are Decimals, never floats
2. Fail early, fail visibly: invalid entries are rejected, not defaulted
3. The opening balance can never be deleted
4. Every mutation is auditable
5. The ledger knows nothing about the UI
"""

__version__ = "1.0.0"
__author__ = "Petty Cash Team"
