"""
Retail Banking Ledger

Customers, savings and checking accounts, and their transaction history,
with a service layer enforcing minimum balances, overdraft, fees and
interest. All amounts use Decimal.
"""

__version__ = "1.0.0"
