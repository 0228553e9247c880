"""
Account Ledger

A single-session, terminal-driven account ledger: one balance held in
memory, viewed, credited and debited through a numbered menu. All amounts
use Decimal rounded to two places.
"""

__version__ = "1.0.0"
