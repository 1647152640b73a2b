# This project was developed with assistance from AI tools.
"""Loan desk: department loan applications, admin review, branch disbursement."""

__version__ = "0.1.0"
