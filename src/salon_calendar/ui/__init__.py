"""PyQt6 admin window around the reconciliation controller."""
