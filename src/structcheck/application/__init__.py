"""structcheck application layer.

Use cases: rule parsing, per-file validation, baseline reconciliation,
scan orchestration and reporting.
"""
