"""
DailySpends Test Suite

This package contains tests for the DailySpends application:

- test_aggregator.py: Period adjustment, limit checks and progress ratios
- test_limits.py: Limit and amount parsing
- test_periods.py: Month labels, day counts and month navigation
- test_stores.py: Record, limit and receipt stores and the limits state
- test_models.py: Schema declaration and table creation
- test_auth.py: Authentication tests (signup, login, logout, profile)
- test_dashboard.py: Dashboard totals, period selector and over-budget alerts
- test_expenses.py: Daily expense editor with notes and receipts
- test_settings.py: Period limit settings
- test_receipts.py: Bill gallery and receipt file access
- test_security.py: Security-focused tests (CSRF, headers, validation)

Run all tests:
    pytest tests/

Run specific test file:
    pytest tests/test_auth.py

Run with verbose output:
    pytest tests/ -v
"""
