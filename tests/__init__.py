"""
Test suite for the Farm Ledger backend.

Test Organization:
- conftest.py  - shared fixtures (API client, ledger services, seeded balances)
- integration/ - service and API tests per domain, run against the test database
"""
