"""
Service layer abstraction.

Services encapsulate the business logic of a domain.  The employee
registry keeps its records in memory; swapping it for a database-backed
store would not require changes to the API handlers.
"""
