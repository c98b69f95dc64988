"""
Persistence adapters.

Repositories encapsulate how data is stored/retrieved and hand plain domain
entities back to the services, so no ORM object outlives its session.
"""
