"""
Service layer abstraction.

Each service encapsulates the logic of one resource on top of an
``InMemoryRepository``.  Services are instantiated per application by
``ServiceRegistry`` rather than living in module globals, so the
in-memory stores can be swapped for a real database without changing
API handlers.
"""
