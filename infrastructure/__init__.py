"""
Infrastructure Package
======================

Abstraction layers for the collaborators LL-CART does not own.

Modules:
    - storage: Product image hosting (S3, in-memory mock)
    - email: Outgoing email (SMTP, mock)
    - container: Service locator wiring domain services to their collaborators

Business code depends on the interfaces only, so tests swap in the mocks
through settings or ``container.configure_for_testing()``.
"""
