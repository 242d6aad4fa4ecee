"""Services Layer: business rules and startup tasks over injected repositories.

Invariants:
    - Services receive repositories at construction; no global handles
    - Domain failures returned as ServiceResult, never raised
"""
