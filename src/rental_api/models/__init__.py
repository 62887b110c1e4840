"""API-specific request/response models.

Domain models (ReservationPeriod, ExtensionValidation, ...) live in
rental_calendar.models and are reused here where the shapes match.

Modules:
- calendar: Occupied-day and availability responses
- reservations: Reservation and extension requests/responses
- geo: Distance requests/responses
"""

__all__: list[str] = []
