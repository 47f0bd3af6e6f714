from .booking_service import CargoBookingService

__all__ = ["CargoBookingService"]
