from .scheduled_telemedicine_provider import (
    AuthenticatesUsingPatientData,
    ScheduledTelemedicineProvider,
    SchedulesUsingPatientData,
    TelemedicineProvider,
)

__all__ = [
    "AuthenticatesUsingPatientData",
    "ScheduledTelemedicineProvider",
    "SchedulesUsingPatientData",
    "TelemedicineProvider",
]
