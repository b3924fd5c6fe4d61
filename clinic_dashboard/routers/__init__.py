# Routers package
from . import appointments_router
from . import patients_router
from . import doctors_router
from . import rooms_router
from . import staff_router
from . import clinical_router

__all__ = [
    "appointments_router",
    "patients_router",
    "doctors_router",
    "rooms_router",
    "staff_router",
    "clinical_router",
]
