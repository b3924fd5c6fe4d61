# Schemas package (re-export feature modules for stable imports)
from .common.common import *
from .appointments.appointment import *
from .patients.patient import *
from .doctors.doctor import *
from .rooms.room import *
from .staff.staff import *
from .clinical.clinical import *
