# salon_backend/schemas/__init__.py

# envelope
from .common import ApiResponse, IdOut, CamelModel

# users / auth
from .users import (
    LoginPayload, RegisterPayload, UserCreate, ChangePasswordPayload, UserOut, SessionUserOut, Role,
)

# salon resources
from .employees import EmployeeCreate, EmployeeUpdate, EmployeeOut, EmployeeStatus
from .services import (
    ServiceCreate, ServiceUpdate, ServiceOut, EmployeeServiceCreate, EmployeeServiceOut,
)
from .availability import (
    AvailabilityCreate, AvailabilityUpdate, AvailabilityOut,
    BlockedSlotCreate, BlockedSlotOut, TimeSlot, AvailableSlotsOut, DAY_NAMES,
)
from .bookings import (
    BookingCreate, BookingUpdate, BookingOut, BookingStatus, CancelPayload, CancelOut,
)
from .expenses import ExpenseCreate, ExpenseUpdate, ExpenseOut

__all__ = [
    "ApiResponse", "IdOut", "CamelModel",
    "LoginPayload", "RegisterPayload", "UserCreate", "ChangePasswordPayload",
    "UserOut", "SessionUserOut", "Role",
    "EmployeeCreate", "EmployeeUpdate", "EmployeeOut", "EmployeeStatus",
    "ServiceCreate", "ServiceUpdate", "ServiceOut", "EmployeeServiceCreate", "EmployeeServiceOut",
    "AvailabilityCreate", "AvailabilityUpdate", "AvailabilityOut",
    "BlockedSlotCreate", "BlockedSlotOut", "TimeSlot", "AvailableSlotsOut", "DAY_NAMES",
    "BookingCreate", "BookingUpdate", "BookingOut", "BookingStatus", "CancelPayload", "CancelOut",
    "ExpenseCreate", "ExpenseUpdate", "ExpenseOut",
]
