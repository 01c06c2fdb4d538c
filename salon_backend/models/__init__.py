# salon_backend/models/__init__.py
from .user_model import User, AuthAccount
from .employee_model import Employee
from .service_model import Service
from .employee_service_model import EmployeeService
from .availability_model import Availability
from .booking_model import Booking
from .blocked_slot_model import BlockedSlot
from .expense_model import Expense

__all__ = [
    "User", "AuthAccount",
    "Employee", "Service", "EmployeeService",
    "Availability", "Booking", "BlockedSlot", "Expense",
]
