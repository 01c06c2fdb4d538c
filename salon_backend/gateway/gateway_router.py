# salon_backend/gateway/gateway_router.py
from fastapi import APIRouter

from salon_backend.routers.auth_router import router as auth_router
from salon_backend.routers.users_router import router as users_router
from salon_backend.routers.employees_router import router as employees_router
from salon_backend.routers.services_router import router as services_router
from salon_backend.routers.employee_services_router import router as employee_services_router
from salon_backend.routers.availability_router import router as availability_router
from salon_backend.routers.blocked_slots_router import router as blocked_slots_router
from salon_backend.routers.bookings_router import router as bookings_router
from salon_backend.routers.slots_router import router as slots_router
from salon_backend.routers.expenses_router import router as expenses_router

gateway_router = APIRouter(prefix="/api")

# identity
gateway_router.include_router(auth_router)                 # /api/auth/...
gateway_router.include_router(users_router)                # /api/users/...

# salon catalogue
gateway_router.include_router(employees_router)            # /api/employees/...
gateway_router.include_router(services_router)             # /api/services/...
gateway_router.include_router(employee_services_router)    # /api/employee-services/...

# scheduling
gateway_router.include_router(availability_router)         # /api/availability/...
gateway_router.include_router(blocked_slots_router)        # /api/blocked-slots/...
gateway_router.include_router(bookings_router)             # /api/bookings/...
gateway_router.include_router(slots_router)                # /api/slots/...

# owner finances
gateway_router.include_router(expenses_router)             # /api/expenses/...
