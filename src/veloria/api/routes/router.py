from fastapi import APIRouter

from src.veloria.api.routes import auth, bookings, contacts, finance, projects

api_router = APIRouter(prefix="/api")

api_router.include_router(auth.router)
api_router.include_router(projects.router)
api_router.include_router(bookings.router)
api_router.include_router(contacts.router)
api_router.include_router(finance.router)
