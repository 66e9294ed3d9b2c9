from fastapi import FastAPI

from . import auth, classes, health, payments, students, users


def register_routes(app: FastAPI) -> None:
    """Attach all API routers to the FastAPI application."""
    app.include_router(health.router)
    app.include_router(auth.router)
    app.include_router(classes.router)
    app.include_router(users.router)
    app.include_router(students.router)
    app.include_router(payments.router)
