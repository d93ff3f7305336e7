"""
FastAPI dependencies that hand the per-application front desk to routes.
Tests swap the desk through app.dependency_overrides[get_front_desk].
"""

from fastapi import Request

from frontdesk.services.front_desk import FrontDesk


def get_front_desk(request: Request) -> FrontDesk:
    return request.app.state.front_desk
