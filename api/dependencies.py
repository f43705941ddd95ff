"""
Request dependencies shared by the routers.
"""
from fastapi import Request

from services.allergen_client import AllergenClient
from services.review_workflow import ReviewWorkflow


def get_workflow(request: Request) -> ReviewWorkflow:
    """The process-wide review session"""
    return request.app.state.workflow


def get_allergen_client(request: Request) -> AllergenClient:
    return request.app.state.allergen_client
