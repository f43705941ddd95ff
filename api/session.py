from fastapi import APIRouter, Depends, HTTPException, status

from exceptions import RecipeIndexError, WorkflowStateError
from models.allergen import RecipeReport
from models.session import SessionSnapshot
from services.review_workflow import ReviewWorkflow
from .dependencies import get_workflow

router = APIRouter()


@router.get("", response_model=SessionSnapshot)
async def get_session(workflow: ReviewWorkflow = Depends(get_workflow)):
    """Current review state, including the active report once approved"""
    return workflow.snapshot()


@router.post("/approve", response_model=SessionSnapshot)
async def approve_batch(workflow: ReviewWorkflow = Depends(get_workflow)):
    """Approve the uploaded batch and analyse its first recipe"""
    try:
        report = await workflow.approve()
        return workflow.snapshot(report=report)
    except WorkflowStateError as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=str(e)
        )
    except Exception as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to approve batch: {str(e)}"
        )


@router.post("/select/{index}", response_model=SessionSnapshot)
async def select_recipe(index: int, workflow: ReviewWorkflow = Depends(get_workflow)):
    """Switch the active recipe and recompute its allergen report"""
    try:
        report = await workflow.select_recipe(index)
        return workflow.snapshot(report=report, active_index=index)
    except WorkflowStateError as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=str(e)
        )
    except RecipeIndexError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e)
        )
    except Exception as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to select recipe: {str(e)}"
        )


@router.get("/report", response_model=RecipeReport)
async def get_active_report(workflow: ReviewWorkflow = Depends(get_workflow)):
    """Allergen report for the active recipe"""
    report = workflow.active_report
    if report is None:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"No report available while session is '{workflow.status.value}'"
        )
    return report
