from fastapi import APIRouter, HTTPException, Depends, UploadFile, File
import logging

from api.dependencies import get_visitor
from core.contact_wizard import WizardStep
from managers.session_manager import VisitorSession
from models.contact import FieldUpdate, InterestRequest
from utils.file_handlers import read_upload

router = APIRouter(prefix="/contact", tags=["contact"])
logger = logging.getLogger(__name__)


def _wizard_response(visitor: VisitorSession, **extra) -> dict:
    return {
        "wizard": visitor.wizard.state(),
        "notifications": [n.model_dump(mode="json") for n in visitor.drain_notifications()],
        **extra,
    }


@router.get("/wizard")
def get_wizard(visitor: VisitorSession = Depends(get_visitor)):
    return _wizard_response(visitor)


@router.patch("/wizard/fields")
def update_field(req: FieldUpdate, visitor: VisitorSession = Depends(get_visitor)):
    """Update one draft field; only that field is re-validated"""
    try:
        visitor.wizard.update_field(req.name, req.value)
    except KeyError:
        raise HTTPException(422, f"Unknown contact field: {req.name}")
    return _wizard_response(visitor)


@router.post("/wizard/advance")
def advance(visitor: VisitorSession = Depends(get_visitor)):
    moved = visitor.wizard.advance()
    return _wizard_response(visitor, moved=moved)


@router.post("/wizard/retreat")
def retreat(visitor: VisitorSession = Depends(get_visitor)):
    visitor.wizard.retreat()
    return _wizard_response(visitor)


@router.post("/wizard/attachment")
async def attach_file(file: UploadFile = File(...), visitor: VisitorSession = Depends(get_visitor)):
    content = await read_upload(file)
    accepted = visitor.wizard.attach_file(file.filename, file.content_type, content)
    return _wizard_response(visitor, accepted=accepted)


@router.delete("/wizard/attachment")
def remove_attachment(visitor: VisitorSession = Depends(get_visitor)):
    visitor.wizard.remove_attachment()
    return _wizard_response(visitor)


@router.post("/wizard/submit")
def submit_wizard(visitor: VisitorSession = Depends(get_visitor)):
    """
    Send the completed draft to the portfolio backend.

    Runs in the threadpool so the outbound call does not block the event
    loop. A failed send leaves the draft in place for a retry.
    """
    wizard = visitor.wizard
    if wizard.step != WizardStep.MESSAGE:
        raise HTTPException(400, "The message can only be sent from the last step")
    if wizard.is_submitting:
        raise HTTPException(409, "A submission is already in progress")

    success = wizard.submit()
    return _wizard_response(visitor, success=success)


@router.post("/wizard/reset")
def reset_wizard(visitor: VisitorSession = Depends(get_visitor)):
    visitor.wizard.reset()
    return _wizard_response(visitor)


@router.post("/interest")
def submit_interest(req: InterestRequest, visitor: VisitorSession = Depends(get_visitor)):
    """Quick email form: one field, same success/failure reporting as the wizard"""
    success = visitor.interest.submit(req.email)
    return {
        "success": success,
        "interest": visitor.interest.state(),
        "notifications": [n.model_dump(mode="json") for n in visitor.drain_notifications()],
    }
