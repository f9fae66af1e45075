from fastapi import APIRouter, HTTPException, Depends
import logging

from api.dependencies import get_visitor
from managers.session_manager import VisitorSession
from models.chat import ChatRequest, ReactionRequest

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/chat", tags=["chat"])


@router.get("")
def get_chat(visitor: VisitorSession = Depends(get_visitor)):
    return visitor.chat.state()


@router.post("/open")
def open_chat(visitor: VisitorSession = Depends(get_visitor)):
    visitor.chat.open()
    return visitor.chat.state()


@router.post("/close")
def close_chat(visitor: VisitorSession = Depends(get_visitor)):
    visitor.chat.close()
    return visitor.chat.state()


@router.post("/toggle")
def toggle_chat(visitor: VisitorSession = Depends(get_visitor)):
    visitor.chat.toggle()
    return visitor.chat.state()


@router.post("/send")
def send_message(req: ChatRequest, visitor: VisitorSession = Depends(get_visitor)):
    """Send one message to the portfolio assistant"""
    # The send control is disabled while a reply is pending
    if visitor.chat.waiting:
        raise HTTPException(409, "The assistant is still answering")
    visitor.chat.send_message(req.message)
    return visitor.chat.state()


@router.post("/quick/{index}")
def send_quick_action(index: int, visitor: VisitorSession = Depends(get_visitor)):
    if not 0 <= index < len(visitor.chat.quick_actions):
        raise HTTPException(404, "Quick action not found")
    if visitor.chat.waiting:
        raise HTTPException(409, "The assistant is still answering")
    visitor.chat.send_quick_action(index)
    return visitor.chat.state()


@router.post("/clear")
def clear_chat(visitor: VisitorSession = Depends(get_visitor)):
    visitor.chat.clear()
    return visitor.chat.state()


@router.post("/messages/{message_id}/react")
def react(message_id: int, req: ReactionRequest, visitor: VisitorSession = Depends(get_visitor)):
    try:
        reactions = visitor.chat.react(message_id, req.kind)
    except KeyError:
        raise HTTPException(404, "Message not found")
    except ValueError as e:
        raise HTTPException(400, str(e))
    return {"message_id": message_id, "reactions": reactions.model_dump()}


@router.post("/messages/{message_id}/retry")
def retry_message(message_id: int, visitor: VisitorSession = Depends(get_visitor)):
    if visitor.chat.waiting:
        raise HTTPException(409, "The assistant is still answering")
    try:
        visitor.chat.retry(message_id)
    except KeyError:
        raise HTTPException(404, "Message not found")
    except ValueError as e:
        raise HTTPException(400, str(e))
    return visitor.chat.state()


@router.delete("/error")
def dismiss_error(visitor: VisitorSession = Depends(get_visitor)):
    visitor.chat.dismiss_error()
    return visitor.chat.state()
