import logging
import secrets
from typing import Callable, Optional, Tuple
from config.settings import SESSION_TTL_SECONDS, MAX_SESSIONS
from bots.base_bot import CompletionBot
from bots.chatbot import ChatWidget
from core.contact_wizard import ContactWizard
from core.interest_form import InterestForm
from managers.base_manager import BaseManager
from models.portfolio import PortfolioSnapshot
from services.portfolio_api import PortfolioClient

logger = logging.getLogger(__name__)


class VisitorSession:
    """Everything one visitor has typed or said; lost when the session expires."""

    def __init__(self, client: PortfolioClient, bot: CompletionBot,
                 snapshot_provider: Optional[Callable[[], PortfolioSnapshot]] = None):
        self.wizard = ContactWizard(client)
        self.interest = InterestForm(client)
        self.chat = ChatWidget(bot, snapshot_provider)

    def drain_notifications(self):
        return self.wizard.drain_notifications() + self.interest.drain_notifications()


class SessionManager(BaseManager):
    def __init__(self, client: PortfolioClient, bot: CompletionBot,
                 snapshot_provider: Optional[Callable[[], PortfolioSnapshot]] = None,
                 maxsize: int = MAX_SESSIONS, ttl: int = SESSION_TTL_SECONDS):
        super().__init__(lambda: VisitorSession(client, bot, snapshot_provider), maxsize=maxsize, ttl=ttl)

    def get_or_create(self, session_id: Optional[str]) -> Tuple[str, VisitorSession]:
        if session_id:
            session = self.get(session_id)
            if session is not None:
                return session_id, session

        session_id = secrets.token_urlsafe(24)
        logger.info("Created visitor session")
        return session_id, self.create(session_id)
