import logging
from typing import Callable, List, Optional
from config.settings import OWNER_SHORT_NAME
from bots.base_bot import CompletionBot
from core.system_prompt import build_system_prompt
from models.chat import ChatMessage, ChatRole, QuickAction, ReactionKind, Reactions
from models.portfolio import PortfolioSnapshot

logger = logging.getLogger(__name__)

GREETING = (f"👋 Hi! I'm {OWNER_SHORT_NAME}'s AI assistant. I can tell you about their projects, "
            "skills, experience, or how to get in touch. What would you like to know?")
FALLBACK_RESPONSE = "I'm sorry, I'm having trouble connecting right now. Please try again in a moment!"
ERROR_BANNER = "Failed to get AI response. Please try again."

QUICK_ACTIONS = [
    QuickAction(label=f"About {OWNER_SHORT_NAME}", message=f"Tell me about {OWNER_SHORT_NAME}'s background and experience"),
    QuickAction(label="Projects", message=f"What projects has {OWNER_SHORT_NAME} worked on?"),
    QuickAction(label="Skills", message=f"What are {OWNER_SHORT_NAME}'s technical skills?"),
    QuickAction(label="Contact", message=f"How can I contact {OWNER_SHORT_NAME}?"),
]


class ChatWidget:
    """
    Linear conversation with the portfolio assistant.

    Each send makes one completion call carrying only the system prompt and
    the new user message. The portfolio content behind the system prompt is
    snapshotted once per conversation. Every failure, including a missing
    API key, ends in the same fallback reply.
    """

    def __init__(self, bot: CompletionBot, snapshot_provider: Optional[Callable[[], PortfolioSnapshot]] = None):
        self.bot = bot
        self.snapshot_provider = snapshot_provider
        self.snapshot: Optional[PortfolioSnapshot] = None
        self.is_open = False
        self.waiting = False
        self.error: Optional[str] = None
        self.quick_actions = QUICK_ACTIONS
        self._seed()

    def _seed(self):
        self._last_id = 0
        self.messages: List[ChatMessage] = []
        self._append(ChatRole.ASSISTANT, GREETING)

    def _append(self, role: ChatRole, content: str, is_error: bool = False) -> ChatMessage:
        self._last_id += 1
        message = ChatMessage(
            id=self._last_id,
            role=role,
            content=content,
            reactions=Reactions() if role == ChatRole.ASSISTANT and not is_error else None,
            is_error=is_error,
        )
        self.messages.append(message)
        return message

    # Visibility
    def open(self):
        self.is_open = True

    def close(self):
        self.is_open = False

    def toggle(self):
        self.is_open = not self.is_open

    # Conversation
    def _conversation_snapshot(self) -> Optional[PortfolioSnapshot]:
        if self.snapshot is None and self.snapshot_provider:
            try:
                self.snapshot = self.snapshot_provider()
            except Exception as e:
                logger.warning(f"Portfolio content unavailable for chat prompt: {e}")
        return self.snapshot

    def send_message(self, text: str, snapshot: Optional[PortfolioSnapshot] = None) -> Optional[ChatMessage]:
        text = (text or "").strip()
        if not text:
            return None

        self.error = None
        self._append(ChatRole.USER, text)
        self.waiting = True
        try:
            prompt = build_system_prompt(snapshot or self._conversation_snapshot())
            reply = self.bot.complete(prompt, text)
        except Exception as e:
            logger.error(f"Groq API Error: {e}")
            self.error = ERROR_BANNER
            return self._append(ChatRole.ASSISTANT, FALLBACK_RESPONSE, is_error=True)
        finally:
            self.waiting = False

        return self._append(ChatRole.ASSISTANT, reply)

    def send_quick_action(self, index: int) -> Optional[ChatMessage]:
        return self.send_message(self.quick_actions[index].message)

    def retry(self, message_id: int) -> Optional[ChatMessage]:
        """Drop a fallback reply and resend the user message that preceded it."""
        index = self._index_of(message_id)
        if not self.messages[index].is_error:
            raise ValueError("Only failed replies can be retried")

        previous = next((m for m in reversed(self.messages[:index]) if m.role == ChatRole.USER), None)
        del self.messages[index]
        if previous is None:
            return None
        # send_message appends the user turn again
        self.messages.remove(previous)
        return self.send_message(previous.content)

    def clear(self):
        self._seed()
        self.error = None
        self.snapshot = None

    def dismiss_error(self):
        self.error = None

    # Reactions
    def _index_of(self, message_id: int) -> int:
        for i, message in enumerate(self.messages):
            if message.id == message_id:
                return i
        raise KeyError(message_id)

    def react(self, message_id: int, kind: ReactionKind) -> Reactions:
        message = self.messages[self._index_of(message_id)]
        if message.role != ChatRole.ASSISTANT:
            raise ValueError("Only assistant messages can be rated")

        reactions = message.reactions or Reactions()
        if ReactionKind(kind) == ReactionKind.THUMBS_UP:
            reactions = Reactions(thumbs_up=not reactions.thumbs_up, thumbs_down=False)
        else:
            reactions = Reactions(thumbs_up=False, thumbs_down=not reactions.thumbs_down)
        message.reactions = reactions
        return reactions

    def state(self) -> dict:
        return {
            "is_open": self.is_open,
            "waiting": self.waiting,
            "error": self.error,
            "messages": [m.model_dump(mode="json") for m in self.messages],
            "quick_actions": [a.model_dump() for a in self.quick_actions],
        }
