import logging
import threading
from typing import Optional
from langchain_groq import ChatGroq
from langchain_core.messages import HumanMessage, SystemMessage
from config.settings import GROQ_API_KEY, GROQ_MODEL, GROQ_MAX_TOKENS, GROQ_TEMPERATURE, GROQ_TIMEOUT

logger = logging.getLogger(__name__)


class MissingCredentialError(RuntimeError):
    pass


class CompletionBot:
    """Single-turn completion against Groq: one system prompt, one user message."""

    def __init__(self, api_key: Optional[str] = GROQ_API_KEY, model: str = GROQ_MODEL, chat_model=None):
        self.api_key = api_key
        self.model = model
        self._chat_model = chat_model
        self.lock = threading.Lock()

    @property
    def is_configured(self) -> bool:
        return self._chat_model is not None or bool(self.api_key)

    def ensure_chat_model(self):
        if not self.is_configured:
            raise MissingCredentialError("Groq API Key is not configured")
        with self.lock:
            if self._chat_model is None:
                self._chat_model = ChatGroq(
                    api_key=self.api_key,
                    model=self.model,
                    max_tokens=GROQ_MAX_TOKENS,
                    temperature=GROQ_TEMPERATURE,
                    timeout=GROQ_TIMEOUT,
                    max_retries=0,
                )
        return self._chat_model

    def complete(self, system_prompt: str, user_message: str) -> str:
        chat_model = self.ensure_chat_model()
        messages = [SystemMessage(content=system_prompt), HumanMessage(content=user_message)]
        response = chat_model.invoke(messages)

        content = response.content if isinstance(response.content, str) else ""
        if not content.strip():
            raise ValueError("Empty completion from Groq")
        return content
