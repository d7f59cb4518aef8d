"""Drafting of listing descriptions and tenant messages with a hosted model.

Both operations are best effort: any failure (missing API key, network
error, empty reply) is logged and replaced by a fixed fallback string.
"""

import logging
import os
from typing import Any, Optional

import anthropic

from rentflow.domain.entities import Tone

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "claude-sonnet-4-6"

DESCRIPTION_EMPTY = "Could not generate description."
DESCRIPTION_ERROR = "Error generating description. Please try again."
DESCRIPTION_FALLBACKS = frozenset({DESCRIPTION_EMPTY, DESCRIPTION_ERROR})
MESSAGE_EMPTY = "Could not generate message."
MESSAGE_ERROR = "Error generating message."


class TextGenerator:
    """Thin wrapper over an Anthropic messages client."""

    def __init__(self, client: Optional[Any] = None, model: Optional[str] = None):
        """Initialize text generator.

        Args:
            client: Object exposing ``messages.create`` (an ``anthropic.Anthropic``
                instance). Created lazily from ANTHROPIC_API_KEY when omitted.
            model: Model name; defaults to RENTFLOW_MODEL or DEFAULT_MODEL
        """
        self._client = client
        self.model = model or os.environ.get("RENTFLOW_MODEL", DEFAULT_MODEL)

    @property
    def client(self) -> Any:
        if self._client is None:
            api_key = os.environ.get("ANTHROPIC_API_KEY")
            if not api_key:
                raise RuntimeError("ANTHROPIC_API_KEY is not set")
            self._client = anthropic.Anthropic(api_key=api_key)
        return self._client

    def _complete(self, prompt: str, max_tokens: int = 300) -> str:
        message = self.client.messages.create(
            model=self.model,
            max_tokens=max_tokens,
            messages=[{"role": "user", "content": prompt}],
        )
        parts = [block.text for block in message.content if getattr(block, "type", "text") == "text"]
        return "".join(parts).strip()

    def generate_property_description(
        self,
        name: str,
        property_type: str,
        bedrooms: int,
        bathrooms: float,
        features: str,
    ) -> str:
        """Write a short rental listing description."""
        prompt = (
            f'Write a short, catchy rental listing description (max 80 words) for a property named "{name}".\n'
            f"Details: {property_type}, {bedrooms} bedrooms, {bathrooms} bathrooms.\n"
            f"Key features: {features}.\n"
            "Tone: Professional yet inviting."
        )
        try:
            text = self._complete(prompt)
        except Exception:
            logger.exception("Description generation failed for property '%s'", name)
            return DESCRIPTION_ERROR
        return text or DESCRIPTION_EMPTY

    def draft_tenant_message(self, tenant_name: str, topic: str, tone: Tone | str) -> str:
        """Draft a short SMS/email style message to a tenant."""
        try:
            prompt = (
                f"Draft a short message (SMS/Email style, max 60 words) to a tenant named {tenant_name}.\n"
                f"Topic: {topic}.\n"
                f"Tone: {Tone(tone).value}.\n"
                "Do not include subject lines or placeholders."
            )
            text = self._complete(prompt)
        except Exception:
            logger.exception("Message drafting failed for tenant '%s'", tenant_name)
            return MESSAGE_ERROR
        return text or MESSAGE_EMPTY
