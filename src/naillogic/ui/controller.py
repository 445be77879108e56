"""Request lifecycle of the Design Atelier form.

:class:`GenerationRequestController` owns the form's state machine::

    IDLE    --submit(prompt)-->  LOADING
    LOADING --image-->           SUCCESS
    LOADING --no image-->        ERROR
    LOADING --failure-->         ERROR
    SUCCESS --submit(prompt)-->  LOADING   (previous image cleared)
    ERROR   --submit(prompt)-->  LOADING

Blank prompts never leave the current state, and a submission that arrives
while a request is in flight is ignored.  Every failure cause collapses to
the same ERROR state and message.
"""

from __future__ import annotations

import logging

from naillogic.core.gemini_client import ImageGenerationClient

from .models import ERROR_MESSAGE, GenerationSnapshot, GenerationState

logger = logging.getLogger(__name__)


def is_blank_prompt(prompt: str | None) -> bool:
    """True for ``None``, empty and whitespace-only prompts."""
    return not prompt or not prompt.strip()


class GenerationRequestController:
    """Drives an :class:`ImageGenerationClient` on behalf of one form.

    The controller is the only writer of its state.  It does not queue or
    lock: a submission while LOADING is dropped, and the presentation layer
    disables the generate action for the same period.

    Args:
        client: Explicitly constructed image client, owned by the caller.
    """

    def __init__(self, client: ImageGenerationClient) -> None:
        self._client = client
        self._state = GenerationState.IDLE
        self._payload: str | None = None

    @property
    def state(self) -> GenerationState:
        return self._state

    @property
    def payload(self) -> str | None:
        return self._payload

    @property
    def message(self) -> str | None:
        return ERROR_MESSAGE if self._state is GenerationState.ERROR else None

    @property
    def is_busy(self) -> bool:
        """True while a request is in flight."""
        return self._state is GenerationState.LOADING

    def snapshot(self) -> GenerationSnapshot:
        return GenerationSnapshot(state=self._state, payload=self._payload, message=self.message)

    def reset(self) -> None:
        """Return to IDLE and drop any displayed image."""
        self._state = GenerationState.IDLE
        self._payload = None

    async def submit(self, prompt: str | None) -> GenerationSnapshot:
        """Submit a design prompt and wait for its outcome.

        Args:
            prompt: The client's description, as typed.

        Returns:
            Snapshot of the state after the request resolves, or of the
            unchanged state when the submission was ignored.
        """
        if is_blank_prompt(prompt):
            logger.debug("Ignoring blank design prompt")
            return self.snapshot()

        if self.is_busy:
            logger.info("Ignoring design prompt while a request is in flight")
            return self.snapshot()

        self._state = GenerationState.LOADING
        self._payload = None

        try:
            payload = await self._client.generate(prompt)
        except Exception as e:
            logger.error(f"Error generating nail art: {e}", exc_info=True)
            self._state = GenerationState.ERROR
            return self.snapshot()

        if payload is None:
            logger.warning("No image data received for design prompt")
            self._state = GenerationState.ERROR
        else:
            self._payload = payload
            self._state = GenerationState.SUCCESS

        return self.snapshot()
