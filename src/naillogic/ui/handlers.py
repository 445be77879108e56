"""Gradio event handlers for the Design Atelier.

The generate button runs a three-step chain::

    lock_generate  ->  generate_design  ->  unlock_generate

Locking disables the button before the request starts, so a second click
cannot reach the controller while a request is in flight.
"""

import logging

import gradio as gr

from naillogic.core.gemini_client import DesignSuggestionClient, ImageGenerationClient

from .components import render_concept_html
from .controller import GenerationRequestController, is_blank_prompt
from .models import ERROR_MESSAGE, GENERATE_LABEL, LOADING_LABEL, GenerationSnapshot, GenerationState

logger = logging.getLogger(__name__)

LOADING_STATUS = "*Rendering concept...*"


def ensure_controller(
    controller: GenerationRequestController | None, client: ImageGenerationClient
) -> GenerationRequestController:
    """Return the session's controller, creating it on first use."""
    if controller is None:
        logger.info("Creating Design Atelier controller for new session")
        controller = GenerationRequestController(client)
    return controller


def status_text(snapshot: GenerationSnapshot) -> str:
    """Markdown status line for a snapshot."""
    if snapshot.state is GenerationState.LOADING:
        return LOADING_STATUS
    if snapshot.state is GenerationState.ERROR:
        return snapshot.message or ERROR_MESSAGE
    return ""


def toggle_generate_button(prompt: str, controller: GenerationRequestController | None) -> dict:
    """Enable the generate button only for a non-blank prompt while idle."""
    busy = controller is not None and controller.is_busy
    return gr.update(interactive=not is_blank_prompt(prompt) and not busy)


def lock_generate(
    prompt: str, controller: GenerationRequestController | None
) -> tuple[dict, str | dict, dict, dict]:
    """Disable the button and clear the previous result before a request.

    Returns:
        Tuple of (button_update, status, image_update, caption_update).
        All four are no-op updates when the submission will be ignored.
    """
    if is_blank_prompt(prompt) or (controller is not None and controller.is_busy):
        return gr.update(), gr.update(), gr.update(), gr.update()

    return (
        gr.update(interactive=False, value=LOADING_LABEL),
        LOADING_STATUS,
        gr.update(value="", visible=False),
        gr.update(visible=False),
    )


async def generate_design(
    prompt: str,
    controller: GenerationRequestController | None,
    client: ImageGenerationClient,
) -> tuple[dict, str | dict, dict, GenerationRequestController]:
    """Submit the prompt and map the outcome onto the result area.

    Args:
        prompt: Text from the "Your Vision" box
        controller: Session controller from ``gr.State`` (``None`` on first use)
        client: The app's image client

    Returns:
        Tuple of (image_update, status, caption_update, controller)
    """
    controller = ensure_controller(controller, client)

    # Ignored submissions leave the result area as it is
    if is_blank_prompt(prompt) or controller.is_busy:
        return gr.update(), gr.update(), gr.update(), controller

    snapshot = await controller.submit(prompt)

    if snapshot.state is GenerationState.SUCCESS and snapshot.has_image:
        return (
            gr.update(value=render_concept_html(snapshot.payload), visible=True),
            "",
            gr.update(visible=True),
            controller,
        )

    return (
        gr.update(value="", visible=False),
        status_text(snapshot),
        gr.update(visible=False),
        controller,
    )


def unlock_generate(prompt: str, controller: GenerationRequestController | None) -> dict:
    """Restore the button label and interactivity after a request."""
    busy = controller is not None and controller.is_busy
    return gr.update(value=GENERATE_LABEL, interactive=not is_blank_prompt(prompt) and not busy)


async def suggest_design(mood: str, client: DesignSuggestionClient) -> str:
    """Return a design suggestion for *mood* (blank moods are ignored)."""
    if is_blank_prompt(mood):
        return ""
    return await client.suggest(mood.strip())


def release_controller(controller: GenerationRequestController | None) -> None:
    """Drop a closed session's result when Gradio deletes its state."""
    if controller is not None:
        logger.info("Releasing Design Atelier controller for closed session")
        controller.reset()
