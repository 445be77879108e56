"""Gradio UI for the Nail Logic studio page and Design Atelier."""

import logging

import gradio as gr

from naillogic.core.config import NailLogicConfig, config
from naillogic.core.gemini_client import (
    DesignSuggestionClient,
    ImageGenerationClient,
    create_genai_client,
)
from naillogic.core.studio import StudioProfile, default_profile

from .components import AtelierUI, render_header_markdown, render_links_html
from .handlers import (
    generate_design,
    lock_generate,
    release_controller,
    suggest_design,
    toggle_generate_button,
    unlock_generate,
)

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

CUSTOM_CSS = """
.nl-links { display: flex; flex-direction: column; gap: 12px; }
.nl-link {
    display: flex;
    align-items: center;
    gap: 14px;
    padding: 14px 18px;
    border: 1px solid #e7e5e4;
    border-radius: 10px;
    background: #ffffff;
    color: #1c1917;
    text-decoration: none;
}
.nl-link:hover { border-color: #a8a29e; }
.nl-link-icon { font-size: 1.2em; color: #78716c; }
.nl-link-text { display: flex; flex-direction: column; }
.nl-link-label { font-weight: 600; }
.nl-link-desc { font-size: 0.8em; color: #78716c; }
.nl-concept { margin: 0; }
.nl-concept img { width: 100%; aspect-ratio: 1 / 1; object-fit: cover; border-radius: 10px; }
"""


def create_ui(
    settings: NailLogicConfig | None = None,
    profile: StudioProfile | None = None,
    image_client: ImageGenerationClient | None = None,
    suggestion_client: DesignSuggestionClient | None = None,
) -> tuple[gr.Blocks, str]:
    """Create the Gradio UI.

    The clients are built once here and shared by every session; each
    session gets its own controller through ``gr.State``.

    Returns:
        Tuple of (Gradio Blocks app, custom CSS string)
    """
    settings = settings or config
    profile = profile or default_profile()

    if image_client is None or suggestion_client is None:
        sdk_client = create_genai_client(settings)
        if image_client is None:
            image_client = ImageGenerationClient.from_config(settings, sdk_client=sdk_client)
        if suggestion_client is None:
            suggestion_client = DesignSuggestionClient.from_config(
                settings, sdk_client=sdk_client, owner=profile.owner_first_name
            )

    app = gr.Blocks(title=f"{profile.name} | {profile.owner}")

    with app:
        # Session state - one controller per visitor, created on first submit
        # and reset when Gradio deletes the closed session's state
        controller_state = gr.State(None, delete_callback=release_controller)

        gr.Markdown(render_header_markdown(profile))
        gr.HTML(render_links_html(profile))

        atelier = AtelierUI(profile.owner_first_name)

        async def generate_wrapper(prompt, controller):
            return await generate_design(prompt, controller, image_client)

        async def suggest_wrapper(mood):
            return await suggest_design(mood, suggestion_client)

        atelier.prompt.change(
            fn=toggle_generate_button,
            inputs=[atelier.prompt, controller_state],
            outputs=[atelier.generate_btn],
        )

        atelier.generate_btn.click(
            fn=lock_generate,
            inputs=[atelier.prompt, controller_state],
            outputs=[atelier.generate_btn, atelier.status, atelier.image, atelier.caption],
        ).then(
            fn=generate_wrapper,
            inputs=[atelier.prompt, controller_state],
            outputs=[atelier.image, atelier.status, atelier.caption, controller_state],
        ).then(
            fn=unlock_generate,
            inputs=[atelier.prompt, controller_state],
            outputs=[atelier.generate_btn],
        )

        atelier.suggest_btn.click(
            fn=suggest_wrapper,
            inputs=[atelier.mood],
            outputs=[atelier.suggestion],
        )

    return app, CUSTOM_CSS


def main():
    """Main entry point for the Gradio interface."""
    logger.info("Starting Nail Logic Design Atelier...")
    logger.info(f"Configuration: {config.model_dump()}")

    app, custom_css = create_ui()

    logger.info(f"Launching Gradio UI on {config.server_host}:{config.server_port}")

    app.launch(
        server_name=config.server_host,
        server_port=config.server_port,
        share=config.gradio_share,
        show_error=True,
        inbrowser=False,
        css=custom_css,
    )


if __name__ == "__main__":
    main()
