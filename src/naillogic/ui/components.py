"""Reusable UI pieces for the Nail Logic Gradio interface."""

from html import escape

import gradio as gr

from naillogic.core.studio import StudioLink, StudioProfile

from .models import GENERATE_LABEL

# Small glyphs standing in for the icon set on the Gradio page
ICON_GLYPHS = {
    "phone": "☎",
    "instagram": "◎",
    "star": "★",
    "map-pin": "⌖",
    "youtube": "▶",
    "message-square": "✎",
}


def render_link_button(link: StudioLink) -> str:
    """Render one outbound link as an HTML button."""
    glyph = ICON_GLYPHS.get(link.icon, "•")
    description = (
        f'<span class="nl-link-desc">{escape(link.description)}</span>' if link.description else ""
    )
    return (
        f'<a class="nl-link" href="{escape(link.url, quote=True)}" '
        f'target="_blank" rel="noopener noreferrer">'
        f'<span class="nl-link-icon">{glyph}</span>'
        f'<span class="nl-link-text"><span class="nl-link-label">{escape(link.label)}</span>'
        f"{description}</span></a>"
    )


def render_links_html(profile: StudioProfile) -> str:
    """Render the studio's vertical link list."""
    buttons = "\n".join(render_link_button(link) for link in profile.links)
    return f'<nav class="nl-links">\n{buttons}\n</nav>'


def render_header_markdown(profile: StudioProfile) -> str:
    return f"# {profile.name}\n### By {profile.owner}"


def render_concept_html(payload: str) -> str:
    """Render the generated design, using the data URI as the image source."""
    return (
        f'<figure class="nl-concept"><img src="{escape(payload, quote=True)}" '
        f'alt="Concept Art"></figure>'
    )


class AtelierUI:
    """The Design Atelier form: prompt input, generate button and result area.

    Also carries the optional suggestion row (mood input and suggest button).
    """

    def __init__(self, owner_first_name: str):
        with gr.Group():
            gr.Markdown(
                "## The Design Atelier\n"
                "Describe your mood or outfit, and our AI will visualize a bespoke "
                "nail art concept for your next appointment."
            )
            self.prompt = gr.Textbox(
                label="Your Vision",
                placeholder="e.g. Marble texture with gold foil accents...",
                lines=1,
            )
            self.generate_btn = gr.Button(GENERATE_LABEL, variant="primary", interactive=False)
            self.status = gr.Markdown(value="")
            self.image = gr.HTML(value="", visible=False)
            self.caption = gr.Markdown(
                value=f"Capture this image and share it with {owner_first_name} for your booking.",
                visible=False,
            )

        with gr.Accordion("Need inspiration?", open=False):
            with gr.Row():
                self.mood = gr.Textbox(label="Mood", placeholder="e.g. autumn wedding", lines=1)
                self.suggest_btn = gr.Button("Suggest a Design")
            self.suggestion = gr.Markdown(value="")
