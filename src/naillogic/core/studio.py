"""Studio identity and the outbound link catalogue.

The link list is static data: it is rendered as buttons by both the HTML page
and the Gradio Atelier, and served as JSON from ``GET /api/config``.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class StudioLink(BaseModel):
    """One outbound link on the studio page.

    Attributes:
        label: Button text.
        url: Destination URL.
        icon: Icon name (lucide icon set naming, e.g. ``"instagram"``).
        description: Optional one-line subtitle.
    """

    label: str = Field(..., description="Button text.")
    url: str = Field(..., description="Destination URL.")
    icon: str = Field(..., description="Icon name, e.g. 'instagram'.")
    description: str | None = Field(default=None, description="Optional subtitle.")


class StudioProfile(BaseModel):
    """Studio identity shown in the page header, plus its links."""

    name: str
    owner: str
    initials: str
    whatsapp_number: str
    links: list[StudioLink] = Field(default_factory=list)

    @property
    def booking_url(self) -> str:
        """WhatsApp chat link used for bookings."""
        return f"https://wa.me/{self.whatsapp_number}"

    @property
    def owner_first_name(self) -> str:
        return self.owner.split()[0] if self.owner.strip() else self.owner


WHATSAPP_NUMBER = "917016531812"


def default_profile() -> StudioProfile:
    """Return the Nail Logic studio profile with its six links, in page order."""
    profile = StudioProfile(
        name="Nail Logic",
        owner="Miral Mehta",
        initials="NL",
        whatsapp_number=WHATSAPP_NUMBER,
    )
    profile.links = [
        StudioLink(
            label="Book Appointment",
            url=profile.booking_url,
            icon="phone",
            description="Direct booking via WhatsApp",
        ),
        StudioLink(
            label="Portfolio",
            url="https://www.instagram.com/naillogic_?igsh=Z3QzYjdpMjZkZjF2&utm_source=qr",
            icon="instagram",
            description="Latest works on Instagram",
        ),
        StudioLink(
            label="Client Reviews",
            url="https://share.google/atYnn1ueXubRQMgyN",
            icon="star",
            description="Read 5-star experiences",
        ),
        StudioLink(
            label="Salon Location",
            url="https://maps.app.goo.gl/cuYYxd4jJe3t3JSw6?g_st=ipc",
            icon="map-pin",
            description="Navigate to studio",
        ),
        StudioLink(
            label="Tutorials",
            url="https://youtube.com/@naillogic7171?si=Y5URwuhWRpIMt8MC",
            icon="youtube",
            description="Watch on YouTube",
        ),
        StudioLink(
            label="Write a Review",
            url="https://search.google.com/local/writereview?placeid=ChIJ3-d4949ZYzkRls9rK18u2TI",
            icon="message-square",
            description="Share your experience",
        ),
    ]
    return profile
