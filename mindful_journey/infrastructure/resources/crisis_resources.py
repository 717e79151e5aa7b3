"""Crisis support directory and the banners shown for each risk tier."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from mindful_journey.core.entities import RiskLevel


@dataclass(frozen=True)
class HelplineResource:
    name: str
    phone: str
    description: str
    available: str = "24/7"
    contact_type: str = "call"
    urgent: bool = False
    demographic: Optional[str] = None


@dataclass(frozen=True)
class OnlineResource:
    name: str
    url: str
    description: str


@dataclass(frozen=True)
class CrisisBanner:
    """Copy displayed when a risk tier is detected."""

    level: RiskLevel
    title: str
    message: str
    urgent: bool


CRISIS_RESOURCES: tuple[HelplineResource, ...] = (
    HelplineResource(
        name="988 Suicide & Crisis Lifeline",
        phone="988",
        description="Free and confidential emotional support 24/7",
        urgent=True,
    ),
    HelplineResource(
        name="Crisis Text Line",
        phone="741741",
        description="Text HOME for crisis support",
        contact_type="text",
        urgent=True,
    ),
    HelplineResource(
        name="National Domestic Violence Hotline",
        phone="1-800-799-7233",
        description="Support for domestic violence survivors",
        urgent=True,
    ),
    HelplineResource(
        name="SAMHSA National Helpline",
        phone="1-800-662-4357",
        description="Treatment referral and information service",
    ),
)

SPECIALIZED_RESOURCES: tuple[HelplineResource, ...] = (
    HelplineResource(
        name="Trevor Project",
        phone="1-866-488-7386",
        description="Crisis intervention for LGBTQ+ youth",
        demographic="LGBTQ+",
    ),
    HelplineResource(
        name="Veterans Crisis Line",
        phone="1-800-273-8255",
        description="Support for veterans and their families",
        demographic="Veterans",
    ),
    HelplineResource(
        name="Trans Lifeline",
        phone="877-565-8860",
        description="Support for transgender individuals",
        demographic="Transgender",
    ),
    HelplineResource(
        name="National Sexual Assault Hotline",
        phone="1-800-656-4673",
        description="Support for sexual assault survivors",
        demographic="Survivors",
    ),
)

ONLINE_RESOURCES: tuple[OnlineResource, ...] = (
    OnlineResource(
        name="Crisis Chat",
        url="https://suicidepreventionlifeline.org/chat/",
        description="Online chat with crisis counselors",
    ),
    OnlineResource(
        name="7 Cups",
        url="https://www.7cups.com/",
        description="Free emotional support from trained listeners",
    ),
    OnlineResource(
        name="BetterHelp",
        url="https://www.betterhelp.com/",
        description="Professional online therapy (paid service)",
    ),
    OnlineResource(name="NAMI", url="https://nami.org/", description="Mental health education and support groups"),
)

_BANNERS: dict[RiskLevel, CrisisBanner] = {
    RiskLevel.HIGH: CrisisBanner(
        level=RiskLevel.HIGH,
        title="🚨 Crisis Support Needed",
        message=(
            "I'm very concerned about what you've shared. Your life has value and help is "
            "available right now."
        ),
        urgent=True,
    ),
    RiskLevel.MEDIUM: CrisisBanner(
        level=RiskLevel.MEDIUM,
        title="⚠️ Additional Support Recommended",
        message=(
            "It sounds like you're going through a really difficult time. Please consider "
            "reaching out for professional support."
        ),
        urgent=False,
    ),
    RiskLevel.LOW: CrisisBanner(
        level=RiskLevel.LOW,
        title="💛 Support Available",
        message=(
            "I can hear that things are challenging right now. Remember that support is "
            "available when you need it."
        ),
        urgent=False,
    ),
}


def banner_for(level: RiskLevel) -> Optional[CrisisBanner]:
    """Return the banner for ``level``, or ``None`` when nothing should be shown."""

    return _BANNERS.get(level)


__all__ = [
    "CRISIS_RESOURCES",
    "CrisisBanner",
    "HelplineResource",
    "ONLINE_RESOURCES",
    "OnlineResource",
    "SPECIALIZED_RESOURCES",
    "banner_for",
]
