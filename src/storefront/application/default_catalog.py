"""Built-in content: the seed catalog and the journal articles.

The catalog seeds the store on first run only. Once a catalog document
exists it is the source of truth, even if the admin emptied it.
"""

from __future__ import annotations

from storefront.domain.model.article import Article
from storefront.domain.model.product import Category, Product
from storefront.domain.model.value_objects import Money

_IMAGE_BASE = "https://images.unsplash.com"


def default_products() -> list[Product]:
    """Return fresh copies of the seed catalog."""
    return [
        Product(
            id="p1",
            name="Aura Buds",
            tagline="Quiet, carried with you.",
            description="True wireless earbuds with adaptive noise cancelling.",
            long_description=(
                "Aura Buds pair a warm, natural sound profile with adaptive noise "
                "cancelling that listens to the room around you. A stone-finish case "
                "holds three extra charges."
            ),
            price=Money.of("149"),
            category=Category.AUDIO,
            image_url=f"{_IMAGE_BASE}/photo-1606220588913-b3aacb4d2f46",
            features=["Adaptive noise cancelling", "24h with case", "Wireless charging"],
        ),
        Product(
            id="p2",
            name="Aura Field",
            tagline="Sound for the whole room.",
            description="A compact speaker in woven linen and oak.",
            price=Money.of("229"),
            category=Category.AUDIO,
            image_url=f"{_IMAGE_BASE}/photo-1545454675-3531b543be5d",
            features=["360-degree sound", "Multi-room pairing", "Solid oak base"],
        ),
        Product(
            id="p3",
            name="Aura Band",
            tagline="Rest, measured gently.",
            description="A screenless wellness band that tracks sleep and recovery.",
            price=Money.of("199"),
            category=Category.WEARABLE,
            image_url=f"{_IMAGE_BASE}/photo-1575311373937-040b8e1fd5b6",
            features=["Sleep staging", "7-day battery", "Water resistant"],
        ),
        Product(
            id="p4",
            name="Aura Sleeve",
            tagline="A softer place for your phone.",
            description="A felted wool sleeve with a leather pull tab.",
            price=Money.of("49"),
            category=Category.MOBILE,
            image_url=f"{_IMAGE_BASE}/photo-1601784551446-20c9e07cdbdb",
            features=["Merino wool felt", "Vegetable-tanned leather"],
        ),
        Product(
            id="p5",
            name="Aura Dock",
            tagline="Charge without the clutter.",
            description="A weighted ceramic charging stand for phone and buds.",
            price=Money.of("89"),
            category=Category.MOBILE,
            image_url=f"{_IMAGE_BASE}/photo-1586816879360-004f5b0c51e3",
            features=["15W wireless charging", "Glazed ceramic", "Non-slip base"],
        ),
        Product(
            id="p6",
            name="Aura Lumen",
            tagline="Light that follows the sun.",
            description="A bedside lamp that shifts colour temperature through the day.",
            price=Money.of("29"),
            category=Category.HOME,
            image_url=f"{_IMAGE_BASE}/photo-1507473885765-e6ed057f782c",
            features=["Circadian dimming", "Sunrise alarm", "Touch controls"],
        ),
    ]


ARTICLES: tuple[Article, ...] = (
    Article(
        id="1",
        title="The Art of Silence",
        date="April 12, 2025",
        excerpt="Why the quietest rooms make the best listening spaces.",
        image_url=f"{_IMAGE_BASE}/photo-1493663284031-b7e3aefcae8e",
        content=(
            "Good sound starts with the space around it. Soft surfaces, fewer "
            "reflections and a little distance from the wall do more than any "
            "equaliser setting."
        ),
    ),
    Article(
        id="2",
        title="Materials That Age Well",
        date="March 28, 2025",
        excerpt="Oak, wool and ceramic, and why we keep coming back to them.",
        image_url=f"{_IMAGE_BASE}/photo-1513506003901-1e6a229e2d15",
        content=(
            "Every Aura object is made from materials that gain character with "
            "use. Oak darkens, wool softens and glaze keeps its depth."
        ),
    ),
    Article(
        id="3",
        title="Designing for Rest",
        date="March 3, 2025",
        excerpt="Technology that steps back when you need it to.",
        image_url=f"{_IMAGE_BASE}/photo-1540518614846-7eded433c457",
        content=(
            "A wellness band without a screen is a deliberate choice: the data "
            "waits for you in the morning instead of asking for attention at night."
        ),
    ),
)
