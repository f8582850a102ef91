"""Hypermedia link model."""

from urllib.parse import parse_qs, urlsplit

from pydantic import BaseModel, ConfigDict


class Link(BaseModel):
    """Link attached to a collection or resource (``{"rel", "href"}``)."""

    rel: str
    href: str

    model_config = ConfigDict(frozen=True)

    def marker(self) -> str | None:
        """Value of the ``marker`` query parameter in href, if any."""
        values = parse_qs(urlsplit(self.href).query).get("marker")
        return values[0] if values else None


def next_marker(links: list[Link]) -> str | None:
    """Resume marker carried by the ``next`` link, or None at end of listing."""
    for link in links:
        if link.rel == "next":
            return link.marker()
    return None
