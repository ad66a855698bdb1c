"""Navigation label models for documentation menus.

A navigation table maps a route slug to the title shown in the docs sidebar.
Insertion order is menu order.
"""

from collections.abc import Iterable, Iterator, Mapping

from pydantic import BaseModel, field_validator

from agent_network.errors import NavigationLookupError


class NavigationEntry(BaseModel):
    """A single menu item: route slug and display title."""

    model_config = {"frozen": True, "extra": "forbid"}

    slug: str  # e.g. "pinecone"
    title: str  # e.g. "PineconeVector"

    @field_validator("slug", "title")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must be a non-empty string")
        return value


class NavigationTable(Mapping[str, str]):
    """Read-only, ordered lookup from slug to display title.

    Behaves like the plain ``{slug: title}`` mapping the docs generator
    expects, except that a miss raises NavigationLookupError (a KeyError).
    """

    def __init__(self, entries: Iterable[NavigationEntry | tuple[str, str]]) -> None:
        titles: dict[str, str] = {}
        for item in entries:
            entry = item if isinstance(item, NavigationEntry) else NavigationEntry(
                slug=item[0], title=item[1]
            )
            if entry.slug in titles:
                raise ValueError(f"Duplicate navigation slug: {entry.slug!r}")
            titles[entry.slug] = entry.title
        self._titles = titles

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, str]) -> "NavigationTable":
        """Build a table from a ``{slug: title}`` mapping, keeping its order."""
        return cls(mapping.items())

    def __getitem__(self, slug: str) -> str:
        try:
            return self._titles[slug]
        except KeyError:
            raise NavigationLookupError(slug) from None

    def __iter__(self) -> Iterator[str]:
        return iter(self._titles)

    def __len__(self) -> int:
        return len(self._titles)

    def __repr__(self) -> str:
        return f"NavigationTable({len(self)} entries)"

    def title(self, slug: str) -> str:
        """Return the display title for a slug.

        Raises:
            NavigationLookupError: if the slug is not in the table.
        """
        return self[slug]

    def label_or_slug(self, slug: str) -> str:
        """Return the title, or the slug itself when it has no entry."""
        return self._titles.get(slug, slug)

    def menu(self) -> list[NavigationEntry]:
        """Entries in menu order."""
        return [NavigationEntry(slug=slug, title=title) for slug, title in self._titles.items()]

    def to_dict(self) -> dict[str, str]:
        """Plain mapping for the docs-site generator."""
        return dict(self._titles)
