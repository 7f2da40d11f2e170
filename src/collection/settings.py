"""Upstream settings shared by the fetcher, extractor and mapper."""

from dataclasses import dataclass

from common.env import env


@dataclass(frozen=True)
class CollectionSettings:
    """Where the collection lives and how it paginates."""

    base_url: str = "https://collections.louvre.fr"
    ark_prefix: str = "ark:/53355"
    page_size: int = 20
    user_agent: str = "museum-api/0.1.0"

    @classmethod
    def from_env(cls) -> "CollectionSettings":
        return cls(
            base_url=env.collection_base_url(),
            ark_prefix=env.ark_prefix(),
            page_size=env.page_size(),
            user_agent=env.user_agent(),
        )

    @property
    def search_url(self) -> str:
        return f"{self.base_url}/recherche"

    def artwork_path(self, ark_id: str) -> str:
        """Path of an artwork record relative to the base URL."""
        return f"/{self.ark_prefix}/{ark_id}"

    def artwork_url(self, ark_id: str) -> str:
        """Public detail-page URL of an artwork."""
        return f"{self.base_url}{self.artwork_path(ark_id)}"
