"""Feature catalog: the static category -> feature mapping.

The catalog is immutable configuration; it is built once (usually
``DEFAULT_CATALOG``) and passed explicitly to the scaffolder.
"""

from __future__ import annotations

from collections.abc import Iterator

from pydantic import BaseModel, ConfigDict, field_validator

DEFAULT_SUBDIRECTORIES: tuple[str, ...] = (
    "controllers",
    "routes",
    "models",
    "utils",
    "middleware",
)


class FeatureCatalog(BaseModel):
    """Ordered mapping of category name to feature names.

    Feature names must be unique across the whole catalog because they are
    used on their own to build file paths.
    """

    model_config = ConfigDict(frozen=True)

    categories: dict[str, tuple[str, ...]]

    @field_validator("categories")
    @classmethod
    def _validate_unique_features(
        cls, value: dict[str, tuple[str, ...]]
    ) -> dict[str, tuple[str, ...]]:
        seen: dict[str, str] = {}
        for category, features in value.items():
            if not category.strip():
                raise ValueError("category names must be non-empty")
            for feature in features:
                if not feature.strip():
                    raise ValueError(f"empty feature name in category '{category}'")
                if feature in seen:
                    raise ValueError(
                        f"duplicate feature '{feature}' in categories "
                        f"'{seen[feature]}' and '{category}'"
                    )
                seen[feature] = category
        return value

    def features(self) -> list[str]:
        """Return every feature name in declaration order."""
        return [f for features in self.categories.values() for f in features]

    def category_of(self, feature: str) -> str | None:
        """Return the category that declares *feature*, or ``None``."""
        for category, features in self.categories.items():
            if feature in features:
                return category
        return None

    def items(self) -> Iterator[tuple[str, tuple[str, ...]]]:
        """Iterate ``(category, features)`` pairs in declaration order."""
        return iter(self.categories.items())

    def __contains__(self, feature: object) -> bool:
        return isinstance(feature, str) and self.category_of(feature) is not None

    def __len__(self) -> int:
        return sum(len(features) for features in self.categories.values())


DEFAULT_CATALOG = FeatureCatalog(
    categories={
        "auth": (
            "auth", "signin", "password-reset", "email-verify", "otp", "oauth",
            "roles", "permissions", "login", "register", "logout", "forgot-password",
        ),
        "user": ("profiles", "update-user", "user-block", "avatar"),
        "crud": ("crud", "soft-delete", "pagination", "search", "relation"),
        "comments": ("comments", "reactions", "report"),
        "media": ("upload", "image-resize", "video-upload", "s3-upload"),
        "security": ("rate-limit", "api-key", "cors", "security-headers"),
        "admin": ("admin", "analytics", "audit-log"),
        "api": ("api", "graphql", "swagger", "versioning"),
        "smart": ("chatbot", "ai-search"),
        "devops": ("docker", "env", "seeder", "cron", "logger"),
        "business": ("payment", "subscription", "invoice"),
        "notifications": ("email-service", "sms", "notifications", "push"),
    }
)
