"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from sodfa.config import AuthSettings, Settings, StorySettings
from sodfa.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        """Provide auth settings."""
        return settings.auth

    @provide(scope=Scope.APP)
    def provide_story_settings(self, settings: Settings) -> StorySettings:
        """Provide story settings."""
        return settings.stories
