"""Core DI providers (non-mockable)."""

from dishka import Scope, from_context, provide

from circle.config import CommentSettings, PointsSettings, Settings
from circle.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    ``Settings`` is handed to the container as context when it is built, so
    every section the services see comes from the same object.
    """

    settings = from_context(provides=Settings, scope=Scope.APP)

    @provide(scope=Scope.APP)
    def provide_comment_settings(self, settings: Settings) -> CommentSettings:
        """Provide comment tree settings."""
        return settings.comments

    @provide(scope=Scope.APP)
    def provide_points_settings(self, settings: Settings) -> PointsSettings:
        """Provide points settings."""
        return settings.points
