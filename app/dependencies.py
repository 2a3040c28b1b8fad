from dataclasses import dataclass

from fastapi import Header

from app.config import settings


@dataclass(frozen=True)
class Viewer:
    """
    The identity of whoever is making the request.

    Supplied by the surrounding application (here via request headers);
    the services never look it up themselves.  Usage in a router::

        @router.post("/articles/{article_id}/like")
        async def like(article_id: str, viewer: Viewer = Depends(get_viewer)):
            ...

    Attributes
    ----------
    name:
        Display name of the signed-in viewer, or ``None`` when anonymous.
    avatar_ref:
        Avatar URL for the viewer.  Falls back to
        ``settings.DEFAULT_AVATAR_URL`` when the viewer has none.
    """

    name: str | None = None
    avatar_ref: str = ""

    @property
    def is_authenticated(self) -> bool:
        return bool(self.name and self.name.strip())


def get_viewer(
    x_viewer_name: str | None = Header(
        None,
        description="Display name of the signed-in viewer. Omit for anonymous access.",
    ),
    x_viewer_avatar: str | None = Header(
        None,
        description="Avatar URL of the signed-in viewer.",
    ),
) -> Viewer:
    return Viewer(
        name=x_viewer_name,
        avatar_ref=x_viewer_avatar or settings.DEFAULT_AVATAR_URL,
    )
