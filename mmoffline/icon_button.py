"""Button model whose icon dominates, with the text placed below it."""

from __future__ import annotations

from typing import Optional

__all__ = ["IconButton", "DEFAULT_COEFFICIENT", "DEFAULT_ICON_COEFFICIENT"]

# Share of the button height the icon takes when the button is made empty.
DEFAULT_COEFFICIENT = 0.6
# Share of the button height the icon takes when the button is made with an icon.
DEFAULT_ICON_COEFFICIENT = 0.7


class IconButton:
    """A button whose icon fills a set share of its height.

    ``icon`` is any icon reference, such as a resource path. Without an icon
    the image coefficient defaults to 0.6, with one to 0.7.
    """

    def __init__(
        self,
        icon: Optional[object] = None,
        image_coefficient: Optional[float] = None,
        text: str = "",
    ) -> None:
        if image_coefficient is None:
            image_coefficient = (
                DEFAULT_COEFFICIENT if icon is None else DEFAULT_ICON_COEFFICIENT
            )
        self.icon = icon
        self.image_coefficient = float(image_coefficient)
        self.text = text

    def set_icon(self, icon: object) -> None:
        """Replace the displayed icon."""
        self.icon = icon

    def set_scale_coefficient(self, coefficient: float) -> None:
        """Change the share of the height the icon occupies."""
        self.image_coefficient = float(coefficient)

    def icon_size(self, height: int) -> int:
        """Side of the square icon drawn on a button ``height`` pixels tall."""
        return int(height * self.image_coefficient)