"""Segment categories and the accepted-category flag set.

See https://wiki.sponsor.ajay.app/w/Segment_Categories for what each
category means.
"""

from enum import Enum, Flag

from sponsorblock.core.exceptions import UnrecognizedValueError
from sponsorblock.core.flags import flags_to_url_value


class Category(str, Enum):
    """The topical classification of a segment, valued by its API token."""

    # A paid promotion, paid referral, or direct advertisement.
    SPONSOR = "sponsor"
    # Unpaid or self promotion: merch, donations, collaborator shout-outs.
    UNPAID_SELF_PROMOTION = "selfpromo"
    # A short reminder to like, subscribe or follow mid-content.
    INTERACTION_REMINDER = "interaction"
    # The point or highlight of the video. Always a single point in time.
    HIGHLIGHT = "poi_highlight"
    # An interval without actual content: a pause, static frame or animation.
    INTERMISSION_INTRO_ANIMATION = "intro"
    # Credits, or when the endcards appear.
    ENDCARDS_CREDITS = "outro"
    # A recap of previous episodes or a preview of what's coming up.
    PREVIEW_RECAP = "preview"
    # Music videos only: a section without music.
    NON_MUSIC = "music_offtopic"
    # A tangent or joke not needed to understand the main content.
    FILLER_TANGENT = "filler"
    # The video showcases a product or service the creator got free access to.
    EXCLUSIVE_ACCESS = "exclusive_access"

    def __str__(self) -> str:
        return self.value


_CATEGORIES_BY_TOKEN = {category.value: category for category in Category}


def category_from_str(raw: str) -> Category:
    """
    Look up a category by its exact API token.

    Raises:
        UnrecognizedValueError: If the token is not known to this library
    """
    try:
        return _CATEGORIES_BY_TOKEN[raw]
    except (KeyError, TypeError):
        raise UnrecognizedValueError("category", str(raw)) from None


class AcceptedCategories(Flag):
    """The categories to ask for when fetching segments."""

    NONE = 0
    SPONSOR = 1 << 0
    UNPAID_SELF_PROMOTION = 1 << 1
    INTERACTION_REMINDER = 1 << 2
    HIGHLIGHT = 1 << 3
    INTERMISSION_INTRO_ANIMATION = 1 << 4
    ENDCARDS_CREDITS = 1 << 5
    PREVIEW_RECAP = 1 << 6
    NON_MUSIC = 1 << 7
    FILLER_TANGENT = 1 << 8
    EXCLUSIVE_ACCESS = 1 << 9
    ALL = (1 << 10) - 1

    @property
    def category(self) -> Category:
        """The category of a single-bit member."""
        return Category[self.name]

    def gen_url_value(self) -> str:
        """Encode as the ``categories`` query value."""
        return flags_to_url_value(self, lambda member: member.category.value)
