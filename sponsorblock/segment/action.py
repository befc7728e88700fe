"""Segment action types and the accepted-action flag set.

The action type is declared on submission and recommends how to handle the
segment. See https://wiki.sponsor.ajay.app/w/Types#Action_Type.
"""

from enum import Enum, Flag

from sponsorblock.core.exceptions import UnrecognizedValueError
from sponsorblock.core.flags import flags_to_url_value


class ActionKind(str, Enum):
    """The recommended handling of a segment, valued by its API token."""

    # Skip the section. The default action type.
    SKIP = "skip"
    # Mute the section without skipping.
    MUTE = "mute"
    # A single point to potentially skip *to*.
    POINT_OF_INTEREST = "poi"
    # The label applies to the entire video; carries no time value.
    FULL_VIDEO = "full"

    def __str__(self) -> str:
        return self.value

    @property
    def has_section(self) -> bool:
        """Whether segments of this kind carry a start/end pair."""
        return self in (ActionKind.SKIP, ActionKind.MUTE)


_ACTIONS_BY_TOKEN = {action.value: action for action in ActionKind}


def action_kind_from_str(raw: str) -> ActionKind:
    """
    Look up an action kind by its exact API token.

    Raises:
        UnrecognizedValueError: If the token is not known to this library
    """
    try:
        return _ACTIONS_BY_TOKEN[raw]
    except (KeyError, TypeError):
        raise UnrecognizedValueError("actionType", str(raw)) from None


class AcceptedActions(Flag):
    """The action types to ask for when fetching segments."""

    NONE = 0
    SKIP = 1 << 0
    MUTE = 1 << 1
    POINT_OF_INTEREST = 1 << 2
    FULL_VIDEO = 1 << 3
    ALL = (1 << 4) - 1

    @property
    def action_kind(self) -> ActionKind:
        """The action kind of a single-bit member."""
        return ActionKind[self.name]

    def gen_url_value(self) -> str:
        """Encode as the ``actionTypes`` query value."""
        return flags_to_url_value(self, lambda member: member.action_kind.value)
