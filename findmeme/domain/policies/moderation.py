# findmeme/domain/policies/moderation.py
from __future__ import annotations

from typing import FrozenSet

from findmeme.domain.enums.meme_status import MemeStatus
from findmeme.domain.errors import ValidationError

# Status a fresh user submission always starts in.
SUBMISSION_STATUS = MemeStatus.pending

# Status the column falls back to for rows inserted without a submission context.
LEGACY_INSERT_STATUS = MemeStatus.approved

# The only status anonymous and non-admin callers ever see.
PUBLIC_STATUS = MemeStatus.approved

# Targets a moderator may move a meme to. Nothing moves back to pending.
MODERATION_TARGETS: FrozenSet[MemeStatus] = frozenset({MemeStatus.approved, MemeStatus.rejected})


def check_transition(current: MemeStatus, target: MemeStatus) -> bool:
    """
    Validate a moderation transition.

    Returns True when the status actually changes and False for a no-op
    (already in the target state). Raises ValidationError when the target
    is not a moderation outcome.

    Re-moderation (approved <-> rejected) is allowed.
    """
    target = MemeStatus(target)
    if target not in MODERATION_TARGETS:
        raise ValidationError(f"Cannot move a meme to '{target.value}'")
    return MemeStatus(current) != target
