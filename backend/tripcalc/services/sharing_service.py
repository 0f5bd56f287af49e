"""
Sharing and visibility rules for trips.

A trip's sharing state has two independent axes, the public flag and the
share token:

    is_public  share_token  meaning
    False      None         private, never shared
    False      set          public link revoked, token kept for re-enabling
    True       set          shared via public link
    True       None         pending, only valid before persistence

Read access may come from ownership, the public flag or an explicit share.
Write access comes from ownership only.
"""
import enum
import secrets
import string
from dataclasses import dataclass
from typing import Callable, Iterable, Optional

SHARE_TOKEN_ALPHABET = string.ascii_letters + string.digits + "-_"
DEFAULT_SHARE_TOKEN_LENGTH = 12


class Visibility(str, enum.Enum):
    """Named rows of the sharing state table."""
    PRIVATE = "private"
    REVOKED = "revoked"
    PUBLIC = "public"
    PENDING = "pending"


@dataclass(frozen=True)
class Principal:
    """Authenticated caller as supplied by the identity provider."""
    id: int
    is_admin: bool = False
    is_premium: bool = False


@dataclass(frozen=True)
class ShareState:
    """Public flag and share token of a trip."""
    is_public: bool
    share_token: Optional[str]

    @property
    def visibility(self) -> Visibility:
        if self.is_public:
            return Visibility.PUBLIC if self.share_token else Visibility.PENDING
        return Visibility.REVOKED if self.share_token else Visibility.PRIVATE


def generate_share_token(length: int = DEFAULT_SHARE_TOKEN_LENGTH) -> str:
    """Generate an opaque, URL-safe share token of fixed length."""
    return "".join(secrets.choice(SHARE_TOKEN_ALPHABET) for _ in range(length))


def share_state_of(trip) -> ShareState:
    return ShareState(is_public=bool(trip.is_public), share_token=trip.share_token or None)


def set_public(
    trip,
    want_public: bool,
    token_factory: Callable[[], str] = generate_share_token
) -> ShareState:
    """
    Compute the sharing state after toggling a trip's public flag.

    A token is generated only when the trip goes public without one. An
    existing token is never replaced, and going private keeps it, so links
    already handed out work again once sharing is re-enabled.
    """
    token = trip.share_token or None
    if want_public and token is None:
        token = token_factory()
    return ShareState(is_public=bool(want_public), share_token=token)


def is_owner(trip, viewer: Optional[Principal]) -> bool:
    return viewer is not None and viewer.id == trip.user_id


def has_explicit_share(viewer: Optional[Principal], explicit_shares: Iterable) -> bool:
    if viewer is None:
        return False
    return any(share.shared_with_id == viewer.id for share in explicit_shares)


def can_read(trip, viewer: Optional[Principal], explicit_shares: Iterable) -> bool:
    """
    Whether a viewer may read a trip.

    Args:
        trip: Object exposing user_id and is_public
        viewer: Calling principal, None for anonymous
        explicit_shares: Share grants of this trip, each exposing shared_with_id

    Returns:
        True for the owner, for anyone when the trip is public, and for
        users holding an explicit share
    """
    if is_owner(trip, viewer):
        return True
    if trip.is_public:
        return True
    return has_explicit_share(viewer, explicit_shares)


def can_write(trip, viewer: Optional[Principal]) -> bool:
    """Only the owner may mutate a trip, whatever its sharing state."""
    return is_owner(trip, viewer)


def is_admin(principal: Optional[Principal]) -> bool:
    return principal is not None and principal.is_admin


def has_premium(principal: Optional[Principal]) -> bool:
    """Premium features are available to premium users and to admins."""
    return principal is not None and (principal.is_premium or principal.is_admin)
