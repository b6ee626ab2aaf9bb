"""Visibility policy for post listings.

Pure rules only; the SQL rendering of a policy lives in the persistence
layer so that exclusions are applied before the limit + 1 fetch.
"""

from dataclasses import dataclass

from photofeed.domain.enums import PostState


@dataclass(frozen=True)
class VisibilityPolicy:
    """Which posts a listing hides from the viewer."""

    exclude_deleted: bool
    exclude_reported_by_viewer: bool


# Main feed and profile grid: hide deleted posts and posts the viewer reported.
FEED_VISIBILITY = VisibilityPolicy(exclude_deleted=True, exclude_reported_by_viewer=True)
# Comments and follow lists apply no visibility filtering.
UNFILTERED = VisibilityPolicy(exclude_deleted=False, exclude_reported_by_viewer=False)
# Opening, liking, commenting on or reporting one post by id: deleted posts
# are gone, but a report does not hide the post from its own reporter.
DIRECT_ACCESS = VisibilityPolicy(exclude_deleted=True, exclude_reported_by_viewer=False)


def is_visible(
    state: PostState,
    reported_by_viewer: bool,
    policy: VisibilityPolicy,
) -> bool:
    """Return True if a post in this state is shown to the viewer under policy.

    Reports only suppress for the viewer who filed them.
    """
    if policy.exclude_deleted and state is PostState.DELETED:
        return False
    if policy.exclude_reported_by_viewer and reported_by_viewer:
        return False
    return True
