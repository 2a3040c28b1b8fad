# Services package.
#
# Each module exposes a focused set of plain functions that encapsulate
# the business rules for one part of the Article aggregate:
#
#   article_service  - like toggling, draft creation and preview
#   comment_service  - append-only, most-recent-first comment creation
#   listing_service  - search + category filtering of article summaries
#
# Every mutation takes the article snapshot and an explicit
# ``viewer_is_authenticated`` flag, and returns a new snapshot.  A
# rejected mutation returns its input unchanged rather than raising, so
# the caller decides whether to prompt for sign-in.
