"""Ratings bounded context — media reviews, review votes, and vote scoring.

Handles the review lifecycle for catalogued titles (submit, revise, delete)
and the voting ledger that keeps each review's aggregate counters in step
with the votes cast on it.
"""

from protean.domain import Domain

from ratings.utils.logging import configure_logging, get_logger

# Configure logging for the application
configure_logging()

# Get logger for this module
logger = get_logger(__name__)

# Domain Composition Root
ratings = Domain(name="ratings")
