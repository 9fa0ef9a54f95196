"""Grammar matchers. Importing this package registers every matcher."""
from . import constraint, entity, members, relationship  # noqa: F401
