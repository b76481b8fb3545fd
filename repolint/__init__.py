"""repolint - audit a repository tree against a declarative ruleset."""

__version__ = "0.1.0"

from .engine import Linter, lint  # noqa: E402
from .file_system import FileSystem  # noqa: E402
from .models import Evaluation, Result, Rule  # noqa: E402
from .ruleset import RulesetError, load_ruleset  # noqa: E402

__all__ = [
    "Evaluation",
    "FileSystem",
    "Linter",
    "Result",
    "Rule",
    "RulesetError",
    "__version__",
    "lint",
    "load_ruleset",
]
