"""Root of the collectionops error hierarchy.

Operations fail fast: a violated input check raises one of the subclasses in
``operation_exceptions`` before any element is touched, and invalid settings
raise ``ConfigurationException``. Catching ``CollectionOpsException`` covers
all of them, while errors raised inside caller-supplied selectors pass through
untouched.
"""

from typing import Any


class CollectionOpsException(Exception):
    """Error raised by a collection operation or the settings layer.

    Attributes:
        message: Description of the failed check
        error_code: Stable identifier such as ``EMPTY_INPUT`` or ``KEY_COLLISION``
        context: Offending parameter names and values, never whole collections
    """

    def __init__(
        self, message: str, error_code: str | None = None, context: dict[str, Any] | None = None
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.context = context or {}

    def __str__(self) -> str:
        # "[EMPTY_INPUT] find_max requires ..." when a code is set
        if self.error_code:
            return f"[{self.error_code}] {self.message}"
        return self.message
