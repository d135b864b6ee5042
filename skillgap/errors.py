"""Domain exceptions raised by the skill-gap services.

Services raise these; routers translate them into HTTPException responses.
"""

from pathlib import Path


class InvalidInputError(ValueError):
    """A request field is missing or malformed."""

    def __init__(self, field: str, message: str):
        self.field = field
        self.message = message
        super().__init__(f"{field}: {message}")


class RoleNotFoundError(LookupError):
    """Target role is absent from the role-skill catalog."""

    def __init__(self, role: str, valid_roles: list[str]):
        self.role = role
        self.valid_roles = valid_roles
        super().__init__(
            f"Role '{role}' not found. Valid roles: {', '.join(valid_roles)}"
        )


class DataLoadError(RuntimeError):
    """A static role table could not be read or parsed."""

    def __init__(self, path: Path | str, reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Failed to load role table {self.path}: {reason}")


class NewsUnavailableError(RuntimeError):
    """The upstream news API failed, timed out or returned garbage."""

    def __init__(self, message: str, timed_out: bool = False):
        self.timed_out = timed_out
        super().__init__(message)


class NewsItemNotFoundError(LookupError):
    """The upstream news API has no item with the requested id."""

    def __init__(self, item_id: int):
        self.item_id = item_id
        super().__init__(f"News item {item_id} not found")
