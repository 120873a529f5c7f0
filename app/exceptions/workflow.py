"""Join request workflow exceptions."""

from app.exceptions.base import AppException
from app.exceptions.auth import InsufficientPermissionsError


class NotAuthorizedError(InsufficientPermissionsError):
    """Acting volunteer is not the receiver and current owner for this request."""

    def __init__(self, action: str, request_id: int | str):
        """
        Initialize a NotAuthorizedError for a guarded request transition.

        Parameters:
            action (str): The attempted transition (for example, "accept").
            request_id (int | str): Identifier of the request.
        """
        self.action = action
        self.request_id = request_id
        super().__init__(
            f"Only the owner of the requested project may {action} request '{request_id}'"
        )


class InvalidStateError(AppException):
    """Transition attempted from a state that does not allow it."""

    def __init__(self, resource: str, current_state: str, action: str):
        """
        Initialize an InvalidStateError.

        Parameters:
            resource (str): Name of the resource (for example, "VolunteerRequest").
            current_state (str): The state the resource is currently in.
            action (str): The transition that was refused.

        Stores all three values as attributes; the message reads
        "Cannot <action> <resource> in state <current_state>".
        """
        self.resource = resource
        self.current_state = current_state
        self.action = action
        super().__init__(f"Cannot {action} {resource} in state {current_state}")
