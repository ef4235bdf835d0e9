"""Custom exceptions for the session context."""


class InvalidTransition(RuntimeError):
    """
    Raised when a session action is not allowed in the current state.

    Attributes:
        action: The attempted action (e.g., 'choose_sector')
        state: Value of the SessionState the session was in
    """

    def __init__(self, action: str, state: str):
        self.action = action
        self.state = state
        super().__init__(f"Cannot {action.replace('_', ' ')} while session is {state}")
