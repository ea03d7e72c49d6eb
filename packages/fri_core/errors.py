from typing import Optional, Dict, Any


class FRIBaseError(Exception):
    """
    Top-level exception for the FirstRound interview project.
    Every custom exception must inherit from this class.

    Attributes:
        code (str): error identifier (e.g. 'CONF_ERROR')
        message (str): human readable message
        details (Optional[Dict[str, Any]]): extra debugging information
    """
    def __init__(
        self,
        code: str,
        message: str,
        details: Optional[Dict[str, Any]] = None
    ):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(f"[{code}] {message}")


class ConfigurationError(FRIBaseError):
    """Raised when settings fail to load or validate."""
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(code="CONF_ERROR", message=message, details=details)


class InvalidInputError(FRIBaseError):
    """Raised when an operation receives structurally invalid input."""
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(code="INPUT_ERROR", message=message, details=details)


class EmptyTranscriptError(FRIBaseError):
    """Raised when an answer transcript is empty or whitespace only."""
    def __init__(self, message: str = "No answer recorded. Please record your answer before submitting.",
                 details: Optional[Dict[str, Any]] = None):
        super().__init__(code="ANSWER_EMPTY", message=message, details=details)


class InvalidStateError(FRIBaseError):
    """Raised when an operation is not allowed in the current session or flow state."""
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(code="STATE_ERROR", message=message, details=details)


class SessionNotFoundError(FRIBaseError):
    """Raised when a session id is unknown to the state repository."""
    def __init__(self, session_id: str):
        super().__init__(
            code="SESSION_NOT_FOUND",
            message=f"Session {session_id} not found",
            details={"session_id": session_id}
        )
