"""
Error handling for sway-helper commands.

Every user-visible failure carries a code, a message naming the
display/container/direction involved, and a suggested recovery action.
"""

from enum import Enum
from typing import Optional, Dict, Any, List


class ErrorCode(Enum):
    """
    Error codes for sway-helper.

    Custom codes:
    - 1100-1199: Configuration errors
    - 1400-1499: Sway IPC errors
    - 1600-1699: Precondition errors
    """

    # Configuration errors (1100-1199)
    CONFIG_LOAD_FAILED = 1100

    # Sway IPC errors (1400-1499)
    SWAY_IPC_FAILED = 1401
    OUTPUT_NOT_FOUND = 1404

    # Precondition errors (1600-1699)
    NO_FOCUSED_CONTAINER = 1600
    NO_FOCUSED_WORKSPACE = 1601
    SAME_DISPLAY = 1602
    TOO_MANY_OUTPUTS = 1603


class SwayHelperError(Exception):
    """Base exception for sway-helper errors."""

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        suggestion: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize sway-helper error.

        Args:
            code: Error code from ErrorCode enum
            message: Human-readable error message
            suggestion: Suggested recovery action
            context: Additional context for debugging
        """
        self.code = code
        self.message = message
        self.suggestion = suggestion
        self.context = context or {}
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert error to dictionary for structured output.

        Returns:
            Error dictionary with code, message, suggestion, and context
        """
        result = {
            "code": self.code.value,
            "message": self.message
        }

        if self.suggestion:
            result["suggestion"] = self.suggestion

        if self.context:
            result["context"] = self.context

        return result


class PreconditionError(SwayHelperError):
    """The window manager state does not allow the requested command."""


class NoFocusedContainerError(PreconditionError):
    """No container is focused."""

    def __init__(self, direction: Optional[str] = None):
        context = {"direction": direction} if direction else {}
        super().__init__(
            code=ErrorCode.NO_FOCUSED_CONTAINER,
            message="No focused container" + (f" to resize {direction}" if direction else ""),
            suggestion="Focus a window before resizing it",
            context=context
        )


class NoFocusedWorkspaceError(PreconditionError):
    """No workspace is focused."""

    def __init__(self, direction: Optional[str] = None):
        context = {"direction": direction} if direction else {}
        super().__init__(
            code=ErrorCode.NO_FOCUSED_WORKSPACE,
            message="No focused workspace" + (f" for resize {direction}" if direction else ""),
            suggestion="Focus a workspace before resizing",
            context=context
        )


class DisplayNotFoundError(PreconditionError):
    """A display identifier did not match any output."""

    def __init__(self, identifier: str, available: List[str]):
        """
        Initialize display lookup error.

        Args:
            identifier: Display name or description given by the user
            available: Names of the outputs sway reported
        """
        super().__init__(
            code=ErrorCode.OUTPUT_NOT_FOUND,
            message=f"Display '{identifier}' not found",
            suggestion=(
                f"Use one of: {', '.join(available)}" if available
                else "Check that the display is connected and enabled"
            ),
            context={"display": identifier, "available": available}
        )


class SameDisplayError(PreconditionError):
    """A display cannot be positioned relative to itself."""

    def __init__(self, identifier: str):
        super().__init__(
            code=ErrorCode.SAME_DISPLAY,
            message=f"Cannot position display '{identifier}' relative to itself",
            suggestion="Name two different displays",
            context={"display": identifier}
        )


class TooManyOutputsError(PreconditionError):
    """Display placement only supports two outputs."""

    def __init__(self, outputs: List[str]):
        super().__init__(
            code=ErrorCode.TOO_MANY_OUTPUTS,
            message=f"Display placement supports exactly two outputs, found {len(outputs)}: {', '.join(outputs)}",
            suggestion="Disable the extra outputs (disabled outputs are ignored) or position them in the sway config",
            context={"outputs": outputs}
        )


class SwayIPCError(SwayHelperError):
    """Sway IPC communication error."""

    def __init__(self, operation: str, reason: str):
        """
        Initialize Sway IPC error.

        Args:
            operation: IPC operation that failed
            reason: Reason for failure
        """
        super().__init__(
            code=ErrorCode.SWAY_IPC_FAILED,
            message=f"Sway IPC {operation} failed: {reason}",
            suggestion="Ensure Sway is running and IPC socket is accessible",
            context={"operation": operation, "reason": reason}
        )


class ConfigLoadError(SwayHelperError):
    """Configuration loading error."""

    def __init__(self, file_path: str, reason: str):
        """
        Initialize configuration load error.

        Args:
            file_path: Path to configuration file
            reason: Reason for load failure
        """
        super().__init__(
            code=ErrorCode.CONFIG_LOAD_FAILED,
            message=f"Failed to load configuration from {file_path}: {reason}",
            suggestion="Check file syntax and permissions",
            context={"file_path": file_path, "reason": reason}
        )
