"""Lifecycle exceptions."""


class LifecycleError(Exception):
    """Base exception for lifecycle-related errors."""

    pass


class RequirementsError(LifecycleError):
    """
    Raised when activation runs on an unsupported platform.

    Attributes:
        title: Short title for the host error screen
        message: Body explaining the requirement
    """

    def __init__(self, title: str, message: str):
        self.title = title
        self.message = message
        super().__init__(f"{title}\n{message}")


class UninstallError(LifecycleError):
    """Raised by an uninstall pass that could not complete."""

    pass
