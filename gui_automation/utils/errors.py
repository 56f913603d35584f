"""Exceptions raised by the automation layer."""


class AutomationError(Exception):
    """Base exception for all suite failures."""

    pass


class ConfigError(AutomationError, RuntimeError):
    """Configuration file missing, unreadable or holding a bad value."""

    pass


class DriverInitError(AutomationError, RuntimeError):
    """Browser session could not be created."""

    pass


class ElementNotInteractableError(AutomationError):
    """Element was found but the click could not be delivered to it."""

    def __init__(self, selector: str, message: str = "") -> None:
        self.selector = selector
        super().__init__(message or f"Element not interactable: {selector}")


class ClickInterceptedError(ElementNotInteractableError):
    """Another element (ad, banner, modal) received the click instead."""

    def __init__(self, selector: str, message: str = "") -> None:
        super().__init__(selector, message or f"Click intercepted on: {selector}")
