"""Rich console output."""

from clarityclaim.console.logger import ClaimsConsole

__all__ = ["ClaimsConsole"]
