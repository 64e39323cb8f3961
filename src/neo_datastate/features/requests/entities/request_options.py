"""Per-executor configuration."""

from dataclasses import dataclass, fields
from typing import Any, Awaitable, Callable, Optional, Union

from ....config.settings import DataStateSettings, get_settings
from ....core.exceptions import ConfigurationError

SuccessCallback = Callable[[Any], Union[None, Awaitable[None]]]
ErrorCallback = Callable[[str, BaseException], Union[None, Awaitable[None]]]


@dataclass(frozen=True)
class RequestOptions:
    """Configuration surface of a request executor.

    Attributes:
        on_success: Called with the result after a successful execution
        on_error: Called with the display message and the raw error
        show_success_toast: Notify success through the notifier
        show_error_toast: Notify failures through the notifier
        success_message: Message sent with the success notification
        initial_data: Data exposed while idle and restored by reset()
        discard_stale: Only let the most recently issued execution write state
    """

    on_success: Optional[SuccessCallback] = None
    on_error: Optional[ErrorCallback] = None
    show_success_toast: bool = False
    show_error_toast: bool = True
    success_message: str = "Operation successful"
    initial_data: Any = None
    discard_stale: bool = False

    @classmethod
    def from_settings(
        cls,
        settings: Optional[DataStateSettings] = None,
        **overrides: Any
    ) -> 'RequestOptions':
        """Build options from settings, with explicit keyword overrides.

        Raises:
            ConfigurationError: If an override names an unknown option
        """
        settings = settings or get_settings()
        known = {f.name for f in fields(cls)}
        unknown = set(overrides) - known
        if unknown:
            raise ConfigurationError(
                f"Unknown request options: {', '.join(sorted(unknown))}",
                details={"unknown": sorted(unknown)},
            )

        values = {
            "show_success_toast": settings.show_success_toast,
            "show_error_toast": settings.show_error_toast,
            "success_message": settings.success_message,
            "discard_stale": settings.discard_stale_responses,
        }
        values.update(overrides)
        return cls(**values)
