"""Form-local status shared by the add and edit workflows."""

from __future__ import annotations

from dataclasses import dataclass

GENERIC_FAILURE = "Request failed"


@dataclass
class FormStatus:
    """What a form shows about its last submission.

    ``error_message`` holds the server's text when it sent one, otherwise a
    generic failure text. ``failed`` is set for every kind of failure.

    Example:
        >>> from podcache.models.form import FormStatus
        >>> status = FormStatus()
        >>> status.begin()
        >>> status.in_flight
        True
        >>> status.fail("name already exists")
        >>> (status.in_flight, status.success, status.error_message)
        (False, False, 'name already exists')
    """

    in_flight: bool = False
    success: bool = False
    failed: bool = False
    error_message: str = ""

    def begin(self) -> None:
        self.in_flight = True
        self.success = False
        self.failed = False
        self.error_message = ""

    def succeed(self) -> None:
        self.in_flight = False
        self.success = True
        self.failed = False
        self.error_message = ""

    def fail(self, message: str | None = None) -> None:
        self.in_flight = False
        self.success = False
        self.failed = True
        self.error_message = message or GENERIC_FAILURE

    def reset(self) -> None:
        self.in_flight = False
        self.success = False
        self.failed = False
        self.error_message = ""
