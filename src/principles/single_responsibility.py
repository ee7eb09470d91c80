"""Single Responsibility Principle (SRP).

A class should have only one reason to change. `UserManagerWithoutSRP` mixes
user storage with email; the compliant version gives each concern its own
class.
"""

from __future__ import annotations

from adapters.console_output import default_output
from core.config import AppSettings
from core.domain.models import User
from core.domain.principle import Principle
from core.interfaces.demonstration import Demonstration
from core.interfaces.output import Output


# Violation ------------------------------------------------------------------


class UserManagerWithoutSRP:
    """Changes whenever storage logic or email logic changes."""

    def __init__(self, output: Output) -> None:
        self._output = output

    def save_user(self, user: User) -> None:
        self._output.emit(f"User saved: {user.name}")

    def send_welcome_mail(self, user: User) -> None:
        self._output.emit(f"sending welcome email to {user.email}")

    def delete_user(self, user: User) -> None:
        self._output.emit(f"User deleted: {user.name}")


# Compliant ------------------------------------------------------------------


class UserDatabase:
    """User storage only."""

    def __init__(self, output: Output) -> None:
        self._output = output

    def save_user(self, user: User) -> None:
        self._output.emit(f"User saved to database: {user.name}")

    def delete_user(self, user: User) -> None:
        self._output.emit(f"User deleted from database: {user.name}")


class EmailService:
    """Email only."""

    def __init__(self, output: Output) -> None:
        self._output = output

    def send_welcome_mail(self, user: User) -> None:
        self._output.emit(f"Welcome email sent to: {user.email}")


def _demo_user(settings: AppSettings) -> User:
    return User(name=settings.demo_user_name, email=settings.demo_user_email)


class SingleResponsibilityDemo(Demonstration):
    principle = Principle.SINGLE_RESPONSIBILITY
    title = "Single Responsibility"
    summary = "User storage and welcome emails live in separate classes."

    def run_violation(self, output: Output, settings: AppSettings) -> None:
        user = _demo_user(settings)
        manager = UserManagerWithoutSRP(output)
        manager.save_user(user)
        manager.send_welcome_mail(user)
        manager.delete_user(user)

    def run_compliant(self, output: Output, settings: AppSettings) -> None:
        user = _demo_user(settings)
        database = UserDatabase(output)
        email = EmailService(output)
        database.save_user(user)
        email.send_welcome_mail(user)
        database.delete_user(user)


def main() -> None:
    SingleResponsibilityDemo().run_compliant(default_output(), AppSettings())


if __name__ == "__main__":
    main()
