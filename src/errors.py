"""Error types raised by the generate command.

Every failure in the scaffolding core is terminal: helpers raise one of the
``ScaffoldError`` subclasses below and the command boundary in
``src.generate`` turns it into a diagnostic plus a non-zero exit status.
Nothing below this boundary calls ``sys.exit``.
"""

from __future__ import annotations

from pathlib import Path


class ScaffoldError(Exception):
    """Base class for every fatal generate-command failure.

    Attributes:
        message: Human-readable diagnostic shown to the user.
        exit_code: Process exit status used by the command boundary.
    """

    exit_code: int = 1

    def __init__(self, message: str, *, exit_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        if exit_code is not None:
            self.exit_code = exit_code


class ConfigMissingError(ScaffoldError):
    """``mevn.json`` was not found in the project directory."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(
            "Make sure that you're within a valid MEVN project\n"
            f"Error: No {path.name} file found"
        )


class ConfigInvalidError(ScaffoldError):
    """``mevn.json`` exists but could not be parsed into a ``ProjectConfig``."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Error: Invalid {path.name} file: {reason}")


class SettingsInvalidError(ScaffoldError):
    """A ``MEVN_*`` environment variable holds an unusable value."""

    def __init__(self, variable: str, reason: str) -> None:
        self.variable = variable
        self.reason = reason
        super().__init__(f"Error: Invalid value for {variable}: {reason}")


class IncompatibleTemplateError(ScaffoldError):
    """The project's boilerplate template cannot host the requested files."""

    def __init__(self, template: str) -> None:
        self.template = template
        super().__init__(
            "Warning:- GraphQL boilerplate doesn't include "
            "model, route and controller directories!"
        )


class FileSystemWriteError(ScaffoldError):
    """Copying a template directory or writing a file failed."""

    def __init__(self, path: Path, cause: OSError) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"Error: Could not write {path}: {cause.strerror or cause}")


class DependencyMissingError(ScaffoldError):
    """An executable the command shells out to is not available."""

    def __init__(self, dependency: str, url: str | None = None) -> None:
        self.dependency = dependency
        self.url = url
        message = f"Warning:- {dependency} is required to be installed"
        if url:
            message += (
                f"\nYou need to download {dependency} from the official "
                f"downloads page: {url}"
            )
        super().__init__(message)


class DependencyInstallError(ScaffoldError):
    """The package manager exited non-zero while installing a package."""

    def __init__(self, package: str, returncode: int, stderr: str = "") -> None:
        self.package = package
        self.returncode = returncode
        self.stderr = stderr
        detail = f"\n{stderr}" if stderr else ""
        super().__init__(
            f"Error: Failed to install {package} (exit code {returncode}){detail}"
        )


class PromptAbortedError(ScaffoldError):
    """The user cancelled an interactive prompt."""

    exit_code = 130

    def __init__(self) -> None:
        super().__init__("Aborted.")


class InvalidComponentNameError(ScaffoldError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Error: {name!r} is not a valid component name")


class ComponentExistsError(ScaffoldError):
    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Error: Component {path} already exists in path!")
