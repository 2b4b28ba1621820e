from typing import Optional


class TreeBuildError(Exception):
    """
    Base exception for failures that abort a directory scan.

    Problems below the root never raise; they become error nodes in the tree.
    """

    pass


class RootNotAccessibleError(TreeBuildError):
    """
    Exception raised when the chosen root directory cannot be stat'ed or listed.

    Attributes:
        path (str): The root path that could not be accessed.
        reason (str): Description of the underlying operating system error.

    Example:
        >>> error = RootNotAccessibleError("/missing", "No such file or directory")
        >>> str(error)
        'Cannot access root folder /missing: No such file or directory'
    """

    def __init__(self, path: str, reason: str) -> None:
        """
        Initialize the exception with the failing path and reason.

        Args:
            path (str): The root path that could not be accessed.
            reason (str): Description of the underlying error.
        """
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot access root folder {path}: {reason}")


class TreeValidationError(ValueError):
    """
    Exception raised when a deserialized object is not a valid tree.

    Attributes:
        message (str): What is wrong with the object.
        location (str): JSON-style location of the offending node, ``$`` for the root.

    Example:
        >>> error = TreeValidationError("'name' must be a string", "$.children[2]")
        >>> str(error)
        "Invalid tree at $.children[2]: 'name' must be a string"
    """

    def __init__(self, message: str, location: Optional[str] = None) -> None:
        """
        Initialize the exception.

        Args:
            message (str): What is wrong with the object.
            location (str, optional): Location of the offending node. Defaults to the root.
        """
        self.message = message
        self.location = location or "$"
        super().__init__(f"Invalid tree at {self.location}: {message}")
