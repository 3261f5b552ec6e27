class DomainError(Exception):
    """Base class for all domain-level errors."""

    pass


class AttachmentRejected(DomainError):
    """Uploaded file is not one of the accepted image formats."""

    message = "Invalid file type. Only JPG, PNG, and WebP images are allowed."

    def __init__(self) -> None:
        super().__init__(self.message)


class AttachmentTooLarge(DomainError):
    """Uploaded file exceeds the size ceiling."""

    def __init__(self, limit_bytes: int) -> None:
        self.limit_bytes = limit_bytes
        megabytes = limit_bytes // (1024 * 1024)
        self.message = f"File too large. Maximum size is {megabytes}MB."
        super().__init__(self.message)


class TransportFailure(DomainError):
    """An outbound email could not be handed to the mail transport."""

    pass


class RateLimitExceeded(DomainError):
    """Client went over a request window."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message
