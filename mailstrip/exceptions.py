class MailstripError(Exception):
    """Base exception class for parser errors."""
    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class LineTooLongError(MailstripError, ValueError):
    """Raised when a single body line exceeds the scanner's byte limit."""
    def __init__(self, line_number: int, size: int, limit: int):
        self.line_number = line_number
        self.size = size
        self.limit = limit
        super().__init__(
            f"Line {line_number} is {size} bytes, exceeding the {limit}-byte limit."
        )
