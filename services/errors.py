from typing import Optional


class StoreError(Exception):
    """Raised when a Post Store operation fails"""

    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status = status
