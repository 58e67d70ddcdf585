"""Domain error taxonomy."""


class BookingMarketplaceError(Exception):
    """Base class for errors raised by the booking backend."""


class NotFoundError(BookingMarketplaceError):
    """Raised when a target document does not exist in the store."""

    def __init__(self, collection: str, document_id: str) -> None:
        super().__init__(f"{collection} document not found: {document_id}")
        self.collection = collection
        self.document_id = document_id


class StoreUnavailableError(BookingMarketplaceError):
    """Raised when the document store cannot commit or serve a request."""


class EmailDeliveryError(BookingMarketplaceError):
    """Raised when the email capability fails to accept a message."""
