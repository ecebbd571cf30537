"""
Exception classes for the catalog client.
"""


class CatalogClientError(Exception):
    """Base exception for catalog client errors"""
    pass


class GatewayError(CatalogClientError):
    """
    Raised when a request to the product API does not succeed.

    Covers connection failures, timeouts, non-2xx responses and
    bodies that are not valid JSON. status_code is set when the
    server answered.
    """

    def __init__(self, message, status_code=None):
        super().__init__(message)
        self.status_code = status_code


class FormValidationError(CatalogClientError):
    """
    Raised when the product form cannot be turned into a request.

    This occurs when:
    - the name is empty after trimming
    - weight or price is not a number
    """
    pass
