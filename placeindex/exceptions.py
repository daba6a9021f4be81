class PlaceIndexError(Exception):
    """Base exception for placeindex"""
    pass

class ValidationError(PlaceIndexError):
    """Raised when command flags are inconsistent or malformed"""
    pass

class ConfigurationError(PlaceIndexError):
    """Raised when the config file, profile, region or index name is missing"""
    pass

class SerializationError(PlaceIndexError):
    """Raised when a response cannot be encoded as JSON"""
    pass

class BackendError(PlaceIndexError):
    """Raised when the Location Service call fails; keeps the original error"""

    def __init__(self, operation: str, error: Exception):
        super().__init__(str(error))
        self.operation = operation
        self.error = error
