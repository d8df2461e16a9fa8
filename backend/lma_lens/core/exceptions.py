
class ClauseExtractionError(Exception):
    """Raised when clause extraction is handed something other than document text."""
