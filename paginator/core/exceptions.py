class InvalidArgument(ValueError):
    """Raised when a page number, page size, total or query value is not usable"""
