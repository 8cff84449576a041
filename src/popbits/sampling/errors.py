class InvalidRequest(ValueError):
    """Raised when a width/popcount combination cannot be sampled.

    This is always a caller error: the width is not one of the supported
    fixed widths, or the popcount is not an integer in [0, width].
    """

    def __init__(self, message, width=None, popcount=None):
        super().__init__(message)
        self.width = width
        self.popcount = popcount
