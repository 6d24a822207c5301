class ParseError(ValueError):
    """ Raised when an amount, date or time string does not match its required format """


class ValidationError(ValueError):
    """ Raised when a receipt is structurally or semantically invalid """


class NotFoundError(LookupError):
    """ Raised when no receipt is stored under the requested id """

    def __init__(self, receipt_id: str):
        super().__init__(f"receipt id not found ({receipt_id})")
        self.receipt_id = receipt_id
