class SalesAnalysisError(Exception):
    """Base class for every failure raised by the analysis pipeline."""


class InvalidInputError(SalesAnalysisError, ValueError):
    pass


class MissingStrategyError(SalesAnalysisError, ValueError):
    pass


class InvalidStrategyTypeError(SalesAnalysisError, TypeError):
    pass


class LookupFault(SalesAnalysisError, LookupError):
    """A purchase record references a seller or product that does not exist."""


class UnknownSellerError(LookupFault):
    def __init__(self, seller_id: str) -> None:
        self.seller_id = seller_id
        super().__init__(f"Seller '{seller_id}' not found")


class UnknownProductError(LookupFault):
    def __init__(self, sku: str) -> None:
        self.sku = sku
        super().__init__(f"Product '{sku}' not found")
