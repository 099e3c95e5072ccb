from tickets.handlers.views import PurchaseView

__all__ = ["PurchaseView"]
