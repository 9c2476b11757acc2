from .review_receipt import ReviewReceipt

__all__ = ["ReviewReceipt"]
