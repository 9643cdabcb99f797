from .billing import BillingServiceClient, DisabledBillingClient

__all__ = ["BillingServiceClient", "DisabledBillingClient"]
