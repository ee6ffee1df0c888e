class RecordStoreError(Exception):
    """Raised for store-level failures whose message is safe to show to the caller."""
