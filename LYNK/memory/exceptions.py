class MemoryStoreError(Exception):
    """Base exception for canonical memory errors"""

    pass


class InvalidMemoryValueError(MemoryStoreError, ValueError):
    """Raised when a raw value has no usable canonical form"""

    def __init__(self, raw: str):
        self.raw = raw
        super().__init__(f"Value {raw!r} normalizes to an empty string")
