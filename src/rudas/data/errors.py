"""Exceptions raised while constructing labeled data structures."""


class LengthMismatch(ValueError):
    """Raised when a value sequence and a label sequence differ in length."""

    def __init__(self, values_length: int, labels_length: int) -> None:
        self.values_length = values_length
        self.labels_length = labels_length
        super().__init__(
            "Length of data and label should be equal "
            f"(got {values_length} values and {labels_length} labels)."
        )


__all__ = ["LengthMismatch"]
