"""
Base class for Value Objects.

Value Objects are immutable and compared by their attributes, not by identity.

Example:
    @dataclass(frozen=True)
    class ReviewReceipt(ValueObject):
        card_id: CardId
        is_correct: bool
"""


class ValueObject:
    """
    Base class for Value Objects in the domain model.

    Subclasses should be decorated with @dataclass(frozen=True)
    and validate themselves in __post_init__.
    """

    def __repr__(self) -> str:
        attrs = ", ".join(f"{k}={v!r}" for k, v in self.__dict__.items())
        return f"{self.__class__.__name__}({attrs})"

    def to_primitive(self) -> object:
        """
        Convert to a primitive Python value for serialization.

        Single-attribute value objects collapse to that attribute.
        """
        values = list(self.__dict__.values())
        if len(values) == 1:
            return values[0]
        return dict(self.__dict__)
