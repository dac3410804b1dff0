class TagError(Exception):
    """Base class for every failure raised while computing a tag."""


class UnsupportedScheme(TagError, ValueError):
    pass


class ParseFailure(TagError, ValueError):
    pass


class ComputeFailure(TagError):
    pass


class UnsupportedVersionType(ComputeFailure, ValueError):
    def __init__(self, value, accepted):
        self.value = value
        self.accepted = tuple(accepted)
        super().__init__(
            f"Unsupported version type '{value}'. "
            f"Must be one of ({', '.join(self.accepted)})"
        )
