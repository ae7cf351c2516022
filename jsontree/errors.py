class JsonTreeError(Exception):
    pass


class ConfigurationError(JsonTreeError):
    pass


class CyclicStructureError(JsonTreeError):
    def __init__(self, path: str) -> None:
        self.path = path
        location = path or "<root>"
        super().__init__(f"Value at {location} contains a reference to one of its ancestors.")


class UnsupportedValueError(JsonTreeError, TypeError):
    pass


class InputError(JsonTreeError):
    pass
