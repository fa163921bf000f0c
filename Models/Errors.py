"""Failures the items gateway turns into a response."""


class ItemsApiError(Exception):
    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class UnsupportedRouteError(ItemsApiError):
    def __init__(self, route_key: str):
        super().__init__(f'Unsupported route: "{route_key}"')
        self.route_key = route_key


class MalformedInputError(ItemsApiError):
    pass


class StoreError(ItemsApiError):
    def __init__(self, operation: str, message: str):
        super().__init__(message)
        self.operation = operation
