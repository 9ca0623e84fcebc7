class CoercionException(Exception):
    def __init__(self, message: str=None, parameters: object=None):
        super().__init__(message)
        self.parameters = parameters


class IncompatibleParentException(CoercionException):
    def __init__(self, ring_a: object=None, ring_b: object=None):
        super().__init__(f'Incompatible parents {ring_a} and {ring_b}', (ring_a, ring_b))


class NoCommonTypeException(CoercionException):
    def __init__(self, a: object=None, b: object=None):
        super().__init__(f'Unable to promote {a} and {b} to a common ring', (a, b))


class UnsupportedOperationException(NotImplementedError):
    def __init__(self, message: str=None, parameters: object=None):
        super().__init__(message)
        self.parameters = parameters


class NotInvertibleException(ArithmeticError):
    def __init__(self, message: str=None, parameters: object=None):
        super().__init__(message)
        self.parameters = parameters


class DomainException(ValueError):
    def __init__(self, message: str=None, parameters: object=None):
        super().__init__(message)
        self.parameters = parameters
