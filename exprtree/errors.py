"""Construction errors for expression trees."""


class InvalidConstructionError(ValueError):
  """Raised when a node cannot be built from the given parts"""


class MissingOperandError(InvalidConstructionError):
  pass


class InvalidOperandError(InvalidConstructionError):
  pass


class InvalidOperatorError(InvalidConstructionError):
  pass


class InvalidFunctionNameError(InvalidConstructionError):
  pass


class SharedNodeError(InvalidConstructionError):
  """A child node is already owned by another parent"""
