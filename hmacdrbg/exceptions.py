class DrbgError(ValueError):
  """Generator cannot satisfy the request"""

class UnsupportedHashVariant(DrbgError):
  """Hash variant has no default minimum entropy and none was given"""

class ReseedRequired(DrbgError):
  """Reseed counter exhausted, new entropy is required before generating"""

class InsufficientEntropy(DrbgError):
  """Entropy input is shorter than the required minimum"""
