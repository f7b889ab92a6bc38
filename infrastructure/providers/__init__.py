from .frankfurter import FrankfurterProvider

__all__ = ['FrankfurterProvider']
