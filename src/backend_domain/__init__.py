"""backend-domain: domain model, business rules and persistence contracts for
customer accounts and MFA methods.
"""

from .__version__ import __version__

__all__ = ["__version__"]
