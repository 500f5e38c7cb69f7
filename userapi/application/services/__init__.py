from .password_hashing import WerkzeugPasswordHasher
from .tokens import JwtTokenIssuer

__all__ = ["JwtTokenIssuer", "WerkzeugPasswordHasher"]
